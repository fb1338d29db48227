"""
Markdown to HTML renderer

Ties the rendering passes together:

    raw text
      -> ListReconstructor   (nested <ul>/<ol>/<li>)
      -> RuleTable           (headers, code, emphasis, links, rules, quotes)
      -> paragraphs_wrap     (<p>, <br>)
      -> cleanup_apply       (strip spurious paragraph/line-break markup)
      -> Decorator           (optional md-* class hooks)

Rendering is total: every string maps to some markup, and anything that is
not a string (None included) renders as an empty string. No pass raises.

Example:
    >>> renderer = MarkdownRenderer()
    >>> renderer.render("## Title\\n\\n- one\\n- two")
    '<h2>Title</h2>\\n<ul>\\n<li>one</li>\\n<li>two</li>\\n</ul>'
    >>> renderer.render_inline("just *text*")
    '<p>just <em>text</em></p>'
"""

from typing import Any, Optional

from .cleanup import cleanup_apply
from .decorator import Decorator
from .lists import ListReconstructor
from .log import LOG
from .paragraphs import paragraphs_wrap
from .rules import RuleTable, ruletable


class MarkdownRenderer:
    """
    Renders the supported markdown subset to HTML fragments

    The renderer holds only read-only collaborators (the shared rule table
    and a decorator), so one instance can serve any number of callers.
    """

    def __init__(self, rules: Optional[RuleTable] = None, decorator: Optional[Decorator] = None):
        """
        Args:
            rules: Rule table to apply (defaults to the shared ``ruletable``)
            decorator: Class decorator (defaults to one using appsettings.class_prefix)
        """
        self.rules = rules if rules is not None else ruletable
        self.decorator = decorator if decorator is not None else Decorator()

    def render(self, markdown: Any, inline: bool = False) -> str:
        """
        Render markdown to HTML

        Args:
            markdown: Markdown text; non-string input renders as ""
            inline: Inline rendering for single-field content (descriptions).
                    Inline output that starts with a block construct is not
                    wrapped in a paragraph.

        Returns:
            HTML fragment
        """
        if not markdown or not isinstance(markdown, str):
            return ''

        html = markdown.replace('\r\n', '\n').strip()
        LOG(f"Rendering {len(html)} characters ({'inline' if inline else 'block'} mode)", level=3)

        html = ListReconstructor().reconstruct(html)
        html = self.rules.apply(html)
        html = paragraphs_wrap(html, inline=inline)
        return cleanup_apply(html)

    def render_inline(self, markdown: Any) -> str:
        """Render markdown in inline mode (for descriptions)"""
        return self.render(markdown, inline=True)

    def render_withClasses(self, markdown: Any, inline: bool = False) -> str:
        """
        Render markdown and add md-* class hooks to the emitted tags

        Args:
            markdown: Markdown text
            inline: Inline rendering mode

        Returns:
            HTML fragment with semantic classes
        """
        return self.decorator.decorate(self.render(markdown, inline))

    def render_inlineWithClasses(self, markdown: Any) -> str:
        """Render inline markdown with class hooks (for descriptions)"""
        return self.render_withClasses(markdown, inline=True)

    def preview(self, markdown: Any, max_lines: Optional[int] = None) -> str:
        """
        Render the first lines of markdown as a preview

        Args:
            markdown: Markdown text
            max_lines: Number of lines to keep (defaults to
                       appsettings.preview_max_lines; negative counts as 0)

        Returns:
            Decorated HTML of the first max_lines lines, followed by one
            truncation marker if the input had more lines than that
        """
        from ..config import appsettings

        if not markdown or not isinstance(markdown, str):
            return ''

        if max_lines is None:
            max_lines = appsettings.preview_max_lines
        max_lines = max(max_lines, 0)

        all_lines = markdown.split('\n')
        lines = all_lines[:max_lines]
        html = self.render_withClasses('\n'.join(lines))

        if len(all_lines) > max_lines:
            LOG(f"Preview truncated at {max_lines} of {len(all_lines)} lines", level=3)
            html += appsettings.previewMarker_make()

        return html


# Shared renderer instance
renderer = MarkdownRenderer()


def render(markdown: Any, inline: bool = False) -> str:
    """Render markdown with the shared renderer"""
    return renderer.render(markdown, inline=inline)
