"""
Highlighted source view of markdown text

The report preview can show the raw markdown instead of the rendered markup.
This module produces that view as self-contained HTML using Pygments'
markdown lexer with inline styles, so it needs no extra stylesheet.
"""

from typing import Any, Optional

from pygments import highlight
from pygments.formatters import HtmlFormatter
from pygments.lexers import get_lexer_by_name
from pygments.styles import get_style_by_name
from pygments.util import ClassNotFound

from .log import LOG


def style_resolve(style: Optional[str] = None) -> str:
    """
    Resolve a Pygments style name, falling back to "default"

    Args:
        style: Style name (defaults to appsettings.source_style)
    """
    from ..config import appsettings

    name = style or appsettings.source_style
    try:
        get_style_by_name(name)
    except ClassNotFound:
        LOG(f"Warning: Unknown Pygments style '{name}', using 'default'", level=2)
        name = 'default'
    return name


def source_render(markdown: Any, style: Optional[str] = None) -> str:
    """
    Render markdown source as syntax-highlighted HTML

    Args:
        markdown: Markdown text; non-string or empty input renders as ""
        style: Pygments style name

    Returns:
        HTML block (<div class="highlight"><pre>...</pre></div>)
    """
    if not markdown or not isinstance(markdown, str):
        return ''

    lexer = get_lexer_by_name('markdown')
    formatter = HtmlFormatter(style=style_resolve(style), noclasses=True)
    return highlight(markdown, lexer, formatter)
