"""
Entry description rendering

Descriptions are short, single-field texts rendered inline. On top of the
plain inline renderer they get:

    - optional auto bullets: every plain line becomes "- line"
      (or "- [ ] line" for todo entries)
    - entry tags that the text does not mention yet, appended as #tags
    - bare http(s) URLs turned into external links
    - #hashtags turned into hashtag links

Todo items are protected while hashtags are linked, so a "#tag" inside a
checkbox label stays plain text.
"""

import re
from typing import Any, Iterable, List, Optional

from .renderer import renderer
from .log import LOG


BULLET_PREFIX = re.compile(r'^\s*- ')
LEADING_WHITESPACE = re.compile(r'^\s*')
HASHTAG = re.compile(r'#(\w[\w-]*)')
URL = re.compile(r'(https?://[^\s<>"\[\]]+)', re.IGNORECASE)
TODO_ITEM = re.compile(r'<li class="todo-item[^>]*>.*?</li>', re.DOTALL)
# Markup regions in which neither URLs nor hashtags are linked
LINK_SKIP = re.compile(r'<a\b[^>]*>.*?</a>|<[^>]+>', re.DOTALL | re.IGNORECASE)


def bullets_auto(description: str, is_todo: bool = False, enabled: Optional[bool] = None) -> str:
    """
    Prefix plain description lines with bullets or checkboxes

    Lines that are blank or already start with "- " are kept as they are;
    leading whitespace is preserved so indentation still nests.

    Args:
        description: Raw description text
        is_todo: Use "- [ ] " instead of "- "
        enabled: Override appsettings.auto_bullet_descriptions

    Returns:
        Processed description (unchanged when disabled)
    """
    from ..config import appsettings

    if enabled is None:
        enabled = appsettings.auto_bullet_descriptions
    if not enabled or not description:
        return description

    prefix = '- [ ] ' if is_todo else '- '
    processed_lines = []
    for line in description.split('\n'):
        if not line.strip() or BULLET_PREFIX.match(line):
            processed_lines.append(line)
            continue
        leading = LEADING_WHITESPACE.match(line).group(0)
        processed_lines.append(f'{leading}{prefix}{line.strip()}')

    return '\n'.join(processed_lines)


def hashtags_extract(text: Any) -> List[str]:
    """
    Collect hashtags in order of first appearance

    Example:
        "Met #team about #budget and #Team" -> ["team", "budget"]
    """
    if not text or not isinstance(text, str):
        return []
    tags: List[str] = []
    seen = set()
    for tag in HASHTAG.findall(text):
        if tag.lower() not in seen:
            seen.add(tag.lower())
            tags.append(tag)
    return tags


def outsideMarkup_sub(html: str, pattern: "re.Pattern[str]", replace) -> str:
    """
    Apply a substitution to text nodes only

    Tags, and the whole of existing <a>...</a> elements, are copied through
    untouched.
    """
    result = []
    pos = 0
    for match in LINK_SKIP.finditer(html):
        result.append(pattern.sub(replace, html[pos:match.start()]))
        result.append(match.group(0))
        pos = match.end()
    result.append(pattern.sub(replace, html[pos:]))
    return ''.join(result)


def urls_link(html: str) -> str:
    """Link bare http(s) URLs as external links opening in a new tab"""
    def url_anchor(match: "re.Match[str]") -> str:
        url = match.group(1)
        return f'<a href="{url}" target="_blank" rel="noopener noreferrer" class="external-link">{url}</a>'

    return outsideMarkup_sub(html, URL, url_anchor)


def hashtags_link(html: str) -> str:
    """
    Link #hashtags outside markup and todo items

    Todo items are swapped for placeholders while linking and restored
    afterwards.
    """
    protected: List[str] = []

    def todo_protect(match: "re.Match[str]") -> str:
        protected.append(match.group(0))
        return f'\x00TODO_{len(protected) - 1}\x00'

    html = TODO_ITEM.sub(todo_protect, html)
    html = outsideMarkup_sub(
        html,
        HASHTAG,
        lambda match: f'<a href="#" class="hashtag-link" data-tag="{match.group(1)}">#{match.group(1)}</a>',
    )

    for index, original in enumerate(protected):
        html = html.replace(f'\x00TODO_{index}\x00', original)
    return html


def description_render(description: Any, tags: Optional[Iterable[str]] = (), is_todo: bool = False) -> str:
    """
    Render an entry description to inline HTML with links

    Args:
        description: Description text; non-string input renders as ""
        tags: Entry tags; those missing from the text are appended as #tag
        is_todo: Entry is a todo (auto bullets become checkboxes)

    Returns:
        Decorated inline HTML
    """
    if not isinstance(description, str):
        description = ''

    existing = hashtags_extract(description)
    missing = [tag for tag in tags or () if tag not in existing]
    if missing:
        tag_string = ' '.join(f'#{tag}' for tag in missing)
        description = f'{description} {tag_string}' if description else tag_string

    if not description:
        return ''

    LOG(f"Rendering description ({len(missing)} tag(s) appended)", level=3)

    html = renderer.render_inlineWithClasses(bullets_auto(description, is_todo))
    html = urls_link(html)
    return hashtags_link(html)
