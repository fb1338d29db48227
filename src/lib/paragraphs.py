"""
Paragraph and line-break handling

Runs after the substitution rules. The wrapper is deliberately
block-agnostic: it wraps first and leaves the CleanupPass to strip the
paragraph tags that end up around headers, rules, blockquotes and lists.
"""

import re


PARAGRAPH_BREAK = re.compile(r'\n\s*\n')
# A newline directly followed by a tag (opening or closing) stays a newline
LINE_BREAK = re.compile(r'\n(?![<\/]|<ul>|<ol>|<li>)')
BLOCK_START = re.compile(r'^<(h[1-6]|ul|ol|blockquote|hr)')


def breaks_insert(html: str) -> str:
    """
    Turn blank lines into paragraph boundaries and other newlines into <br>

    Example:
        "a\\n\\nb\\nc" -> "a</p><p>b<br>c"
        "x\\n<ul>"    -> "x\\n<ul>"
    """
    html = PARAGRAPH_BREAK.sub('</p><p>', html)
    return LINE_BREAK.sub('<br>', html)


def blockStart_is(html: str) -> bool:
    """Check if html starts with a header, list, blockquote or rule"""
    return BLOCK_START.match(html) is not None


def paragraphs_wrap(html: str, inline: bool = False) -> str:
    """
    Insert paragraph/line-break markup and wrap the result in <p>

    Args:
        html: Output of the RuleTable
        inline: Inline (single-field) mode. Inline content that already
                starts with a block construct is left unwrapped; block mode
                always wraps.

    Returns:
        Wrapped markup, still containing artefacts for the CleanupPass
    """
    html = breaks_insert(html)

    if not inline or not blockStart_is(html):
        html = f'<p>{html}</p>'

    return html
