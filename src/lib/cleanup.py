"""
Post-wrap cleanup fixups

Each fixup removes one specific over-wrapping artefact left by the
paragraph wrapper. Every fixup strictly shortens the string it changes, so
the sequence is repeated until nothing changes; the result is a fixed point
and cleanup_apply(cleanup_apply(x)) == cleanup_apply(x).
"""

import re
from typing import Tuple

from .log import LOG


CLEANUP_FIXUPS: Tuple[Tuple["re.Pattern[str]", str], ...] = tuple(
    (re.compile(pattern, re.IGNORECASE), replacement)
    for pattern, replacement in (
        # Empty paragraphs
        (r'<p>\s*</p>', ''),
        # Headers
        (r'<p><h([1-6])', r'<h\1'),
        (r'</h([1-6])></p>', r'</h\1>'),
        # Rules
        (r'<p><hr></p>', '<hr>'),
        # Blockquotes
        (r'<p><blockquote>', '<blockquote>'),
        (r'</blockquote></p>', '</blockquote>'),
        # Lists
        (r'<p><ul>', '<ul>'),
        (r'</ul></p>', '</ul>'),
        (r'<p><ol>', '<ol>'),
        (r'</ol></p>', '</ol>'),
        # Line breaks around list items and containers
        (r'<br>\s*</li>', '</li>'),
        (r'<li><br>', '<li>'),
        (r'</ul><br>', '</ul>'),
        (r'<br><ul>', '<ul>'),
        (r'</ol><br>', '</ol>'),
        (r'<br><ol>', '<ol>'),
    )
)


def cleanup_pass(html: str) -> str:
    """Apply every fixup once, in order"""
    for pattern, replacement in CLEANUP_FIXUPS:
        html = pattern.sub(replacement, html)
    return html


def cleanup_apply(html: str) -> str:
    """
    Apply the fixup sequence until the markup stops changing

    Args:
        html: Output of the paragraph wrapper

    Returns:
        Cleaned markup (a fixed point of cleanup_pass)
    """
    passes = 1
    cleaned = cleanup_pass(html)
    while cleaned != html:
        html, cleaned = cleaned, cleanup_pass(cleaned)
        passes += 1
    LOG(f"Cleanup converged after {passes} pass(es)", level=3)
    return cleaned
