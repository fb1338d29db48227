"""
Semantic class hooks for rendered markup

Adds a class attribute to every bare tag the renderer emits so that
stylesheets can target rendered markdown without touching surrounding
markup (e.g. <strong> becomes <strong class="md-bold">). Each entry targets
a distinct tag, so the order of the passes does not matter.
"""

import re
from typing import Dict, List, Optional, Tuple


# tag -> class suffix; "a" and "img" carry attributes and are matched as "<tag "
TAG_CLASSES: Dict[str, str] = {
    'h1': 'h1',
    'h2': 'h2',
    'h3': 'h3',
    'h4': 'h4',
    'h5': 'h5',
    'h6': 'h6',
    'blockquote': 'blockquote',
    'code': 'code',
    'pre': 'codeblock',
    'ul': 'list',
    'ol': 'list-ordered',
    'p': 'paragraph',
    'hr': 'hr',
    'strong': 'bold',
    'em': 'italic',
    'del': 'strikethrough',
    'a': 'link',
    'img': 'image',
}

ATTRIBUTE_TAGS = ('a', 'img')


class Decorator:
    """
    Find-and-decorate pass over rendered markup

    Patterns are compiled once per decorator; the class prefix comes from
    appsettings unless given explicitly.
    """

    def __init__(self, class_prefix: Optional[str] = None):
        from ..config import appsettings

        self.class_prefix = class_prefix if class_prefix is not None else appsettings.class_prefix
        self.passes: List[Tuple["re.Pattern[str]", str]] = []
        for tag, suffix in TAG_CLASSES.items():
            class_name = f'{self.class_prefix}{suffix}'
            if tag in ATTRIBUTE_TAGS:
                self.passes.append(
                    (re.compile(f'<{tag} ', re.IGNORECASE), f'<{tag} class="{class_name}" ')
                )
            else:
                self.passes.append(
                    (re.compile(f'<{tag}>', re.IGNORECASE), f'<{tag} class="{class_name}">')
                )

    def decorate(self, html: str) -> str:
        """
        Add class hooks to every bare tag in html

        Example:
            '<p><em>x</em></p>' -> '<p class="md-paragraph"><em class="md-italic">x</em></p>'
        """
        for pattern, replacement in self.passes:
            html = pattern.sub(replacement, html)
        return html


def tags_decorate(html: str, class_prefix: Optional[str] = None) -> str:
    """Decorate html with a fresh Decorator"""
    return Decorator(class_prefix=class_prefix).decorate(html)
