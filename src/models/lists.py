"""
List reconstruction data models

Type-safe structures used by the ListReconstructor while it turns a flat
stream of indented list lines into nested list markup.
"""

from enum import Enum
from dataclasses import dataclass
from typing import Optional


class ListType(Enum):
    """
    Kind of list container

    The value doubles as the HTML tag name of the container.
    """
    UNORDERED = "ul"    # - item
    ORDERED = "ol"      # 1. item

    @property
    def tag_open(self) -> str:
        return f"<{self.value}>"

    @property
    def tag_close(self) -> str:
        return f"</{self.value}>"


@dataclass
class ListLine:
    """
    A single classified input line

    Attributes:
        content: Line content (marker and indentation stripped for list items,
                 the raw line for plain text)
        list_type: ListType for list items, None for plain text lines
        level: Nesting level (indent // indent_width); 0 for plain text
        indent: Raw length of the leading whitespace

    Example:
        For "    1. third" with indent width 2:
        ListLine(content="third", list_type=ListType.ORDERED, level=2, indent=4)
    """
    content: str
    list_type: Optional[ListType] = None
    level: int = 0
    indent: int = 0

    @property
    def is_item(self) -> bool:
        return self.list_type is not None


@dataclass(frozen=True)
class ListContext:
    """
    One open list container on the list stack

    Attributes:
        list_type: Type of the open container
        level: Nesting level the container was opened at (its stack position)
    """
    list_type: ListType
    level: int


@dataclass
class TaskItem:
    """
    A todo list item parsed from "[ ] label" / "[x] label" content

    Attributes:
        checked: Whether the box was written as [x]
        label: Remaining item text
        index: Zero-based position among the task items of one render call
    """
    checked: bool
    label: str
    index: int
