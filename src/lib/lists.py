"""
List reconstruction for indented markdown lists

Turns flat "- item" / "1. item" lines into properly nested <ul>/<ol>/<li>
markup before the substitution rules run. Nesting is recovered with an
explicit stack of open list containers:

    - a             <ul>
      - b           <li>a</li>
    - c             <ul>
                    <li>b</li>
                    </ul>
                    <li>c</li>
                    </ul>

Invariants:
    - every opened container is closed exactly once
    - container levels on the stack never decrease from bottom to top
    - the stack is always empty at end of input, whatever the indentation

Todo items ("- [ ] task", "- [x] done") are emitted with checkbox markup
when task checkboxes are enabled. Toggling them is the caller's business.
"""

import re
from typing import List, Optional

from ..models.lists import ListContext, ListLine, ListType, TaskItem
from .log import LOG


UNORDERED_ITEM = re.compile(r'^(\s*)-\s+(.*)$')
ORDERED_ITEM = re.compile(r'^(\s*)\d+\.\s+(.*)$')
TASK_ITEM = re.compile(r'^\[( |x|X)\]\s+(.*)$')


class ListReconstructor:
    """
    Line-oriented stack machine producing nested list markup

    A reconstructor instance holds the per-call state (output lines, open
    containers, task counter) and is meant to be used for a single
    reconstruct() call; the module-level reconstruct() helper does exactly
    that.
    """

    def __init__(self, indent_width: Optional[int] = None, task_checkboxes: Optional[bool] = None):
        """
        Args:
            indent_width: Leading whitespace characters per nesting level
                          (defaults to appsettings.list_indent_width)
            task_checkboxes: Emit checkbox markup for "[ ]"/"[x]" items
                             (defaults to appsettings.task_checkboxes)
        """
        from ..config import appsettings

        self.indent_width = indent_width if indent_width is not None else appsettings.list_indent_width
        self.task_checkboxes = (
            task_checkboxes if task_checkboxes is not None else appsettings.task_checkboxes
        )
        self.stack: List[ListContext] = []
        self.output: List[str] = []
        self.task_count = 0
        self.containers_opened = 0

    def line_classify(self, line: str) -> ListLine:
        """
        Classify a raw line as a list item or plain text

        Args:
            line: One input line (no trailing newline)

        Returns:
            ListLine with list_type/level/indent set for list items

        Example:
            "  - nested" -> ListLine(content="nested", list_type=UNORDERED, level=1, indent=2)
            "plain"      -> ListLine(content="plain")
        """
        for pattern, list_type in ((UNORDERED_ITEM, ListType.UNORDERED), (ORDERED_ITEM, ListType.ORDERED)):
            match = pattern.match(line)
            if match:
                indent = len(match.group(1))
                return ListLine(
                    content=match.group(2),
                    list_type=list_type,
                    level=indent // self.indent_width,
                    indent=indent,
                )
        return ListLine(content=line)

    def container_open(self, list_type: ListType) -> None:
        """Push a new container at the next level and emit its opening tag"""
        self.stack.append(ListContext(list_type=list_type, level=len(self.stack)))
        self.output.append(list_type.tag_open)
        self.containers_opened += 1

    def container_close(self) -> None:
        """Pop the innermost container and emit its closing tag"""
        context = self.stack.pop()
        self.output.append(context.list_type.tag_close)

    def containers_closeAll(self) -> None:
        """Close every open container, innermost first"""
        while self.stack:
            self.container_close()

    def taskItem_parse(self, content: str) -> Optional[TaskItem]:
        """
        Parse "[ ] label" / "[x] label" item content

        Returns:
            TaskItem with the next task index, or None if content is not a task
        """
        if not self.task_checkboxes:
            return None
        match = TASK_ITEM.match(content)
        if not match:
            return None
        task = TaskItem(checked=match.group(1) in 'xX', label=match.group(2), index=self.task_count)
        self.task_count += 1
        return task

    def item_emit(self, content: str) -> None:
        """Emit a list item, with checkbox markup for todo items"""
        task = self.taskItem_parse(content)
        if task is None:
            self.output.append(f'<li>{content}</li>')
            return

        checked_attr = ' checked' if task.checked else ''
        self.output.append(
            f'<li class="todo-item"><input type="checkbox" class="todo-checkbox" '
            f'data-todo-index="{task.index}"{checked_attr}> {task.label}</li>'
        )

    def line_process(self, line: ListLine) -> None:
        """
        Advance the state machine by one classified line

        For a list item at level L of type T:
            1. close containers while the stack is deeper than L+1
            2. at depth L+1 with a different type on top, close it
               (a type change is never an in-place retype)
            3. open containers of type T until the stack depth is L+1
            4. emit the item

        Plain lines close every open container and are emitted unless blank.
        """
        if not line.is_item:
            self.containers_closeAll()
            if line.content.strip():
                self.output.append(line.content)
            return

        level = line.level
        list_type = line.list_type

        while len(self.stack) > level + 1:
            self.container_close()

        if len(self.stack) == level + 1 and self.stack[-1].list_type != list_type:
            self.container_close()

        while len(self.stack) <= level:
            self.container_open(list_type)

        self.item_emit(line.content)

    def reconstruct(self, text: str) -> str:
        """
        Convert every list line in text into nested list markup

        Args:
            text: Raw markdown

        Returns:
            Text with list lines replaced by <ul>/<ol>/<li> lines, plain lines
            kept (blank ones dropped), joined by newlines
        """
        for raw_line in text.split('\n'):
            self.line_process(self.line_classify(raw_line))

        self.containers_closeAll()

        LOG(
            f"Reconstructed lists: {self.containers_opened} containers, {self.task_count} todo items",
            level=3,
        )
        return '\n'.join(self.output)


def reconstruct(text: str, indent_width: Optional[int] = None, task_checkboxes: Optional[bool] = None) -> str:
    """Run a fresh ListReconstructor over text"""
    return ListReconstructor(indent_width=indent_width, task_checkboxes=task_checkboxes).reconstruct(text)
