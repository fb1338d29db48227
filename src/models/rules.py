"""
Substitution rule models

Defines the structure and categories of the markdown substitution rules
applied by the RuleTable. Each rule carries its pattern, replacement
template and documentation.
"""

import re
from enum import Enum
from dataclasses import dataclass, field
from typing import Tuple


class RuleCategory(Enum):
    """
    Categories of markdown substitution rules

    Listed in the order the RuleTable applies them. The order is part of
    the rendering contract.
    """
    HEADER = "header"                  # # .. ######
    CODE_BLOCK = "code_block"          # ```fenced```
    BOLD_ITALIC = "bold_italic"        # ***x***, ___x___
    BOLD = "bold"                      # **x**, __x__
    ITALIC = "italic"                  # *x*, _x_
    STRIKETHROUGH = "strikethrough"    # ~~x~~
    INLINE_CODE = "inline_code"        # `x`
    LINK = "link"                      # [t](url "title"), [t](url)
    IMAGE = "image"                    # ![alt](src)
    HORIZONTAL_RULE = "horizontal_rule"  # ---, ***, ___
    BLOCKQUOTE = "blockquote"          # > quote


@dataclass(frozen=True)
class Rule:
    """
    Definition of a single markdown substitution rule

    Attributes:
        name: Unique rule name (e.g., "header-h2", "bold-asterisk")
        category: Category for ordering checks and documentation
        pattern: Compiled regular expression matched against the whole text
        template: re.sub replacement template (backreferences as \\1, \\2, ...)
        description: Human-readable description
        examples: Example markdown snippets the rule handles
    """
    name: str
    category: RuleCategory
    pattern: "re.Pattern[str]"
    template: str
    description: str = ""
    examples: Tuple[str, ...] = field(default_factory=tuple)

    def apply(self, text: str) -> str:
        """
        Substitute every non-overlapping match in text

        Args:
            text: Accumulated markup/markdown string

        Returns:
            Text with all matches replaced by the template
        """
        return self.pattern.sub(self.template, text)
