"""
Substitution rule table for the markdown dialect

The RuleTable is the ordered cascade of (pattern, template) substitutions
covering every block and inline construct except lists. Each rule is applied
once, globally, to the whole accumulated string, in registration order.

Order matters:
    - headers are registered longest marker first, so "# " never swallows
      a "###### " line
    - fenced code comes before inline code and before emphasis
    - *** before ** before *, and likewise for underscores

The table is built once per process and frozen into a tuple; all callers
share the module-level ``ruletable`` instance.

Example:
    >>> ruletable.apply("## Hello **world**")
    '<h2>Hello <strong>world</strong></h2>'
"""

import re
from typing import List, Tuple

from ..models.rules import Rule, RuleCategory
from .log import LOG


class RuleTable:
    """
    Ordered, immutable collection of markdown substitution rules

    Rules are registered per category by the *Rules_register() methods during
    construction and then frozen. Nothing mutates the table afterwards, so a
    single instance is safe to share between threads.
    """

    def __init__(self) -> None:
        """Build the rule cascade in its contractual order"""
        rules: List[Rule] = []
        self.headerRules_register(rules)
        self.codeBlockRules_register(rules)
        self.emphasisRules_register(rules)
        self.inlineCodeRules_register(rules)
        self.linkRules_register(rules)
        self.blockRules_register(rules)
        self.rules: Tuple[Rule, ...] = tuple(rules)

    def __len__(self) -> int:
        return len(self.rules)

    def __iter__(self):
        return iter(self.rules)

    def apply(self, text: str) -> str:
        """
        Run every rule over text, in order

        Args:
            text: Output of the ListReconstructor

        Returns:
            Text with all markdown constructs substituted by markup.
            Unmatched syntax is left untouched.
        """
        for rule in self.rules:
            text = rule.apply(text)
        LOG(f"Applied {len(self.rules)} substitution rules", level=3)
        return text

    def rule_get(self, name: str) -> Rule:
        """
        Get a rule by name

        Raises:
            KeyError: If no rule has that name
        """
        for rule in self.rules:
            if rule.name == name:
                return rule
        raise KeyError(name)

    def rules_listByCategory(self, category: RuleCategory) -> List[Rule]:
        """Get all rules in a category, in application order"""
        return [rule for rule in self.rules if rule.category == category]

    def headerRules_register(self, rules: List[Rule]) -> None:
        """Register ATX headers, level 6 down to level 1"""
        for level in range(6, 0, -1):
            marker = '#' * level
            rules.append(Rule(
                name=f'header-h{level}',
                category=RuleCategory.HEADER,
                pattern=re.compile(rf'^{marker} (.*$)', re.MULTILINE),
                template=rf'<h{level}>\1</h{level}>',
                description=f'Level {level} header',
                examples=(f'{marker} Heading',),
            ))

    def codeBlockRules_register(self, rules: List[Rule]) -> None:
        """Register fenced code blocks"""
        rules.append(Rule(
            name='code-fenced',
            category=RuleCategory.CODE_BLOCK,
            pattern=re.compile(r'```([^`]*)```', re.MULTILINE | re.DOTALL),
            template=r'<pre><code>\1</code></pre>',
            description='Multi-line literal region delimited by triple backticks',
            examples=('```\nprint("hi")\n```',),
        ))

    def emphasisRules_register(self, rules: List[Rule]) -> None:
        """Register bold+italic, bold, italic and strikethrough"""
        emphasis_specs = [
            ('bold-italic-asterisk', RuleCategory.BOLD_ITALIC,
             r'\*\*\*(.*?)\*\*\*', r'<strong><em>\1</em></strong>', '***both***'),
            ('bold-italic-underscore', RuleCategory.BOLD_ITALIC,
             r'___([^_]+?)___', r'<strong><em>\1</em></strong>', '___both___'),
            ('bold-asterisk', RuleCategory.BOLD,
             r'\*\*(.*?)\*\*', r'<strong>\1</strong>', '**bold**'),
            ('bold-underscore', RuleCategory.BOLD,
             r'__([^_]+?)__', r'<strong>\1</strong>', '__bold__'),
            # Character classes keep single markers from crossing bold boundaries
            ('italic-asterisk', RuleCategory.ITALIC,
             r'\*([^*]+?)\*', r'<em>\1</em>', '*italic*'),
            ('italic-underscore', RuleCategory.ITALIC,
             r'_([^_]+?)_', r'<em>\1</em>', '_italic_'),
            ('strikethrough', RuleCategory.STRIKETHROUGH,
             r'~~(.*?)~~', r'<del>\1</del>', '~~gone~~'),
        ]

        for name, category, pattern, template, example in emphasis_specs:
            rules.append(Rule(
                name=name,
                category=category,
                pattern=re.compile(pattern, re.MULTILINE),
                template=template,
                description=f'{category.value.replace("_", " ").capitalize()} text',
                examples=(example,),
            ))

    def inlineCodeRules_register(self, rules: List[Rule]) -> None:
        """Register inline code spans"""
        rules.append(Rule(
            name='code-inline',
            category=RuleCategory.INLINE_CODE,
            pattern=re.compile(r'`([^`]+?)`', re.MULTILINE),
            template=r'<code>\1</code>',
            description='Inline code span',
            examples=('`value`',),
        ))

    def linkRules_register(self, rules: List[Rule]) -> None:
        """Register links (titled first) and images"""
        rules.append(Rule(
            name='link-titled',
            category=RuleCategory.LINK,
            pattern=re.compile(r'\[([^\]]*)\]\(([^\s\)]+)\s+"([^"]*)"\)', re.MULTILINE),
            template=r'<a href="\2" title="\3">\1</a>',
            description='Link with a title (tooltip) attribute',
            examples=('[docs](https://example.org "Read the docs")',),
        ))
        rules.append(Rule(
            name='link',
            category=RuleCategory.LINK,
            pattern=re.compile(r'\[([^\]]*)\]\(([^\)]*)\)', re.MULTILINE),
            template=r'<a href="\2">\1</a>',
            description='Plain link',
            examples=('[docs](https://example.org)',),
        ))
        rules.append(Rule(
            name='image',
            category=RuleCategory.IMAGE,
            pattern=re.compile(r'!\[([^\]]*)\]\(([^\)]*)\)', re.MULTILINE),
            template=r'<img src="\2" alt="\1">',
            description='Image',
            examples=('![logo](logo.png)',),
        ))

    def blockRules_register(self, rules: List[Rule]) -> None:
        """Register horizontal rules and blockquotes"""
        rules.append(Rule(
            name='horizontal-rule',
            category=RuleCategory.HORIZONTAL_RULE,
            pattern=re.compile(r'^(-{3,}|\*{3,}|_{3,})\s*$', re.MULTILINE),
            template='<hr>',
            description='Horizontal rule from 3+ dashes, asterisks or underscores',
            examples=('---', '***', '___'),
        ))
        rules.append(Rule(
            name='blockquote',
            category=RuleCategory.BLOCKQUOTE,
            pattern=re.compile(r'^> (.*)$', re.MULTILINE),
            template=r'<blockquote>\1</blockquote>',
            description='Single blockquote line',
            examples=('> quoted',),
        ))


# Singleton instance - built once at import, shared by every render call
ruletable = RuleTable()
