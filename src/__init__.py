"""
mdlite - Lightweight markdown renderer

Converts a constrained markdown dialect (headers, emphasis, code, links,
images, rules, blockquotes and nested lists) to HTML fragments.
"""

__version__ = "1.0.0"

from .lib import MarkdownRenderer, renderer, render, RuleTable, ruletable, LOG, state_connectToLogger

__all__ = [
    "MarkdownRenderer",
    "renderer",
    "render",
    "RuleTable",
    "ruletable",
    "LOG",
    "state_connectToLogger",
    "__version__",
]
