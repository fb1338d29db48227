"""
mdlite - Lightweight markdown renderer

Renders a constrained markdown dialect to HTML fragments for report
previews and inline item descriptions.
"""

__version__ = "1.0.0"

from .renderer import MarkdownRenderer, renderer, render
from .rules import RuleTable, ruletable
from .lists import ListReconstructor
from .decorator import Decorator
from .log import LOG, state_connectToLogger

__all__ = [
    "MarkdownRenderer",
    "renderer",
    "render",
    "RuleTable",
    "ruletable",
    "ListReconstructor",
    "Decorator",
    "LOG",
    "state_connectToLogger",
    "__version__",
]
