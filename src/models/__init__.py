"""
Models package for mdlite

Contains data structures and type definitions for the rendering pipeline.
"""

from .state import ProgramState, pipeline
from .rules import Rule, RuleCategory
from .lists import ListType, ListLine, ListContext, TaskItem

__all__ = [
    "ProgramState",
    "pipeline",
    "Rule",
    "RuleCategory",
    "ListType",
    "ListLine",
    "ListContext",
    "TaskItem",
]
