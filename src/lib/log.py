"""
Centralized logging using Loguru with context-aware verbosity.

The renderer itself is a pure function and never needs a logger handed to it.
Instead, a caller (normally the CLI pipeline) connects its ProgramState once,
and every LOG() call made in that context - including the ones inside the
rendering passes - honours the state's verbosity.

Usage:
    from mdlite.lib.log import LOG, state_connectToLogger

    state_connectToLogger(state)

    LOG("Rendering report.md", level=1)
    LOG("Applied 18 substitution rules", level=2)
    LOG("List stack drained at line 42", level=3)

Without a connected state nothing is emitted, so library users calling
render() directly get silent operation.
"""

from loguru import logger
from typing import Any, Optional
from contextvars import ContextVar
import sys

# Context variable to hold current ProgramState
_program_state: ContextVar[Optional[Any]] = ContextVar('program_state', default=None)

logger_format = (
    "<green>{time:HH:mm:ss}</green> │ "
    "<level>{level: <5}</level> │ "
    "<cyan>{function: <22}</cyan> @ "
    "<cyan>{line: <4}</cyan> ║ "
    "<level>{message}</level>"
)

logger.remove()  # Remove default handler
logger.add(sys.stderr, format=logger_format, level="DEBUG")


def state_connectToLogger(state: Any) -> None:
    """
    Connect a ProgramState to the logging context.

    Args:
        state: ProgramState instance with verbosity attribute
    """
    _program_state.set(state)


def LOG(message: str, level: int = 1, **kwargs: Any) -> None:
    """
    Log message if current state's verbosity allows.

    Args:
        message: Log message to display
        level: Minimum verbosity level required (1=normal, 2=verbose, 3=trace)
        **kwargs: Additional loguru metadata

    Verbosity levels:
        1 = Normal output (default)
        2 = Verbose (-v)
        3 = Rendering pass traces (-vv or higher)
    """
    state = _program_state.get()

    if state and hasattr(state, 'verbosity') and state.verbosity >= level:
        logger.opt(depth=1).debug(message, **kwargs)
