# =====================================================================
# File: vexargs_pkg/__init__.py
# Public API of the vexargs argument parser
# =====================================================================

"""
vexargs: a small command-line argument parser.

    ctx = ArgContext(ContextInfo("demo", "1.0", "Demo program"))
    ctx.add_option("c", "count", ValueKind.INTEGER, "How many", max_count=1)
    ctx.parse(sys.argv)
    if ctx.arg_found("help"):
        print(ctx.get_help())
"""

from .core.context import ArgContext
from .core.errors import AllocationError, InvalidValueError, UnknownArgumentError, VexError
from .core.registry import OptionRegistry
from .core.types import ContextInfo, OptionDescriptor, ParsedToken, ParseStatus, StatusKind, ValueKind

__version__ = "0.1.0"

__all__ = [
    "ArgContext",
    "ContextInfo",
    "OptionDescriptor",
    "OptionRegistry",
    "ParsedToken",
    "ParseStatus",
    "StatusKind",
    "ValueKind",
    "VexError",
    "AllocationError",
    "InvalidValueError",
    "UnknownArgumentError",
]
