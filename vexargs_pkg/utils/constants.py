# =====================================================================
# File: vexargs_pkg/utils/constants.py
# Default options, status labels and help layout
# =====================================================================
from __future__ import annotations

from ..core.types import OptionDescriptor, StatusKind, ValueKind

OPT_HELP    = OptionDescriptor("h", "help",    ValueKind.FLAG, "Print this help message")
OPT_VERSION = OptionDescriptor("v", "version", ValueKind.FLAG, "Print the version string")
DEFAULT_OPTIONS = (OPT_HELP, OPT_VERSION)

END_OF_OPTIONS = "--"
LONG_PREFIX    = "--"
SHORT_PREFIX   = "-"
VALUE_SEP      = "="

STATUS_LABELS = {
    StatusKind.OK:                 "ok",
    StatusKind.ALLOCATION_FAILURE: "allocation failure",
    StatusKind.INVALID_VALUE:      "invalid value",
    StatusKind.UNKNOWN_ARGUMENT:   "unknown argument",
}

# Help text layout
HELP_INDENT    = " "
HELP_COL_GAP   = 2
HELP_MORE_MARK = "..."
