# =====================================================================
# File: vexargs_pkg/ui/help.py
# Usage / help text rendering for a set of registered options
# =====================================================================
from __future__ import annotations
from typing import Iterable, List

from ..core.types import ContextInfo, OptionDescriptor
from ..utils.constants import HELP_COL_GAP, HELP_INDENT, HELP_MORE_MARK


def _names(desc: OptionDescriptor) -> List[str]:
    parts = []
    if desc.short_name:
        parts.append(f"-{desc.short_name}")
    if desc.long_name:
        parts.append(f"--{desc.long_name}")
    return parts


def usage_form(desc: OptionDescriptor) -> str:
    """[-c/--count] ... for the Usage line."""
    form = f"[{'/'.join(_names(desc))}]"
    if desc.takes_values and desc.max_count != 0:
        form += f" {HELP_MORE_MARK}"
    return form


def argument_form(desc: OptionDescriptor) -> str:
    """-c, --count for the Arguments block."""
    return ", ".join(_names(desc))


def render_help(info: ContextInfo, options: Iterable[OptionDescriptor]) -> str:
    opts = list(options)
    lines: List[str] = []

    usage = " ".join([f"Usage: {info.name}"] + [usage_form(d) for d in opts])
    lines += [usage, ""]

    if info.description:
        lines += ["Description:", info.description, ""]

    lines.append("Arguments:")
    forms = [argument_form(d) for d in opts]
    width = max((len(f) for f in forms), default=0) + HELP_COL_GAP
    for form, desc in zip(forms, opts):
        if desc.description:
            lines.append(f"{HELP_INDENT}{form.ljust(width)}{desc.description}")
        else:
            lines.append(f"{HELP_INDENT}{form}")
    return "\n".join(lines) + "\n"
