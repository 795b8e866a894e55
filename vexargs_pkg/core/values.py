# =====================================================================
# File: vexargs_pkg/core/values.py
# Free-standing value classification and typed conversion
# =====================================================================
from __future__ import annotations
import re

from .errors import InvalidValueError
from .types import OptionDescriptor, Value, ValueKind

INT_RE = re.compile(r"[0-9]+")
FLOAT_RE = re.compile(r"[0-9]+\.[0-9]*|\.[0-9]+")

# option values may carry a sign; a float option also takes a bare integer
SIGNED_INT_RE = re.compile(r"[+-]?[0-9]+")
SIGNED_FLOAT_RE = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)")


def classify(text: str) -> ValueKind:
    """
    Infer the kind of a bare argument from its characters:
      "42" -> INTEGER, "4.2" / ".5" / "5." -> FLOAT, anything else -> STRING.
    The empty string, "." and ".." are STRING.
    """
    if INT_RE.fullmatch(text):
        return ValueKind.INTEGER
    if FLOAT_RE.fullmatch(text):
        return ValueKind.FLOAT
    return ValueKind.STRING


def convert(text: str, kind: ValueKind) -> Value:
    """Strict conversion: ASCII digits, optional sign, no '_', spaces, nan or inf."""
    if kind is ValueKind.INTEGER:
        if not SIGNED_INT_RE.fullmatch(text):
            raise ValueError(f"not an integer: {text!r}")
        return int(text)
    if kind is ValueKind.FLOAT:
        if not SIGNED_FLOAT_RE.fullmatch(text):
            raise ValueError(f"not a float: {text!r}")
        return float(text)
    if kind is ValueKind.STRING:
        return text
    raise ValueError(f"{kind.value} options take no value")


def convert_free(text: str, kind: ValueKind) -> Value:
    """Convert a classified free-standing value; int() may still refuse very long digit runs."""
    try:
        return convert(text, kind)
    except ValueError as exc:
        raise InvalidValueError(f"Invalid {kind.value} value {text[:32]!r}: {exc}") from None


def convert_for(desc: OptionDescriptor, text: str) -> Value:
    """Convert an attached option value (`--name=text`, `-ntext`) to the declared kind."""
    try:
        return convert(text, desc.value_kind)
    except ValueError:
        raise InvalidValueError(
            f"Invalid {desc.value_kind.value} value for {desc.display_name}: {text!r}"
        ) from None
