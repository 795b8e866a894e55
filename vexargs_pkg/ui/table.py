# =====================================================================
# File: vexargs_pkg/ui/table.py
# Plain-text and JSON views of a parsed token list
# =====================================================================
from __future__ import annotations
import json
from typing import Iterable, List

from ..core.types import ParsedToken


def token_label(token: ParsedToken) -> str:
    if not token.is_option:
        return "(value)"
    if token.short_name and token.long_name:
        return f"-{token.short_name}/--{token.long_name}"
    if token.long_name:
        return f"--{token.long_name}"
    return f"-{token.short_name}"


def render_tokens(tokens: Iterable[ParsedToken]) -> List[str]:
    """One line per token: index, option label, kind, values."""
    rows = [
        (str(i), token_label(t), t.value_kind.value, " ".join(repr(v) for v in t.values))
        for i, t in enumerate(tokens)
    ]
    if not rows:
        return ["(no tokens)"]
    widths = [max(len(r[c]) for r in rows) for c in range(3)]
    lines = []
    for r in rows:
        line = "  ".join(r[c].ljust(widths[c]) for c in range(3))
        lines.append(f"{line}  {r[3]}".rstrip())
    return lines


def tokens_to_json(tokens: Iterable[ParsedToken]) -> str:
    return json.dumps([t.to_dict() for t in tokens], indent=2)
