# =====================================================================
# File: vexargs_pkg/core/config.py
# Option declaration files (YAML) and context construction
# =====================================================================
from __future__ import annotations
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

from .context import ArgContext
from .errors import InvalidValueError
from .types import ContextInfo, OptionDescriptor, ValueKind
from ..utils.logger import Logger


@dataclass
class InspectorConfig:
    info: ContextInfo
    options: List[OptionDescriptor] = field(default_factory=list)
    source: Optional[Path] = None
    as_json: bool = False


def _option_from_mapping(entry: Any, where: str) -> OptionDescriptor:
    if not isinstance(entry, dict):
        raise InvalidValueError(f"{where}: option entry must be a mapping")
    try:
        kind = ValueKind.from_name(entry.get("kind", "flag"))
    except ValueError as exc:
        raise InvalidValueError(f"{where}: {exc}") from None

    max_count = entry.get("max_count", 0 if kind is ValueKind.FLAG else 1)
    if not isinstance(max_count, int) or isinstance(max_count, bool):
        raise InvalidValueError(f"{where}: max_count must be an integer")

    long_name = entry.get("long")
    return OptionDescriptor(
        short_name=entry.get("short"),
        long_name=str(long_name) if long_name is not None else None,
        value_kind=kind,
        description=str(entry.get("description", "") or ""),
        max_count=max_count,
    )


def parse_declarations(data: Any, source: str = "<declarations>") -> InspectorConfig:
    """
    Build a config from an already-loaded mapping:
      { name, version, description, options: [ {short, long, kind, max_count, description}, ... ] }
    """
    if not isinstance(data, dict):
        raise InvalidValueError(f"{source}: top level must be a mapping")

    info = ContextInfo(
        name=str(data.get("name") or "program"),
        version=str(data.get("version", "") or ""),
        description=str(data.get("description", "") or "").strip(),
    )

    raw_options = data.get("options") or []
    if not isinstance(raw_options, list):
        raise InvalidValueError(f"{source}: 'options' must be a list")

    options = [
        _option_from_mapping(entry, f"{source}: options[{i}]")
        for i, entry in enumerate(raw_options)
    ]
    return InspectorConfig(info=info, options=options)


def load_declarations(path: Path) -> InspectorConfig:
    content = Path(path).read_text(encoding="utf-8")
    try:
        data: Dict[str, Any] = yaml.safe_load(content) or {}
    except yaml.YAMLError as exc:
        raise InvalidValueError(f"{path}: invalid YAML ({exc})") from None
    cfg = parse_declarations(data, source=str(path))
    cfg.source = Path(path)
    return cfg


def build_context(cfg: InspectorConfig, log: Optional[Logger] = None) -> ArgContext:
    """Create a context and register every declared option, in file order."""
    ctx = ArgContext(cfg.info, log=log)
    for desc in cfg.options:
        ctx.add_arg(desc)
    return ctx
