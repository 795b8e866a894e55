# =====================================================================
# File: vexargs_pkg/core/registry.py
# Ordered option registry with registration-time validation
# =====================================================================
from __future__ import annotations
from dataclasses import replace
from typing import Iterator, List, Optional

from .errors import InvalidValueError
from .types import OptionDescriptor, ValueKind


def _valid_short(name: Optional[str]) -> bool:
    return isinstance(name, str) and len(name) == 1 and name.isascii() and name.isalpha()


def _valid_long(name: str) -> bool:
    if not isinstance(name, str) or len(name) < 2:
        return False
    if name.startswith("-") or "=" in name:
        return False
    return not any(ch.isspace() for ch in name)


class OptionRegistry:
    """
    Declared options in registration order.
    Order decides both the help layout and which descriptor a lookup hits first.
    """

    def __init__(self):
        self._items: List[OptionDescriptor] = []

    def __iter__(self) -> Iterator[OptionDescriptor]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def validate(self, desc: OptionDescriptor):
        """
        Raise InvalidValueError unless `desc` can be added.

        Missing names are checked before the short-name rule, so a descriptor
        with neither name reports "No arg name given" rather than an invalid
        short name. Duplicates are checked last, short name first.
        """
        short, long_ = desc.short_name, desc.long_name
        if not short and not long_:
            raise InvalidValueError("No arg name given")
        if not _valid_short(short):
            raise InvalidValueError(f"Invalid short arg name: {short!r}")
        if long_ is not None and not _valid_long(long_):
            raise InvalidValueError(f"Invalid long arg name: {long_!r}")
        if not isinstance(desc.value_kind, ValueKind):
            raise InvalidValueError(f"Invalid value kind for -{short}: {desc.value_kind!r}")

        for existing in self._items:
            if existing.short_name == short:
                raise InvalidValueError(f"Duplicate arguments: -{short}")
            if long_ is not None and existing.long_name == long_:
                raise InvalidValueError(f"Duplicate arguments: --{long_}")

    def register(self, desc: OptionDescriptor) -> OptionDescriptor:
        self.validate(desc)
        if desc.value_kind is ValueKind.FLAG and desc.max_count != 0:
            desc = replace(desc, max_count=0)
        self._items.append(desc)
        return desc

    def find_short(self, ch: str) -> Optional[OptionDescriptor]:
        for desc in self._items:
            if desc.short_name == ch:
                return desc
        return None

    def find_long(self, name: str) -> Optional[OptionDescriptor]:
        # exact match only: "--helper" must not resolve to "help"
        for desc in self._items:
            if desc.long_name is not None and desc.long_name == name:
                return desc
        return None

    def snapshot(self) -> tuple:
        return tuple(self._items)
