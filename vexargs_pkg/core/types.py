# =====================================================================
# File: vexargs_pkg/core/types.py
# Option descriptors, parsed tokens and parser status
# =====================================================================
from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple, Union

Value = Union[int, float, str]


class ValueKind(Enum):
    FLAG = "flag"
    INTEGER = "integer"
    FLOAT = "float"
    STRING = "string"

    @classmethod
    def from_name(cls, name: str) -> "ValueKind":
        try:
            return cls(str(name).strip().lower())
        except ValueError:
            raise ValueError(f"Unknown value kind: {name!r}") from None


class StatusKind(Enum):
    OK = 0
    ALLOCATION_FAILURE = 1
    INVALID_VALUE = 2
    UNKNOWN_ARGUMENT = 3


@dataclass(frozen=True)
class OptionDescriptor:
    short_name: Optional[str]
    long_name: Optional[str] = None
    value_kind: ValueKind = ValueKind.FLAG
    description: str = ""
    max_count: int = 0  # negative = unbounded

    @property
    def takes_values(self) -> bool:
        return self.value_kind is not ValueKind.FLAG

    @property
    def unbounded(self) -> bool:
        return self.max_count < 0

    def has_capacity(self, count: int) -> bool:
        """True if a token already holding `count` values may take another."""
        return self.unbounded or count < self.max_count

    @property
    def display_name(self) -> str:
        if self.long_name:
            return f"--{self.long_name}"
        return f"-{self.short_name}"


@dataclass(frozen=True)
class ParsedToken:
    value_kind: ValueKind
    short_name: Optional[str] = None
    long_name: Optional[str] = None
    values: Tuple[Value, ...] = ()

    @property
    def is_option(self) -> bool:
        return self.short_name is not None or self.long_name is not None

    @property
    def value(self) -> Optional[Value]:
        return self.values[0] if self.values else None

    def to_dict(self) -> dict:
        return {
            "short_name": self.short_name,
            "long_name": self.long_name,
            "kind": self.value_kind.value,
            "values": list(self.values),
        }


@dataclass
class ParseStatus:
    kind: StatusKind = StatusKind.OK
    message: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.kind is StatusKind.OK


@dataclass
class ContextInfo:
    name: str
    version: str = ""
    description: str = ""
