# =====================================================================
# File: vexargs_pkg/core/parser.py
# Argument tokenizer: walks argv once, left to right
# =====================================================================
from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from .errors import InvalidValueError, UnknownArgumentError
from .registry import OptionRegistry
from .types import OptionDescriptor, ParsedToken, Value, ValueKind
from .values import classify, convert_for, convert_free
from ..utils.constants import END_OF_OPTIONS, LONG_PREFIX, SHORT_PREFIX, VALUE_SEP
from ..utils.logger import Logger


@dataclass
class _Draft:
    """Working token; values are only appended while the tokenizer runs."""
    value_kind: ValueKind
    short_name: Optional[str] = None
    long_name: Optional[str] = None
    values: List[Value] = field(default_factory=list)

    @classmethod
    def for_option(cls, desc: OptionDescriptor) -> "_Draft":
        return cls(desc.value_kind, desc.short_name, desc.long_name)

    def freeze(self) -> ParsedToken:
        return ParsedToken(
            value_kind=self.value_kind,
            short_name=self.short_name,
            long_name=self.long_name,
            values=tuple(self.values),
        )


class ArgTokenizer:
    """
    Turn an argument vector into ParsedTokens against a registry.

    State carried between arguments:
      - options: False once `--` has been seen
      - last / last_desc: the most recent option token; free values may group
        onto it while its descriptor has capacity. Any new option argument
        clears it, a free value appended to it does not.

    Tokens are built as drafts and frozen when `run` returns, so the caller
    gets read-only ParsedTokens.
    """

    def __init__(self, registry: OptionRegistry, log: Optional[Logger] = None):
        self.registry = registry
        self.log = log or Logger.quiet()
        self.drafts: List[_Draft] = []
        self.options = True
        self.last: Optional[_Draft] = None
        self.last_desc: Optional[OptionDescriptor] = None

    def run(self, args: Sequence[Optional[str]]) -> List[ParsedToken]:
        self.drafts = []
        self.options = True
        self._clear_last()

        rest = list(args)[1:]
        for arg in rest:
            if arg is None:
                continue
            if self.options and arg == END_OF_OPTIONS:
                self.options = False
                continue
            if self.options and arg.startswith(SHORT_PREFIX) and arg != SHORT_PREFIX:
                self._clear_last()
                if arg.startswith(LONG_PREFIX):
                    self._long_option(arg)
                else:
                    self._short_cluster(arg)
            else:
                self._free_value(arg)

        self.log.debug(f"parsed {len(self.drafts)} token(s) from {len(rest)} argument(s)")
        return [d.freeze() for d in self.drafts]

    # ------------------------------ State ------------------------------
    def _clear_last(self):
        self.last = None
        self.last_desc = None

    def _push_option(self, desc: OptionDescriptor) -> _Draft:
        draft = _Draft.for_option(desc)
        self.drafts.append(draft)
        self.last, self.last_desc = draft, desc
        self.log.debug(f"token #{len(self.drafts) - 1}: {desc.display_name}")
        return draft

    # ------------------------------ Options ------------------------------
    def _long_option(self, arg: str):
        body = arg[len(LONG_PREFIX):]
        name, sep, text = body.partition(VALUE_SEP)
        desc = self.registry.find_long(name)
        if desc is None:
            raise UnknownArgumentError(f"Unknown option: {LONG_PREFIX}{name}")

        draft = self._push_option(desc)
        if not sep:
            return
        if not desc.takes_values:
            raise InvalidValueError(f"Option {desc.display_name} does not take a value")
        if not desc.has_capacity(0):
            raise InvalidValueError(f"Option {desc.display_name} accepts no values")
        draft.values.append(convert_for(desc, text))

    def _short_cluster(self, arg: str):
        for idx in range(len(SHORT_PREFIX), len(arg)):
            ch = arg[idx]
            desc = self.registry.find_short(ch)
            if desc is not None:
                self._push_option(desc)
                continue

            # -ifile.txt: the rest of the cluster is a value for the last option
            last, last_desc = self.last, self.last_desc
            if last is not None and last_desc is not None and last_desc.takes_values:
                if not last_desc.has_capacity(len(last.values)):
                    raise InvalidValueError(f"Too many values for {last_desc.display_name}")
                last.values.append(convert_for(last_desc, arg[idx:]))
                return
            raise UnknownArgumentError(f"Unknown option: {SHORT_PREFIX}{ch}")

    # ------------------------------ Values ------------------------------
    def _free_value(self, arg: str):
        kind = classify(arg)
        last, last_desc = self.last, self.last_desc

        if self.options and last is not None and last_desc is not None \
                and last_desc.has_capacity(len(last.values)):
            if kind is not last.value_kind:
                raise InvalidValueError(
                    f"Unexpected value for {last_desc.display_name}: {arg!r} "
                    f"(expected {last.value_kind.value}, got {kind.value})"
                )
            last.values.append(convert_free(arg, kind))
            return

        self.drafts.append(_Draft(kind, values=[convert_free(arg, kind)]))
        self._clear_last()
        self.log.debug(f"token #{len(self.drafts) - 1}: free {kind.value} {arg!r}")
