# =====================================================================
# File: vexargs_pkg/core/context.py
# Parser context: owns the registry, the token list and the status
# =====================================================================
from __future__ import annotations
from typing import Iterator, List, Optional, Sequence, Tuple

from .errors import AllocationError, VexError
from .parser import ArgTokenizer
from .registry import OptionRegistry
from .types import ContextInfo, OptionDescriptor, ParsedToken, ParseStatus, StatusKind, Value, ValueKind
from ..ui.help import render_help
from ..utils.constants import DEFAULT_OPTIONS, STATUS_LABELS
from ..utils.logger import Logger


class ArgContext:
    """
    One argument parser for one program.

    Register options with `add_arg`, call `parse(argv)` (argv[0] is the
    program name and is skipped), then query the tokens. Every failing
    operation updates `status` and raises a VexError subclass.

    `parse` is all-or-nothing: on failure the tokens from the previous
    successful call are left in place.

    Not thread-safe; guard a shared context with an external lock.
    """

    def __init__(self, info: ContextInfo, log: Optional[Logger] = None):
        self.info = info
        self.log = log or Logger.quiet()
        self.status = ParseStatus()
        self._registry = OptionRegistry()
        self._tokens: List[ParsedToken] = []
        self._help: Optional[str] = None

        for desc in DEFAULT_OPTIONS:
            self.add_arg(desc)

    # ------------------------------ Status ------------------------------
    @property
    def ok(self) -> bool:
        return self.status.ok

    def _reset_status(self):
        self.status = ParseStatus()

    def _fail(self, err: VexError) -> VexError:
        self.status = ParseStatus(err.status, err.message)
        if err.message:
            self.log.warn(err.message)
        return err

    # ------------------------------ Registry ------------------------------
    @property
    def options(self) -> Tuple[OptionDescriptor, ...]:
        return self._registry.snapshot()

    def add_arg(self, desc: OptionDescriptor) -> OptionDescriptor:
        self._reset_status()
        try:
            stored = self._registry.register(desc)
        except VexError as err:
            raise self._fail(err)
        except MemoryError:
            raise self._fail(AllocationError()) from None
        self._help = None
        self.log.debug(f"registered {stored.display_name} ({stored.value_kind.value}, max {stored.max_count})")
        return stored

    def add_option(
        self,
        short_name: str,
        long_name: Optional[str] = None,
        value_kind: ValueKind = ValueKind.FLAG,
        description: str = "",
        max_count: int = 0,
    ) -> OptionDescriptor:
        return self.add_arg(OptionDescriptor(short_name, long_name, value_kind, description, max_count))

    # ------------------------------ Parsing ------------------------------
    def parse(self, argv: Sequence[Optional[str]]) -> Tuple[ParsedToken, ...]:
        self._reset_status()
        tokenizer = ArgTokenizer(self._registry, self.log)
        try:
            tokens = tokenizer.run(argv)
        except VexError as err:
            raise self._fail(err)
        except MemoryError:
            raise self._fail(AllocationError()) from None
        self._tokens = tokens
        return self.tokens

    # ------------------------------ Accessors ------------------------------
    @property
    def tokens(self) -> Tuple[ParsedToken, ...]:
        return tuple(self._tokens)

    def token_count(self) -> int:
        return len(self._tokens)

    def get_token(self, index: int) -> Optional[ParsedToken]:
        if index < 0 or index >= len(self._tokens):
            return None
        return self._tokens[index]

    def arg_found(self, name: Optional[str]) -> bool:
        # one character -> short names, longer -> long names
        return bool(self.find_tokens(name))

    def find_tokens(self, name: str) -> List[ParsedToken]:
        if not name:
            return []
        field = "short_name" if len(name) == 1 else "long_name"
        return [t for t in self._tokens if getattr(t, field) == name]

    def values(self, name: str) -> List[Value]:
        out: List[Value] = []
        for token in self.find_tokens(name):
            out.extend(token.values)
        return out

    def free_values(self) -> List[Value]:
        out: List[Value] = []
        for token in self._tokens:
            if not token.is_option:
                out.extend(token.values)
        return out

    def __len__(self) -> int:
        return len(self._tokens)

    def __iter__(self) -> Iterator[ParsedToken]:
        return iter(tuple(self._tokens))

    def __getitem__(self, index: int) -> ParsedToken:
        return self._tokens[index]

    def __reversed__(self) -> Iterator[ParsedToken]:
        return reversed(tuple(self._tokens))

    # ------------------------------ Text ------------------------------
    def get_help(self) -> str:
        if self._help is None:
            self._help = render_help(self.info, self._registry)
        return self._help

    def get_version(self) -> str:
        return self.info.version

    def status_message(self) -> str:
        if self.status.kind is StatusKind.OK:
            return STATUS_LABELS[StatusKind.OK]
        return self.status.message or STATUS_LABELS[self.status.kind]
