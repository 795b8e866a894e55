# =====================================================================
# File: vexargs_pkg/core/errors.py
# Exceptions raised by registration and parsing
# =====================================================================
from __future__ import annotations
from typing import Optional

from .types import StatusKind


class VexError(Exception):
    """Base class; `status` mirrors the context status set before raising."""

    status = StatusKind.OK

    def __init__(self, message: Optional[str] = None):
        super().__init__(message or self.status.name.lower())
        self.message = message


class AllocationError(VexError):
    status = StatusKind.ALLOCATION_FAILURE

    def __init__(self):
        super().__init__(None)


class InvalidValueError(VexError):
    status = StatusKind.INVALID_VALUE


class UnknownArgumentError(VexError):
    status = StatusKind.UNKNOWN_ARGUMENT
