from __future__ import annotations
import sqlite3

from .schemas import ErrorEnvelope

class LookupFailure(Exception):
    """Base for every error a lookup handler can surface to the client."""

class NotFound(LookupFailure):
    def __init__(self, word: str):
        super().__init__(word)
        self.word = word

    def __repr__(self) -> str:
        return 'DBError(RowNotFound)'

class StoreFailure(LookupFailure):
    def __init__(self, cause: Exception):
        super().__init__(str(cause))
        self.cause = cause

    def __repr__(self) -> str:
        return f"DBError({self.cause!r})"

class PoolClosed(sqlite3.InterfaceError):
    """Raised by acquire() after the pool has been shut down."""

def error_envelope(exc: LookupFailure) -> ErrorEnvelope:
    if isinstance(exc, (NotFound, StoreFailure)):
        return ErrorEnvelope(err=repr(exc))
    raise TypeError(f"Unhandled lookup failure: {type(exc).__name__}")

def status_for(exc: LookupFailure) -> int:
    # Misses and store failures share the status of a success; only the
    # envelope shape tells them apart.
    if isinstance(exc, (NotFound, StoreFailure)):
        return 200
    raise TypeError(f"Unhandled lookup failure: {type(exc).__name__}")
