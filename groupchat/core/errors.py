"""Error Hierarchy — typed exceptions for every group chat failure mode.

Invariants:
    - Every error carries an ErrorKind; the kind alone decides the HTTP status
    - to_response() produces the {"error": message} envelope
    - StoreError keeps the persistence cause for logs, never for clients
      (unless verbose-error mode is enabled by the handler)

Design Decisions:
    - Single hierarchy with GroupChatError base: one FastAPI handler maps all kinds
    - ErrorKind enum over isinstance chains: the mapping table lives in one place
"""

from enum import Enum


class ErrorKind(str, Enum):
    """High-level error kinds, one per HTTP outcome."""
    BAD_REQUEST = "bad_request"
    NOT_FOUND = "not_found"
    FORBIDDEN = "forbidden"
    STORE = "store"


HTTP_STATUS_BY_KIND: dict[ErrorKind, int] = {
    ErrorKind.BAD_REQUEST: 400,
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.FORBIDDEN: 403,
    ErrorKind.STORE: 500,
}

GENERIC_STORE_MESSAGE = "Database error occurred"
GENERIC_INTERNAL_MESSAGE = "Internal Server Error"


class GroupChatError(Exception):
    """Base exception for all group chat errors."""

    def __init__(self, message: str, kind: ErrorKind):
        super().__init__(message)
        self.message = message
        self.kind = kind

    @property
    def http_status(self) -> int:
        return HTTP_STATUS_BY_KIND[self.kind]

    def public_message(self, verbose: bool = False) -> str:
        """Message safe to show to the caller."""
        return self.message

    def to_response(self, verbose: bool = False) -> dict:
        return {"error": self.public_message(verbose)}


# ─── Request Errors (400-level) ─────────────────────────────────

class BadRequestError(GroupChatError):
    """Missing identity or missing/blank required field."""
    def __init__(self, message: str):
        super().__init__(message, ErrorKind.BAD_REQUEST)


class NotFoundError(GroupChatError):
    """Referenced resource does not exist."""
    def __init__(self, message: str):
        super().__init__(message, ErrorKind.NOT_FOUND)


class ForbiddenError(GroupChatError):
    """Caller lacks the membership required for the action."""
    def __init__(self, message: str):
        super().__init__(message, ErrorKind.FORBIDDEN)


# ─── Infrastructure Errors (500-level) ──────────────────────────

class StoreError(GroupChatError):
    """Persistence operation failed. The cause is chained via __cause__."""
    def __init__(self, message: str, operation: str):
        super().__init__(
            f"Database {operation} failed: {message}", ErrorKind.STORE,
        )
        self.operation = operation

    def public_message(self, verbose: bool = False) -> str:
        if not verbose:
            return GENERIC_STORE_MESSAGE
        if self.__cause__ is not None:
            return f"{self.message} ({self.__cause__})"
        return self.message
