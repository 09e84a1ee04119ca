"""Error taxonomy shared by the ledger, the aggregator and the HTTP layer."""

from typing import Any, Optional


class LedgerError(Exception):
    status_code = 500

    def __init__(self, message: str, **extra: Any):
        super().__init__(message)
        self.message = message
        self.extra = extra

    def to_dict(self) -> dict:
        return {"error": self.message, **self.extra}


class ValidationError(LedgerError):
    """Client data broke a required-field or referential rule."""

    status_code = 400

    def __init__(self, message: str, fields: Optional[list[str]] = None, **extra: Any):
        super().__init__(message, fields=fields or [], **extra)
        self.fields = fields or []


class NotFound(LedgerError):
    status_code = 404


class InternalError(LedgerError):
    status_code = 500


class Unauthorized(LedgerError):
    status_code = 401
