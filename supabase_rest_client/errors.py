from __future__ import annotations

from enum import Enum
from typing import Any

from .constants import ERROR_MESSAGES


class ErrorKind(str, Enum):
    INVALID_CONFIGURATION = "invalid_configuration"
    REQUEST_FAILED = "request_failed"
    NETWORK_ERROR = "network_error"


class SupabaseError(Exception):
    """The single error type raised by the client.

    ``kind`` tells configuration, HTTP and transport failures apart.
    ``status_code`` is set only for REQUEST_FAILED, ``response`` holds the raw
    response text (REQUEST_FAILED) or the underlying exception (NETWORK_ERROR).
    """

    def __init__(
            self,
            message: str,
            *,
            kind: ErrorKind,
            status_code: int | None = None,
            response: Any | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.kind = kind
        self.status_code = status_code
        self.response = response

    @classmethod
    def invalid_configuration(cls) -> SupabaseError:
        return cls(ERROR_MESSAGES["INVALID_CONFIG"], kind=ErrorKind.INVALID_CONFIGURATION)

    @classmethod
    def request_failed(cls, status_code: int, text: str) -> SupabaseError:
        msg = f"{ERROR_MESSAGES['REQUEST_FAILED']}: {status_code} {text}".rstrip()
        return cls(msg, kind=ErrorKind.REQUEST_FAILED, status_code=status_code, response=text)

    @classmethod
    def network_error(cls, cause: BaseException) -> SupabaseError:
        msg = f"{ERROR_MESSAGES['NETWORK_ERROR']}: {cause}"
        return cls(msg, kind=ErrorKind.NETWORK_ERROR, response=cause)

    @property
    def is_request_failed(self) -> bool:
        return self.kind is ErrorKind.REQUEST_FAILED

    @property
    def is_network_error(self) -> bool:
        return self.kind is ErrorKind.NETWORK_ERROR

    def __repr__(self) -> str:
        return f"SupabaseError(kind={self.kind.value!r}, status_code={self.status_code!r}, message={self.message!r})"
