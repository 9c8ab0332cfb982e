from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, TypedDict


class AuthTokenResponse(TypedDict):
    access_token: str
    token_type: str
    expires_in: int
    refresh_token: str


class _Payload:
    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class PasswordCredentials(_Payload):
    email: str
    password: str


@dataclass(frozen=True)
class RefreshTokenPayload(_Payload):
    refresh_token: str


@dataclass(frozen=True)
class EmailPayload(_Payload):
    email: str


@dataclass(frozen=True)
class VerifyOTPPayload(_Payload):
    email: str
    token: str
    type: str


@dataclass(frozen=True)
class ResetPasswordPayload(_Payload):
    token: str
    password: str
