from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping

from .constants import DEFAULT_TIMEOUT_S
from .errors import SupabaseError

ENV_URL = "SUPABASE_URL"
ENV_KEY = "SUPABASE_KEY"
ENV_ANON_KEY = "SUPABASE_ANON_KEY"
ENV_TOKEN = "SUPABASE_TOKEN"
ENV_TIMEOUT = "SUPABASE_TIMEOUT"


@dataclass(frozen=True)
class ClientConfig:
    base_url: str
    api_key: str
    token: str | None = None
    timeout_s: float = DEFAULT_TIMEOUT_S

    def validate(self) -> None:
        if not (self.base_url or "").strip() or not (self.api_key or "").strip():
            raise SupabaseError.invalid_configuration()

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> ClientConfig:
        env = os.environ if environ is None else environ
        timeout_raw = (env.get(ENV_TIMEOUT) or "").strip()
        try:
            timeout_s = float(timeout_raw) if timeout_raw else DEFAULT_TIMEOUT_S
        except ValueError:
            raise SupabaseError.invalid_configuration() from None
        if timeout_s <= 0:
            raise SupabaseError.invalid_configuration()
        return cls(
            base_url=(env.get(ENV_URL) or "").strip(),
            api_key=(env.get(ENV_KEY) or env.get(ENV_ANON_KEY) or "").strip(),
            token=(env.get(ENV_TOKEN) or "").strip() or None,
            timeout_s=timeout_s,
        )
