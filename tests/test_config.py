from __future__ import annotations

import pytest

from supabase_rest_client import ClientConfig, ErrorKind, SupabaseError, create_client


@pytest.mark.parametrize(
    ("base_url", "api_key"),
    [("", "key"), ("https://x.supabase.co", ""), ("", ""), ("   ", "key"), (None, "key")],
)
def test_invalid_config_is_rejected(base_url, api_key) -> None:
    with pytest.raises(SupabaseError) as exc:
        create_client(base_url, api_key)

    assert exc.value.kind is ErrorKind.INVALID_CONFIGURATION
    assert exc.value.message == "Invalid client configuration"
    assert str(exc.value) == "Invalid client configuration"
    assert exc.value.status_code is None


def test_token_defaults_to_none() -> None:
    client = create_client("https://x.supabase.co", "anon")
    assert client.get_token() is None
    assert client.token is None
    assert client.base_url == "https://x.supabase.co"
    assert client.api_key == "anon"


def test_configured_token_is_returned() -> None:
    client = create_client("https://x.supabase.co", "anon", "jwt-1")
    assert client.get_token() == "jwt-1"


@pytest.mark.parametrize("value", ["jwt-2", "", "with spaces"])
def test_set_token_round_trip(value) -> None:
    client = create_client("https://x.supabase.co", "anon", "jwt-1")
    client.set_token(value)
    assert client.get_token() == value


def test_set_token_none_clears() -> None:
    client = create_client("https://x.supabase.co", "anon", "jwt-1")
    client.set_token(None)
    assert client.get_token() is None


def test_clients_do_not_share_tokens() -> None:
    a = create_client("https://x.supabase.co", "anon")
    b = create_client("https://x.supabase.co", "anon")
    a.set_token("a-token")
    assert b.get_token() is None


def test_from_env_reads_variables() -> None:
    cfg = ClientConfig.from_env(
        {
            "SUPABASE_URL": "https://env.supabase.co ",
            "SUPABASE_KEY": "service",
            "SUPABASE_TOKEN": "jwt",
            "SUPABASE_TIMEOUT": "3.5",
        }
    )
    assert cfg == ClientConfig(base_url="https://env.supabase.co", api_key="service", token="jwt", timeout_s=3.5)


def test_from_env_falls_back_to_anon_key() -> None:
    cfg = ClientConfig.from_env({"SUPABASE_URL": "https://env.supabase.co", "SUPABASE_ANON_KEY": "anon"})
    assert cfg.api_key == "anon"
    assert cfg.token is None
    assert cfg.timeout_s == 15.0


def test_from_env_uses_process_environment(monkeypatch) -> None:
    monkeypatch.setenv("SUPABASE_URL", "https://proc.supabase.co")
    monkeypatch.setenv("SUPABASE_KEY", "k")
    monkeypatch.delenv("SUPABASE_TOKEN", raising=False)
    monkeypatch.delenv("SUPABASE_TIMEOUT", raising=False)
    cfg = ClientConfig.from_env()
    assert cfg.base_url == "https://proc.supabase.co"
    assert cfg.api_key == "k"


def test_from_env_missing_values_fail_on_validate() -> None:
    cfg = ClientConfig.from_env({})
    with pytest.raises(SupabaseError) as exc:
        cfg.validate()
    assert exc.value.kind is ErrorKind.INVALID_CONFIGURATION


def test_from_env_bad_timeout() -> None:
    with pytest.raises(SupabaseError) as exc:
        ClientConfig.from_env({"SUPABASE_URL": "u", "SUPABASE_KEY": "k", "SUPABASE_TIMEOUT": "soon"})
    assert exc.value.kind is ErrorKind.INVALID_CONFIGURATION


@pytest.mark.parametrize("timeout", ["0", "-1", "-0.5"])
def test_from_env_rejects_non_positive_timeout(timeout) -> None:
    with pytest.raises(SupabaseError) as exc:
        ClientConfig.from_env({"SUPABASE_URL": "u", "SUPABASE_KEY": "k", "SUPABASE_TIMEOUT": timeout})
    assert exc.value.kind is ErrorKind.INVALID_CONFIGURATION
