from __future__ import annotations

import os
from functools import lru_cache

from supabase import Client, create_client
from supabase.client import ClientOptions

DEFAULT_TIMEOUT_SECONDS = 10.0


@lru_cache
def get_supabase_url() -> str:
    url = (os.getenv("SUPABASE_URL") or "").strip()
    if not url:
        raise RuntimeError("SUPABASE_URL environment variable is not set")
    return url


@lru_cache
def get_supabase_anon_key() -> str:
    key = (os.getenv("SUPABASE_ANON_KEY") or "").strip()
    if not key:
        raise RuntimeError("SUPABASE_ANON_KEY environment variable is not set")
    return key


def get_supabase_timeout() -> float:
    raw = (os.getenv("SUPABASE_TIMEOUT_SECONDS") or "").strip()
    if not raw:
        return DEFAULT_TIMEOUT_SECONDS
    try:
        return float(raw)
    except ValueError as exc:
        raise RuntimeError(f"SUPABASE_TIMEOUT_SECONDS must be a number, got {raw!r}") from exc


def create_supabase_read_client(
    *,
    url: str | None = None,
    anon_key: str | None = None,
    timeout: float | None = None,
) -> Client:
    """
    Create a Supabase client using the anon key (public read operations).

    The PostgREST timeout bounds every catalog query made through the client.
    """

    options = ClientOptions(postgrest_client_timeout=timeout or get_supabase_timeout())
    return create_client(url or get_supabase_url(), anon_key or get_supabase_anon_key(), options=options)
