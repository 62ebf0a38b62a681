"""
Database helpers for the MagicStream backend.
"""

from magicstream_backend.db.supabase import create_supabase_read_client

__all__ = [
    "create_supabase_read_client",
]
