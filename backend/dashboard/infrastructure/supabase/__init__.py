"""Supabase infrastructure package."""

from .supabase_client import SupabaseClient, build_backend_client

__all__ = ["SupabaseClient", "build_backend_client"]
