"""Clients for services BuzzPay depends on."""

from .supabase_store import RecordStore, SupabaseRecordStore

__all__ = ["RecordStore", "SupabaseRecordStore"]
