"""Backend utilities"""
from .supabase_client import get_supabase_client, supabase_configured

__all__ = ["get_supabase_client", "supabase_configured"]
