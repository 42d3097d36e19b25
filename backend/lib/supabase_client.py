"""
Supabase client for session persistence

Optional: without SUPABASE_URL / SUPABASE_SERVICE_KEY the advisor keeps its
sessions in memory.
"""
import logging
import os
from typing import Optional

from dotenv import load_dotenv
from supabase import Client, create_client

# Load environment variables
load_dotenv()
load_dotenv('../.env')  # Also try parent directory

logger = logging.getLogger(__name__)

_supabase_client: Optional[Client] = None


def supabase_configured() -> bool:
    return bool(os.getenv("SUPABASE_URL") and os.getenv("SUPABASE_SERVICE_KEY"))


def get_supabase_client() -> Optional[Client]:
    """Get or create the Supabase client singleton, or None when not configured."""
    global _supabase_client

    if _supabase_client is None:
        if not supabase_configured():
            logger.info("Supabase not configured, sessions stay in memory")
            return None

        # Service role key: the backend writes session rows directly
        _supabase_client = create_client(os.getenv("SUPABASE_URL"), os.getenv("SUPABASE_SERVICE_KEY"))

    return _supabase_client
