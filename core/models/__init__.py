# =============================================================================
# core/models/ - Data Models
# =============================================================================
# This package contains schemas for data validation:
# - record.py: Record, RecordPage, AuthSession (PocketBase payloads)
# - credentials.py: Credentials built from settings
# - fetch.py: FetchResult / FetchState for the fetch flow
# - app_shell.py: AppShellConfig for the native wrapper
# =============================================================================

# -----------------------------------------------------------------------------
# Record Models - PocketBase payloads
# -----------------------------------------------------------------------------
from .record import AuthSession, Record, RecordPage

# -----------------------------------------------------------------------------
# Fetch Models - Result of one run
# -----------------------------------------------------------------------------
from .fetch import FetchResult, FetchState

# -----------------------------------------------------------------------------
# Input / Static Config Models
# -----------------------------------------------------------------------------
from .credentials import Credentials
from .app_shell import AppShellConfig

__all__ = [
    # Record
    "AuthSession",
    "Record",
    "RecordPage",
    # Fetch
    "FetchResult",
    "FetchState",
    # Input / static config
    "Credentials",
    "AppShellConfig",
]
