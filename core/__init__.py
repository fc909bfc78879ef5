# =============================================================================
# core/ - Business Logic Package
# =============================================================================
# This package contains the fetch flow, independent of console and env:
# - models/: Pydantic schemas and result types
# - services/: Record fetcher and file URL resolution
#
# Code in this package should NOT read environment variables or write to
# stdout. Callers pass credentials in and decide how to report results.
# =============================================================================
