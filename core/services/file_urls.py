# =============================================================================
# core/services/file_urls.py - File URL Resolution
# =============================================================================
# Turning a record + file field value into a download URL is a backend rule,
# not ours. The fetcher only depends on the FileUrlResolver protocol; the
# default implementation asks the PocketBase client to build the URL.
# =============================================================================

from typing import Protocol

from core.models.record import Record
from lib.pocketbase_client import PocketBaseClient


class FileUrlResolver(Protocol):
    """Anything that maps (record, stored filename) to an absolute URL."""

    def __call__(self, record: Record, filename: str | None) -> str:
        ...


class PocketBaseFileUrlResolver:
    """
    Resolve file URLs with PocketBase's /api/files layout.

    An empty or missing filename resolves to "" rather than a URL.
    """

    def __init__(self, client: PocketBaseClient, thumb: str | None = None):
        self.client = client
        self.thumb = thumb

    def __call__(self, record: Record, filename: str | None) -> str:
        return self.client.get_file_url(record, filename, thumb=self.thumb)
