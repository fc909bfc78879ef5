# =============================================================================
# core/services/__init__.py - Service Layer Exports
# =============================================================================

from .file_urls import FileUrlResolver, PocketBaseFileUrlResolver
from .flyer_service import FlyerService

__all__ = [
    "FileUrlResolver",
    "PocketBaseFileUrlResolver",
    "FlyerService",
]
