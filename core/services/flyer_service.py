# =============================================================================
# core/services/flyer_service.py - Flyer Fetching
# =============================================================================
# Logs in as a privileged account, lists one page of a collection and adds
# an imageUrl to each record. One session per run, read-only.
#
# fetch_page() never raises: every failure becomes a FetchResult.failure so
# the caller can log it and carry on.
# =============================================================================

import logging
from typing import Any, Iterator

import httpx
from pydantic import ValidationError

from app.exceptions import (
    AuthenticationError,
    MalformedResponseError,
    RecordListError,
)
from core.models.credentials import Credentials
from core.models.fetch import FetchResult
from core.models.record import Record, RecordPage
from core.services.file_urls import FileUrlResolver, PocketBaseFileUrlResolver
from lib.pocketbase_client import PocketBaseClient, PocketBaseClientError
from lib.utils import ApplicationError

logger = logging.getLogger(__name__)

DEFAULT_COLLECTION = "flyers"
DEFAULT_AUTH_COLLECTION = "_superusers"
DEFAULT_PER_PAGE = 50

# Field holding the flyer's file attachment, and the key the URL is added under
IMAGE_FIELD = "image"
IMAGE_URL_FIELD = "imageUrl"


class FlyerService:
    """
    Service for reading flyers out of PocketBase.

    Example:
        service = FlyerService(client)
        result = service.fetch_page(credentials)
        if result.ok:
            for flyer in service.enriched_records(result.page):
                print(flyer["imageUrl"])
    """

    def __init__(
        self,
        client: PocketBaseClient,
        resolver: FileUrlResolver | None = None,
        collection: str = DEFAULT_COLLECTION,
        auth_collection: str = DEFAULT_AUTH_COLLECTION,
    ):
        self.client = client
        self.resolver = resolver or PocketBaseFileUrlResolver(client)
        self.collection = collection
        self.auth_collection = auth_collection

    # -------------------------------------------------------------------------
    # Fetching
    # -------------------------------------------------------------------------

    def authenticate(self, credentials: Credentials) -> None:
        """
        Open a session as the privileged account.

        Raises:
            AuthenticationError: If PocketBase rejects the login or is unreachable
            MalformedResponseError: If the auth response cannot be read
        """
        try:
            self.client.auth_with_password(
                self.auth_collection,
                credentials.email,
                credentials.password.get_secret_value(),
            )
        except PocketBaseClientError as e:
            if e.code == "INVALID_RESPONSE":
                raise MalformedResponseError("auth-with-password", e.message) from e
            raise AuthenticationError(self.auth_collection, e.message, e.status_code) from e

    def list_page(self, page: int = 1, per_page: int = DEFAULT_PER_PAGE) -> RecordPage:
        """
        Fetch one page of the collection.

        Raises:
            RecordListError: If the list request fails
            MalformedResponseError: If the list envelope cannot be read
        """
        try:
            return self.client.get_list(self.collection, page=page, per_page=per_page)
        except PocketBaseClientError as e:
            if e.code == "INVALID_RESPONSE":
                raise MalformedResponseError(f"{self.collection} list", e.message) from e
            raise RecordListError(self.collection, e.message, e.status_code) from e

    def fetch_page(
        self,
        credentials: Credentials,
        page: int = 1,
        per_page: int = DEFAULT_PER_PAGE,
    ) -> FetchResult:
        """
        Authenticate, then fetch one page of records.

        No partial results: if listing fails after a successful login the
        result is a failure and carries no records.

        Args:
            credentials: Privileged account login
            page: 1-based page number
            per_page: Page size

        Returns:
            FetchResult.success with the page, or FetchResult.failure
        """
        try:
            self.authenticate(credentials)
            result = self.list_page(page=page, per_page=per_page)
        except ApplicationError as e:
            return self._fail(e.message, e.code)
        except (httpx.HTTPError, ValidationError) as e:
            return self._fail(str(e), "FETCH_FAILED")

        logger.info(f"Fetched {len(result.items)} records from {self.collection}")
        return FetchResult.success(result)

    def _fail(self, message: str, code: str | None) -> FetchResult:
        logger.debug(f"Fetch failed [{code}]: {message}")
        return FetchResult.failure(message, code)

    # -------------------------------------------------------------------------
    # Enrichment
    # -------------------------------------------------------------------------

    def enrich(self, record: Record) -> dict[str, Any]:
        """
        Return all fields of the record plus imageUrl.

        A record without an image gets an empty imageUrl.
        """
        combined = record.to_dict()
        combined[IMAGE_URL_FIELD] = self.resolver(record, record.get(IMAGE_FIELD))
        return combined

    def enriched_records(self, page: RecordPage) -> Iterator[dict[str, Any]]:
        """Yield enriched records one at a time, in page order."""
        for record in page.items:
            yield self.enrich(record)
