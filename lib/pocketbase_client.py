# =============================================================================
# lib/pocketbase_client.py - PocketBase Client Wrapper
# =============================================================================
# This module provides a typed wrapper for the PocketBase HTTP API.
# It covers the three backend capabilities the flyer fetcher relies on:
# - Password login against an auth collection (e.g. _superusers)
# - Paginated record listing for a collection
# - File URL construction for a record's file field
#
# Every failure (network, non-2xx status, unreadable body) is raised as
# PocketBaseClientError. Nothing here retries.
#
# Usage:
#   from lib.pocketbase_client import PocketBaseClient
#   with PocketBaseClient("http://127.0.0.1:8090") as pb:
#       pb.auth_with_password("_superusers", email, password)
#       page = pb.get_list("flyers", page=1, per_page=50)
#       url = pb.get_file_url(page.items[0], page.items[0].get("image"))
# =============================================================================

from __future__ import annotations

import logging
from typing import Any
from urllib.parse import quote, urlencode

import httpx
from pydantic import ValidationError

from app.config import Settings
from core.models.record import AuthSession, Record, RecordPage
from lib.utils import ApplicationError, mask_identity

# Set up logging for this module
logger = logging.getLogger(__name__)


class PocketBaseClientError(ApplicationError):
    """
    Error during PocketBase operations.

    `status_code` is None for transport failures (connection refused,
    timeout). For HTTP errors `details["response"]` holds the JSON error
    body PocketBase sent, when there was one.
    """

    def __init__(
        self,
        message: str,
        code: str = "POCKETBASE_ERROR",
        status_code: int | None = None,
        suggestion: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message, code=code, suggestion=suggestion, details=details)
        self.status_code = status_code

    def __str__(self) -> str:
        result = f"[{self.code}] {self.message}"
        if self.suggestion:
            result += f" Suggestion: {self.suggestion}"
        return result


class PocketBaseClient:
    """
    Typed wrapper for PocketBase record and file operations.

    One instance holds one httpx.Client and at most one auth token. After
    auth_with_password() the token is sent on every later request.

    Example:
        client = PocketBaseClient.from_settings(get_settings())
        try:
            client.auth_with_password("_superusers", "admin@flyer.town", "secret")
            page = client.get_list("flyers", per_page=50)
        finally:
            client.close()
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = 30.0,
        transport: httpx.BaseTransport | None = None,
    ):
        self.base_url = base_url.rstrip("/")
        self._token: str | None = None
        self._http = httpx.Client(
            base_url=self.base_url,
            timeout=timeout,
            transport=transport,
            headers={"Accept": "application/json"},
        )

    @classmethod
    def from_settings(
        cls,
        settings: Settings,
        transport: httpx.BaseTransport | None = None,
    ) -> "PocketBaseClient":
        """Create a client for POCKETBASE_URL with the configured timeout."""
        return cls(
            settings.POCKETBASE_URL,
            timeout=settings.REQUEST_TIMEOUT_SECONDS,
            transport=transport,
        )

    # -------------------------------------------------------------------------
    # Lifecycle
    # -------------------------------------------------------------------------

    def close(self) -> None:
        self._http.close()

    def __enter__(self) -> "PocketBaseClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    @property
    def is_authenticated(self) -> bool:
        return self._token is not None

    def auth_clear(self) -> None:
        """Forget the current auth token."""
        self._token = None

    # -------------------------------------------------------------------------
    # Transport
    # -------------------------------------------------------------------------

    def _request(
        self,
        method: str,
        path: str,
        params: dict[str, Any] | None = None,
        json: dict[str, Any] | None = None,
    ) -> dict[str, Any]:
        """
        Send a request and return the decoded JSON object body.

        Raises:
            PocketBaseClientError: On transport errors, non-2xx responses
                or a body that is not a JSON object
        """
        headers = {"Authorization": self._token} if self._token else None

        try:
            response = self._http.request(
                method, path, params=params, json=json, headers=headers
            )
        except httpx.HTTPError as e:
            raise PocketBaseClientError(
                message=f"Request to {path} failed: {e}",
                code="REQUEST_FAILED",
                suggestion=f"Check that PocketBase is running at {self.base_url}",
                details={"path": path},
            ) from e

        if response.is_error:
            body = self._safe_json(response)
            reason = body.get("message") if isinstance(body, dict) else None
            raise PocketBaseClientError(
                message=reason or f"HTTP {response.status_code}",
                code="HTTP_ERROR",
                status_code=response.status_code,
                details={"path": path, "response": body},
            )

        body = self._safe_json(response)
        if not isinstance(body, dict):
            raise PocketBaseClientError(
                message=f"Expected a JSON object from {path}",
                code="INVALID_RESPONSE",
                status_code=response.status_code,
                details={"path": path},
            )
        return body

    @staticmethod
    def _safe_json(response: httpx.Response) -> Any:
        try:
            return response.json()
        except ValueError:
            return None

    # -------------------------------------------------------------------------
    # Auth
    # -------------------------------------------------------------------------

    def auth_with_password(
        self,
        collection: str,
        identity: str,
        password: str,
    ) -> AuthSession:
        """
        Log in with identity (email) and password.

        Args:
            collection: Auth collection name, e.g. "_superusers" or "users"
            identity: Account email (or username, if the collection allows it)
            password: Account password

        Returns:
            AuthSession with the token and the account record

        Raises:
            PocketBaseClientError: If the login is rejected or the response
                is not a valid auth payload
        """
        path = f"/api/collections/{quote(collection, safe='')}/auth-with-password"
        logger.debug(f"Authenticating {mask_identity(identity)} against {collection}")

        body = self._request("POST", path, json={"identity": identity, "password": password})

        try:
            session = AuthSession.model_validate(body)
        except ValidationError as e:
            raise PocketBaseClientError(
                message=f"Invalid auth response: {e.error_count()} validation error(s)",
                code="INVALID_RESPONSE",
                details={"path": path},
            ) from e

        self._token = session.token
        logger.info(f"Authenticated against {collection}")
        return session

    # -------------------------------------------------------------------------
    # Records
    # -------------------------------------------------------------------------

    def get_list(
        self,
        collection: str,
        page: int = 1,
        per_page: int = 30,
        sort: str | None = None,
        filter: str | None = None,
        expand: str | None = None,
        fields: str | None = None,
        skip_total: bool = False,
    ) -> RecordPage:
        """
        Fetch one page of records from a collection.

        Args:
            collection: Collection name or id
            page: 1-based page number
            per_page: Records per page
            sort: PocketBase sort expression, e.g. "-created,title"
            filter: PocketBase filter expression, e.g. "title ~ 'market'"
            expand: Relations to expand
            fields: Comma-separated field selection
            skip_total: Skip the total count query (totals come back as -1)

        Returns:
            RecordPage with items in backend order

        Raises:
            PocketBaseClientError: If the request fails or the envelope is
                malformed
        """
        path = f"/api/collections/{quote(collection, safe='')}/records"
        params: dict[str, Any] = {"page": page, "perPage": per_page}
        if sort:
            params["sort"] = sort
        if filter:
            params["filter"] = filter
        if expand:
            params["expand"] = expand
        if fields:
            params["fields"] = fields
        if skip_total:
            params["skipTotal"] = "1"

        body = self._request("GET", path, params=params)

        try:
            result = RecordPage.model_validate(body)
        except ValidationError as e:
            raise PocketBaseClientError(
                message=f"Invalid list response: {e.error_count()} validation error(s)",
                code="INVALID_RESPONSE",
                details={"path": path, "errors": e.errors(include_url=False)},
            ) from e

        logger.debug(
            f"Fetched {len(result.items)} records from {collection} "
            f"(page {result.page}/{result.total_pages}, {result.total_items} total)"
        )
        return result

    # -------------------------------------------------------------------------
    # Files
    # -------------------------------------------------------------------------

    def get_file_url(
        self,
        record: Record,
        filename: str | list[str] | None,
        thumb: str | None = None,
        token: str | None = None,
        download: bool = False,
    ) -> str:
        """
        Build the absolute URL of a file stored on a record.

        Layout: {base}/api/files/{collectionId|collectionName}/{recordId}/{filename}

        Returns an empty string when there is nothing to point at: no
        filename, no record id, or neither collection identifier.

        Multi-file fields hold a list of names; the first one is used.

        Args:
            record: Record owning the file
            filename: Stored file name (the value of the file field), or the
                list of names of a multi-file field
            thumb: Thumb size for images, e.g. "100x100"
            token: File token for protected files
            download: Ask the server to send Content-Disposition: attachment
        """
        if isinstance(filename, (list, tuple)):
            filename = filename[0] if filename else None

        collection = record.collection_id or record.collection_name
        if not filename or not record.id or not collection:
            return ""

        segments = ["api", "files", collection, record.id, filename]
        url = f"{self.base_url}/" + "/".join(quote(s, safe="") for s in segments)

        query: dict[str, str] = {}
        if thumb:
            query["thumb"] = thumb
        if token:
            query["token"] = token
        if download:
            query["download"] = "1"
        if query:
            url += "?" + urlencode(query)
        return url
