# =============================================================================
# app/runner.py - Fetch Flyers Entry Point
# =============================================================================
# Reads settings, fetches one page of flyers and prints each one with its
# imageUrl. Failures print a single "Error fetching records:" line to stderr
# and the process still exits 0.
#
# Usage:
#   flyertown-fetch
#   python scripts/fetch_flyers.py
# =============================================================================

import json
import logging
import sys
from typing import TextIO

from app.config import Settings, get_settings
from app.exceptions import MissingCredentialsError
from core.models.credentials import Credentials
from core.models.fetch import FetchResult
from core.services.flyer_service import FlyerService
from lib.pocketbase_client import PocketBaseClient

logger = logging.getLogger(__name__)

ERROR_PREFIX = "Error fetching records:"


def configure_logging(settings: Settings) -> None:
    """Set up root logging; DEBUG when settings.DEBUG is on."""
    logging.basicConfig(
        level=logging.DEBUG if settings.DEBUG else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )
    # httpx logs every request at INFO
    logging.getLogger("httpx").setLevel(logging.DEBUG if settings.DEBUG else logging.WARNING)


def emit(
    result: FetchResult,
    service: FlyerService | None,
    out: TextIO,
    err: TextIO,
) -> int:
    """
    Write a fetch result to the console.

    Success: one JSON object per record to `out`, in page order.
    Failure: exactly one prefixed line to `err`, nothing to `out`.

    Returns:
        Number of records written
    """
    if not result.ok:
        print(f"{ERROR_PREFIX} {result.error}", file=err)
        return 0

    count = 0
    for flyer in service.enriched_records(result.page):
        print(json.dumps(flyer, indent=2, ensure_ascii=False, default=str), file=out)
        count += 1
    return count


def run(
    settings: Settings | None = None,
    client: PocketBaseClient | None = None,
    out: TextIO | None = None,
    err: TextIO | None = None,
) -> int:
    """
    Run the fetch flow once.

    Args:
        settings: Settings to use (defaults to get_settings())
        client: PocketBase client (defaults to one built from settings;
            a client passed in is not closed here)
        out: Record sink (defaults to stdout)
        err: Error sink (defaults to stderr)

    Returns:
        Process exit code, always 0
    """
    settings = settings or get_settings()
    out = out or sys.stdout
    err = err or sys.stderr

    try:
        credentials = Credentials.from_settings(settings)
    except MissingCredentialsError as e:
        logger.debug(e.suggestion)
        emit(FetchResult.failure(e.message, e.code), None, out, err)
        return 0

    owns_client = client is None
    client = client or PocketBaseClient.from_settings(settings)
    try:
        service = FlyerService(
            client,
            collection=settings.FLYERS_COLLECTION,
            auth_collection=settings.POCKETBASE_AUTH_COLLECTION,
        )
        result = service.fetch_page(
            credentials,
            page=settings.FLYERS_PAGE,
            per_page=settings.FLYERS_PER_PAGE,
        )
        emit(result, service, out, err)
    finally:
        if owns_client:
            client.close()

    return 0


def main() -> int:
    settings = get_settings()
    configure_logging(settings)
    return run(settings)


if __name__ == "__main__":
    sys.exit(main())
