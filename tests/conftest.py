# =============================================================================
# tests/conftest.py - Pytest Configuration
# =============================================================================
# This module provides pytest fixtures and configuration for all tests.
#
# Key features:
# - Clears PocketBase environment variables before any imports
# - Provides an in-memory fake PocketBase served through httpx.MockTransport
# =============================================================================

import json
import math
import os

# =============================================================================
# Set up test environment BEFORE any imports
# =============================================================================
# Credentials from the developer's shell must not leak into tests

for _name in ("POCKETBASE_EMAIL", "POCKETBASE_PASSWORD", "POCKETBASE_URL", "DEBUG"):
    os.environ.pop(_name, None)

import httpx
import pytest

from app.config import Settings
from lib.pocketbase_client import PocketBaseClient


BASE_URL = "http://127.0.0.1:8090"
ADMIN_EMAIL = "admin@flyer.town"
ADMIN_PASSWORD = "correct-horse-battery"
FLYERS_COLLECTION_ID = "pbc_1782645012"


# =============================================================================
# Fake PocketBase
# =============================================================================

class FakePocketBase:
    """
    Minimal PocketBase stand-in for the endpoints the fetcher uses.

    - POST /api/collections/_superusers/auth-with-password
    - GET  /api/collections/{name}/records
    """

    def __init__(self, records=None, email=ADMIN_EMAIL, password=ADMIN_PASSWORD):
        self.collections = {"flyers": list(records or [])}
        self.email = email
        self.password = password
        self.token = "fake-superuser-token"
        self.requests: list[httpx.Request] = []
        self.fail_list_with: int | None = None

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        parts = request.url.path.strip("/").split("/")

        if parts[:2] != ["api", "collections"] or len(parts) != 4:
            return self._error(404, "The requested resource wasn't found.")

        collection, action = parts[2], parts[3]
        if action == "auth-with-password" and request.method == "POST":
            return self._auth(collection, json.loads(request.content))
        if action == "records" and request.method == "GET":
            return self._list(collection, request)
        return self._error(404, "The requested resource wasn't found.")

    def _auth(self, collection, body):
        if collection != "_superusers":
            return self._error(404, "Missing collection context.")
        if body.get("identity") != self.email or body.get("password") != self.password:
            return self._error(400, "Failed to authenticate.")
        return httpx.Response(200, json={
            "token": self.token,
            "record": {
                "id": "sysadmin0000001",
                "collectionId": "pbc_3142635823",
                "collectionName": "_superusers",
                "email": self.email,
            },
        })

    def _list(self, collection, request):
        if request.headers.get("Authorization") != self.token:
            return self._error(403, "Only superusers can perform this action.")
        if self.fail_list_with:
            return self._error(self.fail_list_with, "Something went wrong while processing your request.")
        if collection not in self.collections:
            return self._error(404, "Missing collection context.")

        items = self.collections[collection]
        page = int(request.url.params.get("page", 1))
        per_page = int(request.url.params.get("perPage", 30))
        start = (page - 1) * per_page
        return httpx.Response(200, json={
            "page": page,
            "perPage": per_page,
            "totalItems": len(items),
            "totalPages": math.ceil(len(items) / per_page),
            "items": items[start:start + per_page],
        })

    @staticmethod
    def _error(status, message):
        return httpx.Response(status, json={"status": status, "message": message, "data": {}})

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self)


def make_flyer(index: int, image: str | None = "flyer.png") -> dict:
    """Build a flyer record as PocketBase would return it."""
    record = {
        "collectionId": FLYERS_COLLECTION_ID,
        "collectionName": "flyers",
        "id": f"flyer{index:010d}",
        "title": f"Flyer {index}",
        "created": "2025-03-01 10:00:00.000Z",
    }
    if image is not None:
        record["image"] = f"{index}_{image}"
    return record


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def flyers():
    """Three flyers, each with an image."""
    return [make_flyer(i) for i in range(1, 4)]


@pytest.fixture
def fake_pb(flyers):
    """Fake PocketBase seeded with the three flyers."""
    return FakePocketBase(flyers)


@pytest.fixture
def pb_client(fake_pb):
    """PocketBaseClient wired to the fake backend."""
    client = PocketBaseClient(BASE_URL, transport=fake_pb.transport)
    yield client
    client.close()


@pytest.fixture
def settings():
    """Settings with valid credentials, ignoring any local .env file."""
    return Settings(
        _env_file=None,
        POCKETBASE_URL=BASE_URL,
        POCKETBASE_EMAIL=ADMIN_EMAIL,
        POCKETBASE_PASSWORD=ADMIN_PASSWORD,
    )
