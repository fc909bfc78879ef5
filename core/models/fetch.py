# =============================================================================
# core/models/fetch.py - Fetch Result Schemas
# =============================================================================
# The fetch flow never raises. It returns a FetchResult that is either a
# success carrying one RecordPage or a failure carrying a message, and the
# caller decides how to report it.
#
# One run:
#     authenticate -> list page -> done
#           \-> failed     \-> failed
# =============================================================================

from dataclasses import dataclass
from enum import Enum

from .record import RecordPage


class FetchState(str, Enum):
    """
    How a fetch run ended.

    - done: Logged in and page fetched
    - failed: Login or list failed
    """
    DONE = "done"
    FAILED = "failed"


@dataclass(frozen=True)
class FetchResult:
    """
    Outcome of one fetch run.

    Example:
        result = service.fetch_page(credentials)
        if result.ok:
            for record in result.page.items:
                ...
        else:
            print(result.error)
    """

    state: FetchState
    page: RecordPage | None = None
    error: str | None = None
    error_code: str | None = None

    @property
    def ok(self) -> bool:
        return self.state == FetchState.DONE

    @classmethod
    def success(cls, page: RecordPage) -> "FetchResult":
        return cls(state=FetchState.DONE, page=page)

    @classmethod
    def failure(cls, error: str, error_code: str | None = None) -> "FetchResult":
        return cls(state=FetchState.FAILED, error=error, error_code=error_code)
