# =============================================================================
# tests/test_runner.py - Console Flow Tests
# =============================================================================
# End-to-end tests of run(): settings in, console output out.
# Output goes to StringIO sinks; the backend is the fake PocketBase.
# =============================================================================

import io
import json

from app.config import Settings
from app.runner import ERROR_PREFIX, emit, run
from core.models import FetchResult
from lib.pocketbase_client import PocketBaseClient
from tests.conftest import BASE_URL, FakePocketBase, make_flyer


def _run(settings, fake):
    out, err = io.StringIO(), io.StringIO()
    with PocketBaseClient(BASE_URL, transport=fake.transport) as client:
        code = run(settings, client=client, out=out, err=err)
    return code, out.getvalue(), err.getvalue()


def _printed_records(text):
    """Split the concatenated pretty-printed JSON objects back apart."""
    decoder = json.JSONDecoder()
    records, index = [], 0
    text = text.strip()
    while index < len(text):
        obj, end = decoder.raw_decode(text, index)
        records.append(obj)
        index = end
        while index < len(text) and text[index].isspace():
            index += 1
    return records


class TestRun:
    """Test the whole fetch-and-print run."""

    def test_prints_each_record(self, settings, fake_pb, flyers):
        """Test N records print N objects with all fields and imageUrl."""
        code, out, err = _run(settings, fake_pb)
        printed = _printed_records(out)

        assert code == 0
        assert err == ""
        assert len(printed) == len(flyers)
        for source, shown in zip(flyers, printed):
            assert {k: v for k, v in shown.items() if k != "imageUrl"} == source
            assert shown["imageUrl"]
            assert list(shown) == list(source) + ["imageUrl"]

    def test_caps_at_fifty(self, settings):
        """Test only page 1 is printed when there are more than 50 records."""
        fake = FakePocketBase([make_flyer(i) for i in range(75)])

        _, out, _ = _run(settings, fake)

        assert len(_printed_records(out)) == 50

    def test_invalid_credentials(self, fake_pb):
        """Test a rejected login prints nothing and one prefixed error."""
        settings = Settings(
            _env_file=None,
            POCKETBASE_URL=BASE_URL,
            POCKETBASE_EMAIL="admin@flyer.town",
            POCKETBASE_PASSWORD="wrong",
        )

        code, out, err = _run(settings, fake_pb)

        assert code == 0
        assert out == ""
        lines = err.splitlines()
        assert len(lines) == 1
        assert lines[0].startswith(ERROR_PREFIX)

    def test_missing_credentials(self, fake_pb):
        """Test missing credentials take the same error path without calling the backend."""
        settings = Settings(_env_file=None, POCKETBASE_URL=BASE_URL)

        code, out, err = _run(settings, fake_pb)

        assert code == 0
        assert out == ""
        assert len(err.splitlines()) == 1
        assert err.startswith(ERROR_PREFIX)
        assert fake_pb.requests == []

    def test_rerun_is_identical(self, settings, fake_pb):
        """Test two runs against the same data print the same output."""
        first = _run(settings, fake_pb)
        second = _run(settings, fake_pb)

        assert first == second

    def test_no_writes(self, settings, fake_pb):
        """Test the run only logs in and reads."""
        _run(settings, fake_pb)

        assert [r.method for r in fake_pb.requests] == ["POST", "GET"]
        assert fake_pb.requests[0].url.path.endswith("/auth-with-password")

    def test_empty_collection(self, settings):
        """Test an empty collection prints nothing and no error."""
        code, out, err = _run(settings, FakePocketBase([]))

        assert (code, out, err) == (0, "", "")

    def test_image_less_record(self, settings):
        """Test a record without image still prints with an empty imageUrl."""
        fake = FakePocketBase([make_flyer(1, image=None)])

        _, out, _ = _run(settings, fake)

        assert _printed_records(out)[0]["imageUrl"] == ""


class TestEmit:
    """Test console emission of results."""

    def test_failure_line(self):
        """Test the failure message format."""
        out, err = io.StringIO(), io.StringIO()

        count = emit(FetchResult.failure("boom"), None, out, err)

        assert count == 0
        assert out.getvalue() == ""
        assert err.getvalue() == f"{ERROR_PREFIX} boom\n"
