from __future__ import annotations

from unittest.mock import MagicMock, patch

import requests

from value_api import driver


def _response(status=200, text=""):
    resp = MagicMock()
    resp.status_code = status
    resp.text = text
    return resp


class FakeServer:
    """Stands in for the HTTP surface: just enough of /value to drive the checks."""

    def __init__(self):
        self.value = 0

    def get(self, url, **kwargs):
        return _response(text=str(self.value))

    def post(self, url, data=None, **kwargs):
        try:
            self.value = int(data)
        except ValueError:
            return _response(400)
        return _response()

    def request(self, method, url, data=None, **kwargs):
        if method == "POST":
            return self.post(url, data=data)
        return _response(405)


def _patched(server):
    return patch.multiple(driver.requests, get=server.get, post=server.post, request=server.request)


def test_check_round_trip() -> None:
    server = FakeServer()
    with _patched(server):
        assert driver.check_round_trip(42) is True
    assert server.value == 42


def test_check_rejected_detects_unchanged_value() -> None:
    server = FakeServer()
    server.value = 5
    with _patched(server):
        assert driver.check_rejected("abc") is True
        assert driver.check_rejected("1", method="PUT", expected_status=405) is True
        # a body the fake accepts changes the value, so the check must fail
        assert driver.check_rejected("6") is False


def test_check_concurrent_reports_observed_value() -> None:
    server = FakeServer()
    with _patched(server):
        ok, observed = driver.check_concurrent(4)
    assert ok is True
    assert observed == server.value


def test_wait_ready_gives_up() -> None:
    with patch.object(driver.requests, "get", side_effect=requests.ConnectionError), \
         patch.object(driver.time, "sleep"):
        assert driver.wait_ready(timeout=0.05) is False


def test_wait_ready_retries_through_timeouts() -> None:
    get = MagicMock(side_effect=[requests.ReadTimeout, requests.ConnectionError, _response(text="0")])
    with patch.object(driver.requests, "get", get), patch.object(driver.time, "sleep"):
        assert driver.wait_ready(timeout=5) is True
    assert get.call_count == 3
