import io
import urllib.error

import pytest

from tvpilot.fetch import HOST, USER_AGENT, FetchError, PageFetcher

URL = "https://epguides.com/someshow/"


class _Response:
    def __init__(self, status, body):
        self.status = status
        self._body = body

    def read(self):
        return self._body

    def __enter__(self):
        return self

    def __exit__(self, *args):
        return False


class _Opener:
    def __init__(self, outcomes):
        self.outcomes = list(outcomes)
        self.requests = []

    def __call__(self, request, timeout):
        self.requests.append(request)
        outcome = self.outcomes.pop(0) if len(self.outcomes) > 1 else self.outcomes[0]
        if isinstance(outcome, Exception):
            raise outcome
        return outcome


def test_fetch_url_sets_status_and_body():
    opener = _Opener([_Response(200, b"<html>ok</html>")])
    fetcher = PageFetcher(URL, opener=opener)
    assert fetcher.fetch_url() == 200
    assert fetcher.html == "<html>ok</html>"


def test_request_headers():
    opener = _Opener([_Response(200, b"")])
    PageFetcher(URL, opener=opener).fetch_url()
    request = opener.requests[0]
    assert request.full_url == URL
    assert request.get_header("User-agent") == USER_AGENT
    assert request.get_header("Host") == HOST


def test_http_error_is_a_response():
    error = urllib.error.HTTPError(URL, 404, "Not Found", None, io.BytesIO(b"missing"))
    fetcher = PageFetcher(URL, opener=_Opener([error]))
    assert fetcher.fetch_url() == 404
    assert fetcher.content == b"missing"


def test_transport_error_raises():
    fetcher = PageFetcher(URL, opener=_Opener([urllib.error.URLError("down")]))
    with pytest.raises(FetchError):
        fetcher.fetch_url()


def test_download_retries_then_succeeds():
    opener = _Opener([
        urllib.error.URLError("down"),
        urllib.error.URLError("down"),
        _Response(200, b"page"),
    ])
    fetcher = PageFetcher(URL, tries=3, retry_delay=0, opener=opener)
    assert fetcher.download_show() == "page"
    assert len(opener.requests) == 3


def test_download_stops_at_first_success():
    opener = _Opener([_Response(200, b"first"), _Response(200, b"second")])
    fetcher = PageFetcher(URL, tries=3, retry_delay=0, opener=opener)
    assert fetcher.download_show() == "first"
    assert len(opener.requests) == 1


def test_download_all_failures_raise():
    opener = _Opener([urllib.error.URLError("down")])
    fetcher = PageFetcher(URL, tries=4, retry_delay=0, opener=opener)
    with pytest.raises(FetchError):
        fetcher.download_show()
    assert len(opener.requests) == 4


def test_download_non_ok_status_returns_last_body():
    error = urllib.error.HTTPError(URL, 503, "Busy", None, io.BytesIO(b"busy"))
    opener = _Opener([error])
    fetcher = PageFetcher(URL, tries=2, retry_delay=0, opener=opener)
    assert fetcher.download_show() == "busy"
    assert fetcher.status == 503
    assert len(opener.requests) == 2


def test_tries_must_be_positive():
    with pytest.raises(ValueError):
        PageFetcher(URL, tries=0)