"""Fetch a show's web page with retries."""

from __future__ import annotations

import ssl
import time
import urllib.error
import urllib.request
from typing import Callable, Optional

ACCEPT = "*/*"
HOST = "epguides.com:443"
USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64; rv:126.0) "
    "Gecko/20100101 Firefox/126.0"
)
HTTP_OK = 200

DEFAULT_TRIES = 3
DEFAULT_RETRY_DELAY = 2.0
DEFAULT_TIMEOUT = 30.0

Opener = Callable[[urllib.request.Request, float], object]


class FetchError(Exception):
    """The page could not be retrieved at all."""


def _default_opener(request: urllib.request.Request, timeout: float):
    context = ssl.create_default_context()
    context.check_hostname = False
    context.verify_mode = ssl.CERT_NONE
    return urllib.request.urlopen(request, timeout=timeout, context=context)


class PageFetcher:
    """Retrieves one URL; keeps the last HTTP status and body."""

    def __init__(
        self,
        url: str,
        tries: int = DEFAULT_TRIES,
        retry_delay: float = DEFAULT_RETRY_DELAY,
        timeout: float = DEFAULT_TIMEOUT,
        opener: Optional[Opener] = None,
    ) -> None:
        if tries < 1:
            raise ValueError("tries must be at least 1")
        self.url = url
        self.tries = tries
        self.retry_delay = retry_delay
        self.timeout = timeout
        self.opener = opener or _default_opener
        self.status = 0
        self.content = b""

    @property
    def html(self) -> str:
        """The last body received, decoded as UTF-8."""
        return self.content.decode("utf-8", errors="replace")

    def _build_request(self) -> urllib.request.Request:
        return urllib.request.Request(
            self.url,
            headers={"Accept": ACCEPT, "Host": HOST, "User-Agent": USER_AGENT},
        )

    def fetch_url(self) -> int:
        """Make one attempt and return the HTTP status.

        Raises FetchError when no HTTP response was received.
        """
        self.status = 0
        self.content = b""
        try:
            with self.opener(self._build_request(), self.timeout) as response:
                self.status = response.status
                self.content = response.read()
        except urllib.error.HTTPError as exc:
            self.status = exc.code
            self.content = exc.read() if exc.fp is not None else b""
        except (urllib.error.URLError, OSError, ValueError) as exc:
            raise FetchError(f"cannot fetch {self.url}: {exc}") from exc
        return self.status

    def download_show(self) -> str:
        """Fetch the page, retrying until a 200 reply or the tries run out.

        Returns the last body received; raises FetchError if the last
        attempt got no HTTP response.
        """
        last_error: Optional[FetchError] = None
        for attempt in range(1, self.tries + 1):
            try:
                status = self.fetch_url()
            except FetchError as exc:
                last_error = exc
            else:
                last_error = None
                if status == HTTP_OK:
                    return self.html
            if attempt < self.tries:
                time.sleep(self.retry_delay)
        if last_error is not None:
            raise last_error
        return self.html