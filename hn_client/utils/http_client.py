"""
HTTP transport with cookie persistence, retries and proper headers.
"""

import logging
from typing import Dict, Tuple

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from ..config import ClientConfig
from ..exceptions import TransportError
from ..models import Ack

logger = logging.getLogger(__name__)


class HTTPClient:
    """HTTP client owning one session and its cookie jar."""

    def __init__(self, config: ClientConfig):
        self.config = config
        self.session = self._create_session()
        self._request_count = 0

    def _create_session(self) -> requests.Session:
        """Create a requests session with retry logic."""
        session = requests.Session()

        # POST is never retried
        retry_strategy = Retry(
            total=self.config.max_retries,
            backoff_factor=1,
            status_forcelist=[500, 502, 503, 504],
            allowed_methods=["HEAD", "GET", "OPTIONS"]
        )

        adapter = HTTPAdapter(max_retries=retry_strategy)
        session.mount("http://", adapter)
        session.mount("https://", adapter)

        session.headers.update(self._get_headers())

        return session

    def _get_headers(self) -> Dict[str, str]:
        """Get default request headers."""
        return {
            "User-Agent": self.config.user_agent,
            "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
            "Accept-Language": "en-US,en;q=0.5",
        }

    def _send(self, method: str, url: str, **kwargs) -> requests.Response:
        self._request_count += 1
        kwargs.setdefault('timeout', self.config.timeout)

        logger.debug(f"{method} {url}")

        try:
            response = self.session.request(method, url, **kwargs)
            response.raise_for_status()
            return response
        except requests.exceptions.HTTPError as e:
            status = e.response.status_code
            if status == 404:
                logger.warning(f"Not found: {url}")
            else:
                logger.error(f"HTTP error {status} for {url}")
            raise TransportError(f"HTTP error {status}", url, status) from e
        except requests.exceptions.RequestException as e:
            logger.error(f"{method} request failed for {url}: {e}")
            raise TransportError(str(e), url) from e

    def fetch_document(self, path: str) -> bytes:
        """
        GET a page.

        Args:
            path: Path relative to the site root, or an absolute URL

        Returns:
            Raw response body

        Raises:
            TransportError: On network failure or non-2xx status
        """
        return self._send("GET", self.make_url(path)).content

    def submit_form(self, path: str, fields: Dict[str, str]) -> Tuple[str, bytes]:
        """
        POST a urlencoded form, following redirects.

        Returns:
            (final URL after redirects, response body)

        Raises:
            TransportError: On network failure or non-2xx status
        """
        response = self._send("POST", self.make_url(path), data=fields)
        return response.url, response.content

    def perform_action(self, url: str) -> Ack:
        """
        GET a one-shot action link such as a vote URL.

        Raises:
            TransportError: On network failure or non-2xx status
        """
        response = self._send("GET", self.make_url(url))
        return Ack(url=response.url, status_code=response.status_code)

    def make_url(self, path: str) -> str:
        """Make absolute URL from relative path."""
        return self.config.make_url(path)

    @property
    def request_count(self) -> int:
        """Total requests made."""
        return self._request_count
