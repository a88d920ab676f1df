import logging

import requests

from hueframe.exceptions import BridgeError

_LOGGER = logging.getLogger(__name__)


class HttpClient:
    def __init__(self, base_url: str, headers: dict[str, str] | None = None,
                 session: requests.Session | None = None, timeout: float = 5):
        self.session = session or requests.Session()
        self.base_url = base_url.rstrip("/")
        self.headers = headers or {}
        self.timeout = timeout

    # ---- HTTP helpers
    def _url(self, path: str) -> str:
        return f"{self.base_url}/{path.lstrip('/')}"

    def _request(self, method: str, path: str, payload: dict | None = None,
                 timeout: float | None = None):
        url = self._url(path)
        _LOGGER.debug("%s %s %s", method, url, payload if payload is not None else "")
        try:
            r = self.session.request(method, url, json=payload, headers=self.headers,
                                     timeout=timeout or self.timeout)
            r.raise_for_status()
        except requests.RequestException as e:
            raise BridgeError(f"{method} {url} failed: {e}") from e

        try:
            return r.json()
        except ValueError as e:
            raise BridgeError(f"{method} {url} returned invalid JSON: {r.text!r}") from e

    def get(self, path: str, *, timeout: float | None = None):
        return self._request("GET", path, timeout=timeout)

    def put(self, path: str, payload: dict, *, timeout: float | None = None):
        return self._request("PUT", path, payload=payload, timeout=timeout)

    def close(self):
        self.session.close()
