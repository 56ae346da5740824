"""
Request transport for the view-model.

A transport sends exactly one request and always returns an ``ApiResponse``.
Timeouts and connection errors are reported as a failed response with
status 0 so callers have a single failure path.
"""
import logging
from dataclasses import dataclass
from typing import Any, Optional

import requests

logger = logging.getLogger(__name__)

GENERIC_ERROR = "Request failed"


@dataclass(frozen=True)
class ApiResponse:
    status: int
    body: Any = None

    @property
    def ok(self) -> bool:
        return 200 <= self.status < 300

    @property
    def error(self) -> Optional[str]:
        """The server's ``error`` message, or a generic one for failures without it."""
        if self.ok:
            return None
        if isinstance(self.body, dict) and self.body.get("error"):
            return str(self.body["error"])
        return GENERIC_ERROR


class Transport:
    """Interface: send one request, return an ``ApiResponse``."""

    def request(self, method: str, path: str, payload: Optional[dict] = None) -> ApiResponse:
        raise NotImplementedError


class HttpTransport(Transport):
    """``requests``-backed transport against a running taskflow server."""

    def __init__(self, base_url: str, session: Optional[requests.Session] = None,
                 auth=None, timeout: float = 10):
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        if auth is not None:
            self.session.auth = auth
        self.timeout = timeout

    def request(self, method: str, path: str, payload: Optional[dict] = None) -> ApiResponse:
        url = self.base_url + path
        try:
            r = self.session.request(method, url, json=payload, timeout=self.timeout)
        except requests.RequestException as e:
            logger.warning("%s %s did not complete: %s", method, url, e)
            return ApiResponse(status=0, body={"error": GENERIC_ERROR})

        body = None
        if r.content:
            try:
                body = r.json()
            except ValueError:
                body = {"error": r.text[:200]} if not r.ok else None
        return ApiResponse(status=r.status_code, body=body)
