"""HTTP client for the LiveScore JSON endpoints (one session, explicit timeout, no retries)."""

from __future__ import annotations

import time
from typing import Any, Dict, Optional, Type

import requests

from .config import config
from .exceptions import NetworkError
from ..utils.logger import get_logger

logger = get_logger(__name__)


class LivescoreClient:
    def __init__(self, timeout: Optional[float] = None, session: Optional[requests.Session] = None):
        self.timeout = float(timeout if timeout is not None else config.REQUEST_TIMEOUT)
        self.session = session or requests.Session()
        self.session.headers.update({
            "User-Agent": config.USER_AGENT,
            "Accept": "application/json, text/plain, */*",
        })
        self.requests_made = 0

    def get_json(
        self,
        url: str,
        params: Optional[Dict[str, Any]] = None,
        error_cls: Type[NetworkError] = NetworkError,
    ) -> Any:
        """GET ``url`` and decode the JSON body.

        Every failure (connection, timeout, non-2xx status, undecodable body)
        surfaces as ``error_cls`` so callers handle a single exception type.
        """
        t0 = time.time()
        self.requests_made += 1
        try:
            resp = self.session.get(url, params=params, timeout=self.timeout)
        except requests.RequestException as e:
            logger.warning(f"[http] GET {url} failed: {e}")
            raise error_cls(f"request failed: {e}", url=url) from e

        status = resp.status_code
        try:
            resp.raise_for_status()
        except requests.HTTPError as e:
            logger.warning(f"[http] GET {url} -> {status}")
            raise error_cls(f"HTTP {status}", url=url, status_code=status) from e

        try:
            data = resp.json()
        except ValueError as e:
            raise error_cls(f"invalid json: {e}", url=url, status_code=status) from e

        logger.debug(f"[http] GET {url} -> {status} ({time.time() - t0:.2f}s)")
        return data

    def close(self):
        self.session.close()

    def __enter__(self) -> "LivescoreClient":
        return self

    def __exit__(self, *exc):
        self.close()
