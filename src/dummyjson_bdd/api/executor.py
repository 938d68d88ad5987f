from __future__ import annotations

import logging
import time
from typing import Any, Dict, List, Mapping, Optional, Union

import httpx

from dummyjson_bdd.api.endpoints import placeholders, resolve
from dummyjson_bdd.api.models import User
from dummyjson_bdd.api.types import CapturedResponse
from dummyjson_bdd.errors import NoResponseCapturedError, TransportError

logger = logging.getLogger(__name__)

JSON = "application/json"

Body = Union[User, Mapping[str, Any], None]


class CallAnApi:
    """
    The ability to call the API under test.

    Owns one httpx.Client bound to the base URL and the single
    "last response" slot of the actor that holds it. Every call made
    through execute() overwrites that slot and is appended to history.
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = 10.0,
        verify_tls: bool = True,
        headers: Optional[Dict[str, str]] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self._client = httpx.Client(
            base_url=self.base_url,
            timeout=timeout,
            verify=verify_tls,
            headers={"Accept": JSON, **(headers or {})},
            transport=transport,
        )
        self._last_response: Optional[CapturedResponse] = None
        self.history: List[CapturedResponse] = []

    @classmethod
    def at(cls, base_url: str, **kwargs) -> "CallAnApi":
        return cls(base_url, **kwargs)

    @property
    def last_response(self) -> CapturedResponse:
        if self._last_response is None:
            raise NoResponseCapturedError(
                "No response has been captured yet: make a request before asking about it"
            )
        return self._last_response

    def execute(
        self,
        method: str,
        template: str,
        *,
        path_params: Optional[Mapping[str, Union[str, int]]] = None,
        query_params: Optional[Mapping[str, Any]] = None,
        body: Body = None,
    ) -> CapturedResponse:
        method = method.upper()
        if path_params or placeholders(template):
            path = resolve(template, path_params)
        else:
            path = template

        payload = body.to_payload() if isinstance(body, User) else body
        headers = {"Content-Type": JSON} if payload is not None else None
        params = {k: v for k, v in (query_params or {}).items() if v is not None} or None
        url = f"{self.base_url}{path}"

        logger.debug("%s %s params=%s body=%s", method, url, params, payload)
        start = time.perf_counter()
        try:
            resp = self._client.request(
                method,
                path,
                params=params,
                json=payload,
                headers=headers,
            )
        except httpx.TransportError as e:
            logger.warning("%s %s failed: %s", method, url, e)
            raise TransportError(method, url, str(e) or type(e).__name__) from e
        elapsed_ms = (time.perf_counter() - start) * 1000

        captured = CapturedResponse(
            method=method,
            url=str(resp.request.url),
            status_code=resp.status_code,
            text=resp.text,
            headers=dict(resp.headers),
            elapsed_ms=elapsed_ms,
            request_body=dict(payload) if payload is not None else None,
        )
        self._last_response = captured
        self.history.append(captured)
        logger.info("%s %s -> %s (%.1f ms)", method, captured.url, captured.status_code, elapsed_ms)
        return captured

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> "CallAnApi":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    def __repr__(self) -> str:
        return f"CallAnApi.at({self.base_url!r})"
