from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from dummyjson_bdd.errors import DeserializationError


@dataclass(frozen=True)
class CapturedResponse:
    method: str
    url: str
    status_code: int
    text: str
    headers: Dict[str, str] = field(default_factory=dict)
    elapsed_ms: float = 0.0
    request_body: Optional[Dict[str, Any]] = None

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300

    def json(self) -> Any:
        try:
            return json.loads(self.text)
        except ValueError as e:
            raise DeserializationError(
                f"{self.method} {self.url} returned a body that is not JSON: {self.text[:200]!r}"
            ) from e

    def body_as(self, model):
        """Deserialize the body into `model` (any class with a from_payload classmethod)."""
        return model.from_payload(self.json())

    def to_dict(self) -> Dict[str, Any]:
        return {
            "method": self.method,
            "url": self.url,
            "status_code": self.status_code,
            "elapsed_ms": round(self.elapsed_ms, 3),
            "request_body": self.request_body,
        }
