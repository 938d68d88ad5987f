from __future__ import annotations

import json
import logging
import os
import time
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List

from dummyjson_bdd.api.executor import CallAnApi
from dummyjson_bdd.config import Settings

logger = logging.getLogger(__name__)


@dataclass
class ScenarioReport:
    name: str
    feature: str = ""
    status: str = "untested"
    requests: List[Dict[str, Any]] = field(default_factory=list)

    @classmethod
    def from_stage(cls, name: str, feature: str, status: str, stage) -> "ScenarioReport":
        report = cls(name=name, feature=feature, status=status)
        for actor in stage.actors:
            if not actor.can(CallAnApi):
                continue
            for captured in actor.ability_to(CallAnApi).history:
                report.requests.append({"actor": actor.name, **captured.to_dict()})
        return report

    @property
    def total_requests(self) -> int:
        return len(self.requests)

    @property
    def successful_requests(self) -> int:
        return sum(1 for r in self.requests if 200 <= r["status_code"] < 300)

    @property
    def latencies_ms(self) -> List[float]:
        return [r["elapsed_ms"] for r in self.requests]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "feature": self.feature,
            "status": self.status,
            "total_requests": self.total_requests,
            "successful_requests": self.successful_requests,
            "latencies_ms": self.latencies_ms,
            "requests": self.requests,
        }


def build_document(reports: Iterable[ScenarioReport], settings: Settings) -> Dict[str, Any]:
    scenarios = [r.to_dict() for r in reports]
    statuses = [s["status"] for s in scenarios]
    return {
        "base_url": settings.base_url,
        "created_at_ms": int(time.time() * 1000),
        "scenarios": scenarios,
        "summary": {
            "scenarios": len(scenarios),
            "passed": statuses.count("passed"),
            "failed": statuses.count("failed"),
            "total_requests": sum(s["total_requests"] for s in scenarios),
            "successful_requests": sum(s["successful_requests"] for s in scenarios),
        },
    }


class ResultSink:
    def write(self, reports: Iterable[ScenarioReport], settings: Settings) -> Dict[str, Any]:
        document = build_document(reports, settings)

        if settings.report_console:
            print(json.dumps(document, indent=2))

        path = settings.report_json
        if path:
            os.makedirs(os.path.dirname(path) or ".", exist_ok=True)
            with open(path, "w", encoding="utf-8") as f:
                json.dump(document, f, indent=2)
            logger.info("Wrote execution report to %s", path)

        return document
