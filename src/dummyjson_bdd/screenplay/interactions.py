from __future__ import annotations

from typing import Any, Dict, Optional

from dummyjson_bdd.api.executor import Body, CallAnApi


class RestInteraction:
    """A single HTTP call made with the actor's CallAnApi ability."""

    method = "GET"

    def __init__(self, template: str, path_params: Optional[Dict[str, Any]] = None) -> None:
        self.template = template
        self.path_params = dict(path_params or {})
        self.query_params: Dict[str, Any] = {}
        self.body: Body = None

    def with_query(self, **params: Any) -> "RestInteraction":
        self.query_params.update(params)
        return self

    def with_body(self, body: Body) -> "RestInteraction":
        self.body = body
        return self

    def perform_as(self, actor) -> None:
        actor.ability_to(CallAnApi).execute(
            self.method,
            self.template,
            path_params=self.path_params,
            query_params=self.query_params,
            body=self.body,
        )

    def __str__(self) -> str:
        return f"{self.method} {self.template}"


class Get(RestInteraction):
    method = "GET"

    @classmethod
    def resource(cls, template: str, **path_params: Any) -> "Get":
        return cls(template, path_params)


class Post(RestInteraction):
    method = "POST"

    @classmethod
    def to(cls, template: str, **path_params: Any) -> "Post":
        return cls(template, path_params)


class Put(RestInteraction):
    method = "PUT"

    @classmethod
    def to(cls, template: str, **path_params: Any) -> "Put":
        return cls(template, path_params)


class Delete(RestInteraction):
    method = "DELETE"

    @classmethod
    def from_(cls, template: str, **path_params: Any) -> "Delete":
        return cls(template, path_params)
