from __future__ import annotations

from typing import Optional

from dummyjson_bdd.api.executor import CallAnApi
from dummyjson_bdd.api.models import User, UserPage


def last_response_of(actor):
    return actor.ability_to(CallAnApi).last_response


class ResponseStatusCode:
    @classmethod
    def value(cls) -> "ResponseStatusCode":
        return cls()

    def answered_by(self, actor) -> int:
        return last_response_of(actor).status_code


class UserData:
    @classmethod
    def from_response(cls) -> "UserData":
        return cls()

    def answered_by(self, actor) -> User:
        return last_response_of(actor).body_as(User)


class UserList:
    @classmethod
    def from_response(cls) -> "UserList":
        return cls()

    def answered_by(self, actor) -> UserPage:
        return last_response_of(actor).body_as(UserPage)


class ResponseHeader:
    def __init__(self, name: str) -> None:
        self.name = name.lower()

    @classmethod
    def named(cls, name: str) -> "ResponseHeader":
        return cls(name)

    def answered_by(self, actor) -> Optional[str]:
        headers = {k.lower(): v for k, v in last_response_of(actor).headers.items()}
        return headers.get(self.name)
