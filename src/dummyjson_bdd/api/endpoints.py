from __future__ import annotations

import re
from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Union
from urllib.parse import quote

from dummyjson_bdd.errors import MissingParameterError

GET_USER_BY_ID = "/users/{id}"
GET_ALL_USERS = "/users"
CREATE_USER = "/users/add"
UPDATE_USER = "/users/{id}"
DELETE_USER = "/users/{id}"

_PLACEHOLDER_RE = re.compile(r"\{([^{}]+)\}")


@dataclass(frozen=True)
class Endpoint:
    method: str
    template: str


OPERATIONS: Mapping[str, Endpoint] = MappingProxyType({
    "get user by id": Endpoint("GET", GET_USER_BY_ID),
    "get all users": Endpoint("GET", GET_ALL_USERS),
    "create user": Endpoint("POST", CREATE_USER),
    "update user": Endpoint("PUT", UPDATE_USER),
    "delete user": Endpoint("DELETE", DELETE_USER),
})


def placeholders(template: str) -> list[str]:
    return _PLACEHOLDER_RE.findall(template)


def resolve(template: str, params: Mapping[str, Union[str, int]] | None = None) -> str:
    """
    Substitute every {name} in the template with the percent-encoded
    str(params[name]); "/", "?" and braces in a value stay inside its segment.
    Raises MissingParameterError listing every placeholder without a value.
    """
    params = params or {}
    missing = [name for name in placeholders(template) if name not in params]
    if missing:
        raise MissingParameterError(template, missing)
    return _PLACEHOLDER_RE.sub(lambda m: quote(str(params[m.group(1)]), safe=""), template)


def endpoint_for(operation: str) -> Endpoint:
    try:
        return OPERATIONS[operation]
    except KeyError:
        raise KeyError(f"Unknown operation {operation!r}. Known: {sorted(OPERATIONS)}") from None
