"""
Shared fixtures: an in-memory stand-in for the DummyJSON user endpoints,
served through httpx.MockTransport so no test touches the network.
"""

from __future__ import annotations

import json
import re

import httpx
import pytest

from dummyjson_bdd.api.executor import CallAnApi
from dummyjson_bdd.screenplay.actor import Stage

BASE_URL = "https://dummyjson.test"

_USER_PATH = re.compile(r"^/users/(\d+)$")


class FakeDummyJson:
    def __init__(self):
        self.users = {
            1: {"id": 1, "firstName": "Emily", "lastName": "Johnson", "email": "emily.johnson@x.dummyjson.com",
                "phone": "+81 965-431-3024", "username": "emilys", "age": 28, "gender": "female",
                "eyeColor": "Green", "address": {"city": "Phoenix"}},
            2: {"id": 2, "firstName": "Michael", "lastName": "Williams", "email": "michael.williams@x.dummyjson.com",
                "phone": "+49 258-627-6644", "username": "michaelw", "age": 35, "gender": "male"},
            3: {"id": 3, "firstName": "Sophia", "lastName": "Brown", "email": "sophia.brown@x.dummyjson.com",
                "phone": "+81 210-652-2785", "username": "sophiab", "age": 42, "gender": "female"},
        }
        self.next_id = 209
        self.requests = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        path = request.url.path
        match = _USER_PATH.match(path)

        if request.method == "GET" and path == "/users":
            limit = int(request.url.params.get("limit", 30))
            skip = int(request.url.params.get("skip", 0))
            users = list(self.users.values())[skip:skip + limit]
            return httpx.Response(200, json={"users": users, "total": len(self.users), "skip": skip, "limit": limit})

        if request.method == "POST" and path == "/users/add":
            body = json.loads(request.content)
            return httpx.Response(201, json={"id": self.next_id, **body})

        if match:
            user_id = int(match.group(1))
            user = self.users.get(user_id)
            if user is None:
                return httpx.Response(404, json={"message": f"User with id '{user_id}' not found"})
            if request.method == "GET":
                return httpx.Response(200, json=user)
            if request.method == "PUT":
                return httpx.Response(200, json={**user, **json.loads(request.content)})
            if request.method == "DELETE":
                return httpx.Response(200, json={**user, "isDeleted": True, "deletedOn": "2026-10-17T00:00:00.000Z"})

        return httpx.Response(404, json={"message": f"Route {request.method} {path} not found"})


@pytest.fixture
def fake_api():
    return FakeDummyJson()


@pytest.fixture
def api(fake_api):
    ability = CallAnApi.at(BASE_URL, transport=httpx.MockTransport(fake_api))
    yield ability
    ability.close()


@pytest.fixture
def stage(fake_api):
    def cast(actor):
        actor.who_can(CallAnApi.at(BASE_URL, transport=httpx.MockTransport(fake_api)))

    with Stage(cast=cast) as s:
        yield s


@pytest.fixture
def actor(stage):
    return stage.actor("TestUser")
