from __future__ import annotations

from typing import Optional

from dummyjson_bdd.api import endpoints
from dummyjson_bdd.api.models import User
from dummyjson_bdd.screenplay.interactions import Delete, Get, Post, Put


class Task:
    """A named business action composed of one or more interactions."""

    def __init__(self, title: str, *interactions) -> None:
        self.title = title
        self.interactions = list(interactions)

    @classmethod
    def where(cls, title: str, *interactions) -> "Task":
        return cls(title, *interactions)

    def perform_as(self, actor) -> None:
        for interaction in self.interactions:
            interaction.perform_as(actor)

    def __str__(self) -> str:
        return self.title


class CreateUser(Task):
    @classmethod
    def with_data(cls, user: User, endpoint: str = endpoints.CREATE_USER) -> "CreateUser":
        return cls("create a user", Post.to(endpoint).with_body(user))


class GetUserById(Task):
    @classmethod
    def with_id(cls, user_id: int, endpoint: str = endpoints.GET_USER_BY_ID) -> "GetUserById":
        return cls(f"get user #{user_id}", Get.resource(endpoint, id=user_id))


class GetAllUsers(Task):
    @classmethod
    def page(cls, limit: Optional[int] = None, skip: Optional[int] = None) -> "GetAllUsers":
        return cls("get all users",
                   Get.resource(endpoints.GET_ALL_USERS).with_query(limit=limit, skip=skip))


class UpdateUser(Task):
    @classmethod
    def with_data(cls, user_id: int, user: User, endpoint: str = endpoints.UPDATE_USER) -> "UpdateUser":
        return cls(f"update user #{user_id}", Put.to(endpoint, id=user_id).with_body(user))


class DeleteUser(Task):
    @classmethod
    def with_id(cls, user_id: int, endpoint: str = endpoints.DELETE_USER) -> "DeleteUser":
        return cls(f"delete user #{user_id}", Delete.from_(endpoint, id=user_id))
