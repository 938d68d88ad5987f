from dummyjson_bdd.screenplay.actor import Actor, Stage
from dummyjson_bdd.screenplay.interactions import Delete, Get, Post, Put
from dummyjson_bdd.screenplay.questions import ResponseHeader, ResponseStatusCode, UserData, UserList
from dummyjson_bdd.screenplay.tasks import CreateUser, DeleteUser, GetAllUsers, GetUserById, Task, UpdateUser

__all__ = [
    "Actor",
    "CreateUser",
    "Delete",
    "DeleteUser",
    "Get",
    "GetAllUsers",
    "GetUserById",
    "Post",
    "Put",
    "ResponseHeader",
    "ResponseStatusCode",
    "Stage",
    "Task",
    "UpdateUser",
    "UserData",
    "UserList",
]
