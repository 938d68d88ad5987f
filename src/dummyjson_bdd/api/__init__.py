from dummyjson_bdd.api.endpoints import (
    CREATE_USER,
    DELETE_USER,
    GET_ALL_USERS,
    GET_USER_BY_ID,
    UPDATE_USER,
    Endpoint,
    endpoint_for,
    resolve,
)
from dummyjson_bdd.api.executor import CallAnApi
from dummyjson_bdd.api.models import User, UserPage
from dummyjson_bdd.api.types import CapturedResponse

__all__ = [
    "CREATE_USER",
    "DELETE_USER",
    "GET_ALL_USERS",
    "GET_USER_BY_ID",
    "UPDATE_USER",
    "CallAnApi",
    "CapturedResponse",
    "Endpoint",
    "User",
    "UserPage",
    "endpoint_for",
    "resolve",
]
