from behave import given, then, when

from dummyjson_bdd.api.models import User
from dummyjson_bdd.screenplay.questions import ResponseStatusCode, UserData, UserList
from dummyjson_bdd.screenplay.tasks import DeleteUser, GetAllUsers, GetUserById, UpdateUser


def _actor(context):
    return context.stage.actor_in_the_spotlight()


def _field_text(user: User, wire_name: str):
    try:
        return user.field_text(wire_name)
    except KeyError:
        raise AssertionError(f"Unknown user field in step: {wire_name!r}") from None


@given("the DummyJSON service is available")
def step_service_available(context):
    # assumed up; a failing call later reports the real transport error
    _actor(context).remember("service_ready", True)


@when("I send a GET request for user id {user_id:d}")
def step_get_user_by_id(context, user_id):
    _actor(context).attempt(GetUserById.with_id(user_id))


@when("I send a GET request for {limit:d} users")
def step_get_users(context, limit):
    _actor(context).attempt(GetAllUsers.page(limit=limit))


@when('I update user {user_id:d} with lastName "{last_name}"')
def step_update_user(context, user_id, last_name):
    _actor(context).attempt(UpdateUser.with_data(user_id, User(last_name=last_name)))


@when("I delete user {user_id:d}")
def step_delete_user(context, user_id):
    _actor(context).attempt(DeleteUser.with_id(user_id))


@then("the response code must be {status_code:d}")
def step_response_code(context, status_code):
    actual = _actor(context).ask(ResponseStatusCode.value())
    assert actual == status_code, f"Unexpected response code: expected {status_code}, got {actual}"


@then("the returned user must have id {user_id:d}")
def step_returned_user_id(context, user_id):
    user = _actor(context).ask(UserData.from_response())
    assert user.id == user_id, f"Unexpected user id: expected {user_id}, got {user.id}"


@then('the returned user must have {field} "{expected}"')
def step_returned_user_field(context, field, expected):
    user = _actor(context).ask(UserData.from_response())
    actual = _field_text(user, field)
    assert actual == expected, f"Unexpected {field}: expected {expected!r}, got {actual!r}"


@then("the user must have a non-empty {field}")
def step_user_field_not_empty(context, field):
    user = _actor(context).ask(UserData.from_response())
    assert _field_text(user, field), f"The user's {field} is empty"


@then("the returned list must contain {count:d} users")
def step_user_list_size(context, count):
    page = _actor(context).ask(UserList.from_response())
    assert len(page.users) == count, f"Expected {count} users, got {len(page.users)}"


@then("the response code must indicate success")
def step_response_success(context):
    actual = _actor(context).ask(ResponseStatusCode.value())
    assert 200 <= actual < 300, f"Expected a 2xx response code, got {actual}"
