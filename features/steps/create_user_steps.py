from behave import then, when

from dummyjson_bdd.api.models import User
from dummyjson_bdd.screenplay.questions import UserData
from dummyjson_bdd.screenplay.tasks import CreateUser


def _actor(context):
    return context.stage.actor_in_the_spotlight()


@when('I create a user with firstName "{first_name}", lastName "{last_name}", email "{email}"')
def step_create_user(context, first_name, last_name, email):
    new_user = User(
        first_name=first_name,
        last_name=last_name,
        email=email,
        age=30,
        gender="male",
    )
    _actor(context).remember("new_user", new_user)
    _actor(context).attempt(CreateUser.with_data(new_user))


@then('the created user must have firstName "{expected}"')
def step_created_first_name(context, expected):
    created = _actor(context).ask(UserData.from_response())
    assert created.first_name == expected, \
        f"Unexpected firstName on created user: expected {expected!r}, got {created.first_name!r}"


@then('the created user must have email "{expected}"')
def step_created_email(context, expected):
    created = _actor(context).ask(UserData.from_response())
    assert created.email == expected, \
        f"Unexpected email on created user: expected {expected!r}, got {created.email!r}"


@then("the created user must have an assigned id")
def step_created_id(context):
    created = _actor(context).ask(UserData.from_response())
    assert created.id is not None, "The created user has no id"


@then("the created user must match the data that was sent")
def step_created_matches_sent(context):
    sent = _actor(context).recall("new_user")
    created = _actor(context).ask(UserData.from_response())
    for attr in ("first_name", "last_name", "email"):
        assert getattr(created, attr) == getattr(sent, attr), \
            f"{attr}: sent {getattr(sent, attr)!r}, got back {getattr(created, attr)!r}"
