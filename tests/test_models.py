import json

import pytest
from pydantic import ValidationError

from dummyjson_bdd.api.models import User, UserPage
from dummyjson_bdd.errors import DeserializationError


def test_payload_uses_wire_names_and_omits_absent_fields():
    user = User(first_name="Ana", last_name="Diaz", email="ana@example.com", age=30, gender="female")
    assert user.to_payload() == {
        "firstName": "Ana",
        "lastName": "Diaz",
        "email": "ana@example.com",
        "age": 30,
        "gender": "female",
    }


def test_json_round_trip_keeps_set_fields():
    user = User(first_name="Ana", last_name="Diaz", email="ana@example.com", age=30, gender="female")
    restored = User.from_payload(json.loads(json.dumps(user.to_payload())))
    assert restored == user
    assert restored.id is None


def test_unknown_fields_ignored_and_missing_fields_absent():
    user = User.from_payload({"id": 7, "firstName": "Jo", "hair": {"color": "Brown"}, "isDeleted": True})
    assert user == User(id=7, first_name="Jo")


@pytest.mark.parametrize(
    "payload",
    [
        {"id": "1"},
        {"age": "thirty"},
        {"age": True},
        {"firstName": 12},
    ],
)
def test_type_mismatch_raises(payload):
    with pytest.raises(DeserializationError):
        User.from_payload(payload)


def test_non_object_payload_raises():
    with pytest.raises(DeserializationError):
        User.from_payload([{"id": 1}])


def test_user_is_immutable():
    user = User(first_name="Ana")
    with pytest.raises(ValidationError):
        user.first_name = "Eva"
    assert user.model_copy(update={"first_name": "Eva"}).first_name == "Eva"


def test_attribute_for():
    assert User.attribute_for("firstName") == "first_name"
    assert User.attribute_for("email") == "email"
    with pytest.raises(KeyError):
        User.attribute_for("eyeColor")


def test_user_page():
    page = UserPage.from_payload({
        "users": [{"id": 1, "firstName": "Emily"}, {"id": 2}],
        "total": 208,
        "skip": 0,
        "limit": 2,
    })
    assert [u.id for u in page.users] == [1, 2]
    assert page.users[0].first_name == "Emily"
    assert (page.total, page.skip, page.limit) == (208, 0, 2)


def test_user_page_rejects_non_list_users():
    with pytest.raises(DeserializationError):
        UserPage.from_payload({"users": 5})


def test_wire_names_are_accepted_on_construction():
    assert User(firstName="Ana", lastName="Diaz") == User(first_name="Ana", last_name="Diaz")


def test_invalid_user_inside_page_raises():
    with pytest.raises(DeserializationError, match="UserPage"):
        UserPage.from_payload({"users": [{"id": 1}, {"age": "old"}]})


def test_deserialization_error_keeps_the_validation_cause():
    with pytest.raises(DeserializationError) as exc:
        User.from_payload({"id": "1"})
    assert isinstance(exc.value.__cause__, ValidationError)


def test_field_text_spells_values_like_step_text():
    user = User(id=1, first_name="Emily", age=30)
    assert user.field_text("age") == "30"
    assert user.field_text("id") == "1"
    assert user.field_text("firstName") == "Emily"
    assert user.field_text("email") is None
    with pytest.raises(KeyError):
        user.field_text("eyeColor")
