from __future__ import annotations

from typing import Any, Dict, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, StrictInt, StrictStr, ValidationError

from dummyjson_bdd.errors import DeserializationError


class _Record(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    @classmethod
    def from_payload(cls, payload: Any):
        if not isinstance(payload, dict):
            raise DeserializationError(f"Expected a JSON object for {cls.__name__}, got {type(payload).__name__}")
        try:
            return cls.model_validate(payload)
        except ValidationError as e:
            raise DeserializationError(f"Response body does not fit {cls.__name__}: {e}") from e


class User(_Record):
    """
    A DummyJSON user. Every field is optional: test code builds partial users
    for create/update bodies, the service fills in the rest (id included).
    Strict types: "1" is not an id and true is not an age.
    """
    id: Optional[StrictInt] = None
    first_name: Optional[StrictStr] = Field(default=None, alias="firstName")
    last_name: Optional[StrictStr] = Field(default=None, alias="lastName")
    email: Optional[StrictStr] = None
    phone: Optional[StrictStr] = None
    username: Optional[StrictStr] = None
    age: Optional[StrictInt] = None
    gender: Optional[StrictStr] = None

    def to_payload(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True)

    @classmethod
    def attribute_for(cls, wire_name: str) -> str:
        """Map a wire name ("firstName") to its attribute ("first_name")."""
        for attr, info in cls.model_fields.items():
            if (info.alias or attr) == wire_name:
                return attr
        raise KeyError(f"User has no field {wire_name!r}")

    def field_text(self, wire_name: str) -> Optional[str]:
        """The field as step text would spell it: age 30 -> "30", absent -> None."""
        value = getattr(self, self.attribute_for(wire_name))
        return None if value is None else str(value)


class UserPage(_Record):
    users: Tuple[User, ...] = ()
    total: Optional[StrictInt] = None
    skip: Optional[StrictInt] = None
    limit: Optional[StrictInt] = None
