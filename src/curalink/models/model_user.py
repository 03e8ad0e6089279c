"""
User data models.

Request bodies arrive in camelCase; these models accept either form and
always serialize back to camelCase.
"""

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class Gender(str, Enum):
    MALE = "MALE"
    FEMALE = "FEMALE"
    OTHER = "OTHER"


class UserType(str, Enum):
    PATIENT = "PATIENT"
    RESEARCHER = "RESEARCHER"


class _CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, from_attributes=True
    )


class RegisterRequest(_CamelModel):
    """Registration body.

    ``gender`` and ``user_type`` are plain strings here so that an unknown
    value reaches the auth service and is rejected there with a specific
    message instead of a generic schema error.
    """

    first_name: str
    last_name: str
    email: str
    password: str
    gender: str
    user_type: str
    field_type: str | None = None
    age: int | str | None = None
    condition: str | None = None
    allergies: str | None = None


class LoginRequest(_CamelModel):
    email: str
    password: str


class UserRecord(_CamelModel):
    """Public shape of a stored user. The password digest is never included."""

    id: str
    first_name: str
    last_name: str
    email: str
    gender: Gender
    user_type: UserType
    field_type: str | None = None
    age: int | None = None
    condition: str | None = None
    allergies: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class LoginUser(_CamelModel):
    """Reduced projection returned alongside a freshly issued token."""

    id: str
    email: str
    user_type: UserType
    first_name: str
    last_name: str
