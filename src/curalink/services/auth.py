"""
Registration, login and typed profile lookup.

Every failure is raised as a CuraLinkError subclass; the router maps the
class to a status code.
"""

import logging

from curalink.constants import VALID_GENDERS, VALID_USER_TYPES
from curalink.exceptions import (
    ConflictError,
    InvalidCredentialsError,
    NotFoundError,
    ValidationError,
)
from curalink.models.model_user import Gender, LoginUser, RegisterRequest, UserType
from curalink.security import create_token, hash_password, verify_password
from curalink.services.credential_store import CredentialStore
from curalink.sqlalchemy.users import User

logger = logging.getLogger(__name__)


def _coerce_age(age: int | str | None) -> int | None:
    """Parse *age* as an integer; unparseable or zero values become None."""
    try:
        return int(age) or None
    except (TypeError, ValueError):
        return None


class AuthService:
    def __init__(self, store: CredentialStore, jwt_secret: str) -> None:
        self.store = store
        self.jwt_secret = jwt_secret

    def register(self, request: RegisterRequest) -> User:
        """Validate, hash and persist a new user.

        Fields that do not apply to the requested user type are nulled out.
        """
        if request.user_type not in VALID_USER_TYPES:
            raise ValidationError("Invalid userType")
        if request.gender not in VALID_GENDERS:
            raise ValidationError("Invalid gender")

        if self.store.find_by_email(request.email) is not None:
            raise ConflictError("Email already registered")

        user_type = UserType(request.user_type)
        is_patient = user_type is UserType.PATIENT

        user = User(
            first_name=request.first_name,
            last_name=request.last_name,
            email=request.email,
            password=hash_password(request.password),
            gender=Gender(request.gender),
            user_type=user_type,
            field_type=None if is_patient else request.field_type,
            age=_coerce_age(request.age) if is_patient else None,
            condition=request.condition if is_patient else None,
            allergies=request.allergies if is_patient else None,
        )
        user = self.store.create(user)
        logger.info("Registered %s id=%s", user_type.value, user.id)
        return user

    def login(self, email: str, password: str) -> tuple[str, LoginUser]:
        """Verify credentials and issue a signed token.

        Returns the token and the reduced public projection of the user.
        """
        user = self.store.find_by_email(email)
        if user is None:
            raise NotFoundError("User not found")
        if not verify_password(password, user.password):
            raise InvalidCredentialsError("Invalid credentials")

        token = create_token(
            {"id": user.id, "email": user.email, "userType": user.user_type.value},
            self.jwt_secret,
        )
        logger.info("Issued token for id=%s", user.id)
        return token, LoginUser.model_validate(user)

    def get_by_email_typed(self, email: str, required_type: UserType) -> User:
        user = self.store.find_by_email(email)
        if user is None or user.user_type is not required_type:
            raise NotFoundError(f"{required_type.value.capitalize()} not found")
        return user
