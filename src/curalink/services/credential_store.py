"""Credential store: uniqueness-enforcing create and lookup by email."""

import logging

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from curalink.exceptions import ConflictError
from curalink.sqlalchemy.users import User

logger = logging.getLogger(__name__)


class CredentialStore:
    """Thin adapter over the ``User`` table."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def find_by_email(self, email: str) -> User | None:
        return self.session.scalar(select(User).where(User.email == email))

    def create(self, user: User) -> User:
        """Persist *user*; raises ConflictError if the email is already taken."""
        self.session.add(user)
        try:
            self.session.commit()
        except IntegrityError as e:
            self.session.rollback()
            logger.warning("Insert rejected by the email unique constraint")
            raise ConflictError("Email already registered") from e
        self.session.refresh(user)
        return user
