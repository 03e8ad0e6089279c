from datetime import datetime
from uuid import uuid4

from sqlalchemy import DateTime, Enum, Integer, Text, func
from sqlalchemy.orm import Mapped, mapped_column

from curalink.db.base import Base
from curalink.models.model_user import Gender, UserType


class User(Base):
    """A patient or researcher account.

    Column names follow the camelCase layout of the ``"User"`` table.
    ``field_type`` is only set for researchers; ``age``, ``condition`` and
    ``allergies`` are only set for patients.
    """

    __tablename__ = "User"

    id: Mapped[str] = mapped_column(
        Text, primary_key=True, default=lambda: str(uuid4())
    )
    first_name: Mapped[str] = mapped_column("firstName", Text, nullable=False)
    last_name: Mapped[str] = mapped_column("lastName", Text, nullable=False)
    email: Mapped[str] = mapped_column(Text, unique=True, nullable=False, index=True)
    password: Mapped[str] = mapped_column(Text, nullable=False)  # bcrypt digest
    gender: Mapped[Gender] = mapped_column(
        Enum(Gender, name="Gender"), nullable=False
    )
    user_type: Mapped[UserType] = mapped_column(
        "userType", Enum(UserType, name="UserType"), nullable=False
    )
    field_type: Mapped[str | None] = mapped_column("fieldType", Text, nullable=True)
    age: Mapped[int | None] = mapped_column(Integer, nullable=True)
    condition: Mapped[str | None] = mapped_column(Text, nullable=True)
    allergies: Mapped[str | None] = mapped_column(Text, nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        "createdAt", DateTime, server_default=func.now(), nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        "updatedAt",
        DateTime,
        server_default=func.now(),
        onupdate=func.now(),
        nullable=False,
    )
