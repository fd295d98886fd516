import uuid
from datetime import datetime

from sqlmodel import Column, Field, SQLModel

from ticketing_auth.utils import TZDateTime, utc_now


class User(SQLModel, table=True):
    __tablename__ = "ticketing_users"

    id: uuid.UUID = Field(default_factory=uuid.uuid4, primary_key=True)
    email: str = Field(max_length=255, unique=True, index=True)
    password_hash: str = Field(max_length=255)
    created_at: datetime = Field(
        default_factory=utc_now,
        sa_column=Column(TZDateTime(), nullable=False),
    )
    updated_at: datetime = Field(
        default_factory=utc_now,
        sa_column=Column(TZDateTime(), nullable=False),
    )
