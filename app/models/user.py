# File: app/models/user.py

"""
User model.

Maps the ``users`` table: a server-assigned integer id plus free-form
name and email columns. No uniqueness or format constraints.
"""

from sqlalchemy import Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from app.models.base import Base


class User(Base):
    __tablename__ = "users"

    # SERIAL on PostgreSQL, AUTOINCREMENT rowid on SQLite
    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str | None] = mapped_column(Text, nullable=True)
    email: Mapped[str | None] = mapped_column(Text, nullable=True)

    def __repr__(self) -> str:
        return f"<User {self.id} - {self.email}>"
