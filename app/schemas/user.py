# File: app/schemas/user.py

from pydantic import BaseModel, ConfigDict, field_validator


class UserWrite(BaseModel):
    """
    Request body for create and update.

    Both fields default to "". Any client-supplied ``id`` is ignored:
    identity comes from the store (create) or from the path (update).
    """

    name: str = ""
    email: str = ""

    @field_validator("name", "email", mode="before")
    @classmethod
    def null_as_empty(cls, v):
        return "" if v is None else v


class UserRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str = ""
    email: str = ""

    # rows written outside the API may hold NULL
    @field_validator("name", "email", mode="before")
    @classmethod
    def null_as_empty(cls, v):
        return "" if v is None else v
