# File: app/api/deps.py

from collections.abc import Generator

from fastapi import Depends, Request
from sqlalchemy.orm import Session

from app.schemas.user import UserWrite
from app.services.user_repository import UserRepository


def get_db(request: Request) -> Generator[Session, None, None]:
    """
    FastAPI dependency that provides a SQLAlchemy session.

    The session factory is created at startup and kept on app.state, so
    each request gets a fresh session bound to the shared engine.

    Usage in route functions:
        db: Session = Depends(get_db)
    """
    db = request.app.state.session_factory()
    try:
        yield db
    finally:
        db.close()


def get_user_repository(db: Session = Depends(get_db)) -> UserRepository:
    return UserRepository(db)


async def read_user_payload(request: Request) -> UserWrite:
    """
    Decode the request body as a user, whatever Content-Type it declares.

    Browsers posting JSON.stringify() output send text/plain and curl -d
    sends a form type; both still carry a JSON document. Undecodable
    bodies raise pydantic's ValidationError, answered with 400.
    """
    return UserWrite.model_validate_json(await request.body())
