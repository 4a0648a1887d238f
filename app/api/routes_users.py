# File: app/api/routes_users.py

import logging

from fastapi import APIRouter, Depends, HTTPException, status

from app.api.deps import get_user_repository, read_user_payload
from app.schemas.user import UserRead, UserWrite
from app.services.user_repository import UserRepository

logger = logging.getLogger(__name__)

router = APIRouter(tags=["users"])

USER_DELETED_MESSAGE = "User deleted successfully"


def _not_found(user_id: int) -> HTTPException:
    logger.warning(f"User not found: id={user_id}")
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail=f"User {user_id} not found",
    )


@router.get("", response_model=list[UserRead], summary="List users")
def list_users(repository: UserRepository = Depends(get_user_repository)):
    """Always an array; [] when the table is empty."""
    return repository.list_users()


@router.post("", response_model=UserRead, summary="Create user")
def create_user(
    payload: UserWrite = Depends(read_user_payload),
    repository: UserRepository = Depends(get_user_repository),
):
    """
    Insert a user and return it with its new id.

    Answers 200 (not 201), matching the rest of the API.
    """
    return repository.insert_user(name=payload.name, email=payload.email)


@router.get("/{user_id}", response_model=UserRead, summary="Get user")
def get_user(
    user_id: int,
    repository: UserRepository = Depends(get_user_repository),
):
    user = repository.get_user_by_id(user_id)
    if user is None:
        raise _not_found(user_id)
    return user


@router.put("/{user_id}", response_model=UserRead, summary="Update user")
def update_user(
    user_id: int,
    payload: UserWrite = Depends(read_user_payload),
    repository: UserRepository = Depends(get_user_repository),
):
    """
    Overwrite name and email, then return the row as re-read from the
    database rather than the request body.
    """
    repository.update_user_by_id(user_id, name=payload.name, email=payload.email)

    user = repository.get_user_by_id(user_id)
    if user is None:
        raise _not_found(user_id)

    logger.info(f"Updated user id={user_id}")
    return user


@router.delete("/{user_id}", response_model=str, summary="Delete user")
def delete_user(
    user_id: int,
    repository: UserRepository = Depends(get_user_repository),
):
    if not repository.delete_user_by_id(user_id):
        raise _not_found(user_id)
    return USER_DELETED_MESSAGE
