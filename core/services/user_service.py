# =============================================================================
# core/services/user_service.py - User Business Logic
# =============================================================================
# Handles user CRUD operations.
# Separates HTTP concerns from database logic: routes call UserService,
# UserService talks to MongoDB and translates driver errors into
# UsersApiException subclasses.
# =============================================================================

import logging
from typing import Any

from bson import ObjectId
from bson.errors import InvalidId
from pydantic import ValidationError
from pymongo import DESCENDING, ReturnDocument
from pymongo.collection import Collection
from pymongo.errors import DuplicateKeyError

from app.exceptions import (
    DuplicateUserError,
    InvalidUserIdError,
    UserNotFoundError,
    UserValidationError,
)
from core.models.user import USERS_COLLECTION, UserCreate, UserResponse, UserUpdate, utc_now
from lib.mongo_client import MongoStore

logger = logging.getLogger(__name__)


def _parse_object_id(user_id: str) -> ObjectId:
    try:
        return ObjectId(user_id)
    except (InvalidId, TypeError):
        raise InvalidUserIdError(str(user_id))


def _duplicate_error(error: DuplicateKeyError) -> DuplicateUserError:
    details = error.details or {}
    return DuplicateUserError(key=details.get("keyValue"), storage_code=error.code)


class UserService:
    """
    Service for user management operations.

    Provides a clean interface between API routes and the users collection.
    """

    def __init__(self, store: MongoStore):
        self.store = store

    @property
    def collection(self) -> Collection:
        return self.store.collection(USERS_COLLECTION)

    def list_users(self) -> list[UserResponse]:
        """Return all users, newest first."""
        cursor = self.collection.find().sort("createdAt", DESCENDING)
        return [UserResponse.from_document(doc) for doc in cursor]

    def get_user(self, user_id: str) -> UserResponse:
        """
        Get a user by ID.

        Raises:
            InvalidUserIdError: If user_id is not an ObjectId
            UserNotFoundError: If no user has this ID
        """
        document = self.collection.find_one({"_id": _parse_object_id(user_id)})
        if document is None:
            raise UserNotFoundError(user_id)
        return UserResponse.from_document(document)

    def create_user(self, data: UserCreate | dict[str, Any]) -> UserResponse:
        """
        Create a new user.

        Validation happens before anything is written, so a payload missing
        name or email never reaches the database.

        Raises:
            UserValidationError: If name or email is missing or blank
            DuplicateUserError: If name or email is already taken
        """
        if not isinstance(data, UserCreate):
            try:
                data = UserCreate.model_validate(data)
            except ValidationError as e:
                raise UserValidationError(e.errors()) from e

        now = utc_now()
        document = {
            "name": data.name,
            "email": data.email,
            "createdAt": now,
            "updatedAt": now,
        }

        try:
            result = self.collection.insert_one(document)
        except DuplicateKeyError as e:
            logger.info(f"Rejected duplicate user: {data.name} <{data.email}>")
            raise _duplicate_error(e) from e

        document["_id"] = result.inserted_id
        logger.info(f"Created user: {result.inserted_id}")
        return UserResponse.from_document(document)

    def update_user(self, user_id: str, data: UserUpdate | dict[str, Any]) -> UserResponse:
        """
        Update a user's name and/or email.

        Raises:
            InvalidUserIdError: If user_id is not an ObjectId
            UserValidationError: If the payload is empty or blank
            UserNotFoundError: If no user has this ID
            DuplicateUserError: If the new name or email is already taken
        """
        object_id = _parse_object_id(user_id)

        if not isinstance(data, UserUpdate):
            try:
                data = UserUpdate.model_validate(data)
            except ValidationError as e:
                raise UserValidationError(e.errors()) from e

        changes = data.to_changes()
        changes["updatedAt"] = utc_now()

        try:
            document = self.collection.find_one_and_update(
                {"_id": object_id},
                {"$set": changes},
                return_document=ReturnDocument.AFTER,
            )
        except DuplicateKeyError as e:
            logger.info(f"Rejected duplicate update for user: {user_id}")
            raise _duplicate_error(e) from e

        if document is None:
            raise UserNotFoundError(user_id)

        logger.info(f"Updated user: {user_id}")
        return UserResponse.from_document(document)

    def delete_user(self, user_id: str) -> None:
        """
        Delete a user.

        Raises:
            InvalidUserIdError: If user_id is not an ObjectId
            UserNotFoundError: If no user has this ID
        """
        result = self.collection.delete_one({"_id": _parse_object_id(user_id)})
        if result.deleted_count == 0:
            raise UserNotFoundError(user_id)
        logger.info(f"Deleted user: {user_id}")
