"""
User Repository - Data access layer for user-related operations
"""

from typing import Optional, Tuple

from pymongo.collection import Collection
from pymongo.errors import DuplicateKeyError

from app.exceptions import ConflictError
from domain.enums import PackageTier, UserRole
from domain.models import User
from repositories.base import MongoRepository, storage_operation


class UserRepository(MongoRepository[User]):
    """Repository for user data access"""

    def __init__(self, collection: Collection):
        super().__init__(collection, User)

    @storage_operation("get_by_email")
    def get_by_email(self, email: str) -> Optional[User]:
        """Get user by email

        Args:
            email: User email (unique)

        Returns:
            User or None if not found
        """
        return self._to_model(self.collection.find_one({"email": email}))

    @storage_operation("create_user")
    def create_user(self, user: User) -> str:
        """Create a new user

        Args:
            user: User record to insert

        Returns:
            Id of the inserted user

        Raises:
            ConflictError: If the email is already registered
        """
        try:
            result = self.collection.insert_one(user.to_document())
        except DuplicateKeyError:
            raise ConflictError(f"User with email {user.email} already exists")
        return str(result.inserted_id)

    @storage_operation("set_package")
    def set_package(self, email: str, package: PackageTier) -> Tuple[int, int]:
        """Overwrite the user's package tier

        Args:
            email: User email
            package: New tier

        Returns:
            (matched, modified) counts; modified is 0 when the tier was unchanged
        """
        result = self.collection.update_one(
            {"email": email}, {"$set": {"package": package.value}}
        )
        return result.matched_count, result.modified_count

    @storage_operation("set_role")
    def set_role(self, email: str, role: UserRole) -> Tuple[int, int]:
        """Same contract as set_package, for the role field"""
        result = self.collection.update_one(
            {"email": email}, {"$set": {"role": role.value}}
        )
        return result.matched_count, result.modified_count

    @storage_operation("increment_meals_added")
    def increment_meals_added(self, email: str) -> int:
        result = self.collection.update_one(
            {"email": email}, {"$inc": {"mealsAdded": 1}}
        )
        return result.matched_count
