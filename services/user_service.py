from typing import Dict, Tuple
import logging

from app.exceptions import ConflictError, NotFoundError
from domain.enums import UserRole
from domain.models import User
from services.validation import require_fields

logger = logging.getLogger("dormidine.users")


class UserService:
    """User registration, lookup and role management"""

    def __init__(self, user_repo) -> None:
        self.user_repo = user_repo

    def save_user(self, email: str, name: str) -> Tuple[User, bool]:
        """
        Register a user on first sign-in.

        Returns:
            (user, created) where created is False if the email already existed
        """
        require_fields(email=email, name=name)

        existing = self.user_repo.get_by_email(email)
        if existing:
            return existing, False

        user = User(email=email, name=name)
        try:
            user.id = self.user_repo.create_user(user)
        except ConflictError:
            # Concurrent first sign-in won the insert
            existing = self.user_repo.get_by_email(email)
            if existing is None:
                raise
            return existing, False
        logger.info("User created: %s", email)
        return user, True

    def get_user(self, email: str) -> User:
        require_fields(email=email)
        user = self.user_repo.get_by_email(email)
        if not user:
            raise NotFoundError(f"User not found: {email}")
        return user

    def get_role(self, email: str) -> str:
        user = self.get_user(email)
        return user.role or UserRole.USER.value

    def promote_to_admin(self, email: str) -> Dict:
        """One-way promotion; there is no demotion path."""
        require_fields(email=email)
        matched, modified = self.user_repo.set_role(email, UserRole.ADMIN)
        if not matched:
            raise NotFoundError(f"User not found: {email}")
        if modified:
            logger.info("User %s promoted to admin", email)
        return {"email": email, "role": UserRole.ADMIN.value, "modified": bool(modified)}
