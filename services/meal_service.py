from typing import Dict, List, Optional
import logging

from app.exceptions import NotFoundError, ServiceValidationError, StorageError
from domain.enums import MealPool
from domain.models import Meal
from domain.schemas.meal_schemas import MealCreate
from services.validation import require_fields

logger = logging.getLogger("dormidine.meals")


class MealService:
    """Catalog reads and the admin meal-creation path for both meal pools"""

    def __init__(self, meal_repos: Dict[MealPool, object], user_repo) -> None:
        self.meal_repos = meal_repos
        self.user_repo = user_repo

    def _meals(self, pool: MealPool):
        return self.meal_repos[MealPool(pool)]

    def list_meals(self, pool: MealPool = MealPool.MEALS) -> List[Meal]:
        return self._meals(pool).list_all()

    def get_meal(self, meal_id: str, pool: MealPool = MealPool.MEALS) -> Meal:
        require_fields(mealId=meal_id)
        meal = self._meals(pool).get_by_id(meal_id)
        if meal is None:
            raise NotFoundError(f"Meal not found: {meal_id}")
        return meal

    def add_meal(
        self,
        payload: MealCreate,
        admin_email: Optional[str] = None,
        pool: MealPool = MealPool.MEALS,
    ) -> str:
        """
        Add a meal with normalized ingredients and empty engagement state.

        When an admin email is given the meal is attributed to that admin and
        their `mealsAdded` counter is incremented (best-effort).

        Raises:
            ServiceValidationError: If the email belongs to a non-admin user
        """
        admin_email = admin_email or payload.admin_email
        if admin_email:
            admin = self.user_repo.get_by_email(admin_email)
            if admin is None or not admin.is_admin():
                raise ServiceValidationError(f"{admin_email} is not an admin")

        meal = Meal(
            **payload.model_dump(exclude={"admin_email"}),
            added_by=admin_email,
        )
        meal_id = self._meals(pool).insert(meal)
        logger.info("Meal %s (%s) added to %s", meal_id, meal.title, MealPool(pool).value)

        if admin_email:
            try:
                self.user_repo.increment_meals_added(admin_email)
            except StorageError:
                logger.warning("Meal %s added but %s's counter was not updated", meal_id, admin_email)
        return meal_id
