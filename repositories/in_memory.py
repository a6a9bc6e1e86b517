"""In-memory repository implementations.

Dictionary-backed stand-ins for the Mongo repositories, with the same method
contracts. Used by the test suite and by `REPOSITORY_BACKEND=inmemory`.

Every read and write of a repository's storage takes its lock, so conditional
updates (like toggles, request cancellation, unique user emails) stay atomic
and listings never see the dict change mid-iteration.
Persistence: data is lost on process restart.
"""

from copy import deepcopy
from threading import Lock
from typing import Callable, Dict, Generic, List, Optional, Tuple, Type, TypeVar

from app.exceptions import ConflictError
from domain.enums import PAYMENT_SUCCESS, PackageTier, RequestStatus, UserRole
from domain.models import Meal, MealRequest, Payment, Review, User, new_id
from domain.models.base import DocumentModel

ModelType = TypeVar("ModelType", bound=DocumentModel)


class InMemoryRepository(Generic[ModelType]):
    """Shared storage and lookup helpers"""

    def __init__(self, model: Type[ModelType]) -> None:
        self.model = model
        self._storage: Dict[str, ModelType] = {}
        self._lock = Lock()

    def get_by_id(self, record_id: str) -> Optional[ModelType]:
        with self._lock:
            record = self._storage.get(record_id)
            return deepcopy(record) if record else None

    def insert(self, record: ModelType) -> str:
        stored = record.model_copy(deep=True)
        stored.id = stored.id or new_id()
        with self._lock:
            self._storage[stored.id] = stored
        return stored.id

    def _find(
        self,
        predicate: Callable[[ModelType], bool],
        key: Optional[Callable[[ModelType], object]] = None,
    ) -> List[ModelType]:
        with self._lock:
            found = [deepcopy(r) for r in self._storage.values() if predicate(r)]
        if key is not None:
            found.sort(key=key, reverse=True)
        return found


class InMemoryMealRepository(InMemoryRepository[Meal]):
    def __init__(self) -> None:
        super().__init__(Meal)

    def list_all(self) -> List[Meal]:
        return self._find(lambda m: True, key=lambda m: (m.post_time, m.id))

    def toggle_like(self, meal_id: str, email: str) -> Optional[Meal]:
        with self._lock:
            meal = self._storage.get(meal_id)
            if meal is None:
                return None
            if email in meal.liked_by:
                meal.liked_by = [e for e in meal.liked_by if e != email]
            else:
                meal.liked_by = meal.liked_by + [email]
            meal.likes = len(meal.liked_by)
            return deepcopy(meal)

    def add_requester_by_title(self, title: str, email: str) -> int:
        with self._lock:
            meal = next((m for m in self._storage.values() if m.title == title), None)
            if meal is None:
                return 0
            if email not in meal.is_requested_by:
                meal.is_requested_by = meal.is_requested_by + [email]
            return 1

    def remove_requester(self, meal_id: str, email: str) -> int:
        with self._lock:
            meal = self._storage.get(meal_id)
            if meal is None:
                return 0
            meal.is_requested_by = [e for e in meal.is_requested_by if e != email]
            return 1

    def get_titles(self, meal_ids: List[str]) -> Dict[str, str]:
        with self._lock:
            return {
                mid: self._storage[mid].title for mid in meal_ids if mid in self._storage
            }


class InMemoryUserRepository(InMemoryRepository[User]):
    def __init__(self) -> None:
        super().__init__(User)

    def get_by_email(self, email: str) -> Optional[User]:
        found = self._find(lambda u: u.email == email)
        return found[0] if found else None

    def create_user(self, user: User) -> str:
        stored = user.model_copy(deep=True)
        stored.id = stored.id or new_id()
        with self._lock:
            if any(u.email == user.email for u in self._storage.values()):
                raise ConflictError(f"User with email {user.email} already exists")
            self._storage[stored.id] = stored
        return stored.id

    def _update(self, email: str, field: str, value) -> Tuple[int, int]:
        with self._lock:
            user = next((u for u in self._storage.values() if u.email == email), None)
            if user is None:
                return 0, 0
            if getattr(user, field) == value:
                return 1, 0
            setattr(user, field, value)
            return 1, 1

    def set_package(self, email: str, package: PackageTier) -> Tuple[int, int]:
        return self._update(email, "package", PackageTier(package).value)

    def set_role(self, email: str, role: UserRole) -> Tuple[int, int]:
        return self._update(email, "role", UserRole(role).value)

    def increment_meals_added(self, email: str) -> int:
        with self._lock:
            user = next((u for u in self._storage.values() if u.email == email), None)
            if user is None:
                return 0
            user.meals_added += 1
            return 1


class InMemoryMealRequestRepository(InMemoryRepository[MealRequest]):
    def __init__(self) -> None:
        super().__init__(MealRequest)

    def cancel(self, request_id: str) -> Optional[MealRequest]:
        with self._lock:
            request = self._storage.get(request_id)
            if request is None or request.status != RequestStatus.PENDING.value:
                return None
            request.status = RequestStatus.CANCELLED.value
            return deepcopy(request)

    def list_by_email(self, email: str) -> List[MealRequest]:
        return self._find(lambda r: r.email == email, key=lambda r: (r.requested_at, r.id))


class InMemoryReviewRepository(InMemoryRepository[Review]):
    def __init__(self) -> None:
        super().__init__(Review)

    def list_by_meal(self, meal_id: str) -> List[Review]:
        return self._find(lambda r: r.meal_id == meal_id, key=lambda r: (r.created_at, r.id))

    def list_by_email(self, email: str) -> List[Review]:
        return self._find(lambda r: r.email == email, key=lambda r: (r.created_at, r.id))

    def update(self, review_id: str, comment: str, rating: float) -> Tuple[int, int]:
        with self._lock:
            review = self._storage.get(review_id)
            if review is None:
                return 0, 0
            if review.comment == comment and review.rating == rating:
                return 1, 0
            review.comment = comment
            review.rating = rating
            return 1, 1

    def delete(self, review_id: str) -> bool:
        with self._lock:
            return self._storage.pop(review_id, None) is not None


class InMemoryPaymentRepository(InMemoryRepository[Payment]):
    def __init__(self) -> None:
        super().__init__(Payment)

    def exists_success(self, email: str, package_name: str) -> bool:
        with self._lock:
            return any(
                p.email == email
                and p.package_name == package_name
                and p.status == PAYMENT_SUCCESS
                for p in self._storage.values()
            )

    def list_by_email(self, email: str) -> List[Payment]:
        return self._find(lambda p: p.email == email, key=lambda p: (p.date, p.id))
