"""
Payment Repository - Append-only payment ledger
"""

from typing import List

from pymongo.collection import Collection

from domain.enums import PAYMENT_SUCCESS
from domain.models import Payment
from repositories.base import MongoRepository, storage_operation


class PaymentRepository(MongoRepository[Payment]):
    """Repository for payment records. Records are never updated or deleted."""

    def __init__(self, collection: Collection):
        super().__init__(collection, Payment)

    @storage_operation("exists_success")
    def exists_success(self, email: str, package_name: str) -> bool:
        """Check for a successful payment

        Args:
            email: Payer email
            package_name: Lower-cased package name

        Returns:
            True if any payment for (email, package) has status "Success"
        """
        doc = self.collection.find_one(
            {"email": email, "packageName": package_name, "status": PAYMENT_SUCCESS},
            {"_id": 1},
        )
        return doc is not None

    def list_by_email(self, email: str) -> List[Payment]:
        """Get a user's payment history

        Args:
            email: Payer email

        Returns:
            Payments ordered newest first by date, then by insertion
        """
        return self._find({"email": email}, sort=[("date", -1), ("_id", -1)])
