from typing import Any, Dict, List, Optional
import logging

from app.exceptions import ConflictError, NotFoundError, ServiceValidationError
from domain.enums import PACKAGE_PRICES, PAYMENT_SUCCESS, PackageTier
from domain.models import Payment
from services.validation import require_fields

logger = logging.getLogger("dormidine.subscription")


def _package_tier(package_name: Optional[str]) -> PackageTier:
    try:
        return PackageTier((package_name or "").strip().lower())
    except ValueError:
        raise ServiceValidationError(
            f"Invalid package name: {package_name}",
            details={"allowed": [t.value for t in PackageTier]},
        )


class SubscriptionService:
    """
    Package pricing, payment ledger and tier entitlement.

    Recording a payment and granting a tier are separate steps: a payment can
    be recorded without granting anything (a failed charge), and the tier is
    only changed by `upgrade_package`, which callers invoke after a successful
    payment has been recorded (see `complete_purchase`).
    """

    def __init__(self, user_repo, payment_repo, gateway, currency: str = "usd") -> None:
        self.user_repo = user_repo
        self.payment_repo = payment_repo
        self.gateway = gateway
        self.currency = currency

    @staticmethod
    def quote_package(package_name: str) -> int:
        """
        Price of a paid package in minor currency units (case-insensitive).

        Raises:
            ServiceValidationError: If the package is unknown or not a paid tier
        """
        tier = _package_tier(package_name)
        if tier not in PACKAGE_PRICES:
            raise ServiceValidationError(f"Invalid package name: {package_name}")
        return PACKAGE_PRICES[tier]

    def create_payment_intent(self, package_name: str, email: Optional[str] = None) -> str:
        """
        Open a gateway transaction for the package price and return its client secret.

        Nothing is stored. When `email` is given and that user already has a
        successful payment for the package, the purchase is refused.

        Raises:
            ServiceValidationError: Bad package name
            ConflictError: Package already paid for by this user
            GatewayError: Provider call failed
        """
        amount = self.quote_package(package_name)
        if email and self.has_paid_for(email, package_name):
            raise ConflictError(
                f"{email} has already paid for the {package_name.lower()} package"
            )
        client_secret = self.gateway.create_payment_intent(amount, self.currency)
        logger.info("Payment intent opened for %s package (%d)", package_name.lower(), amount)
        return client_secret

    def record_payment(
        self,
        email: str,
        amount: Any,
        method: str,
        status: str,
        transaction_id: Optional[str] = None,
        package_name: Optional[str] = None,
    ) -> str:
        """
        Append a payment dated today. Never changes the user's tier.

        Returns:
            Id of the payment record
        """
        require_fields(email=email, amount=amount, method=method, status=status)
        try:
            amount = float(amount)
        except (TypeError, ValueError):
            raise ServiceValidationError(f"Invalid amount: {amount}")

        payment = Payment(
            email=email,
            amount=amount,
            method=method,
            status=status,
            transaction_id=transaction_id,
            package_name=package_name.strip().lower() if package_name else None,
        )
        payment_id = self.payment_repo.insert(payment)
        logger.info(
            "Payment %s recorded for %s (package=%s, status=%s)",
            payment_id,
            email,
            payment.package_name,
            status,
        )
        return payment_id

    def has_paid_for(self, email: str, package_name: str) -> bool:
        """Whether a successful payment exists for (email, package). Not cached."""
        require_fields(email=email, packageName=package_name)
        return self.payment_repo.exists_success(email, package_name.strip().lower())

    def upgrade_package(self, email: str, package_name: str) -> Dict:
        """
        Set the user's tier to the requested package.

        Not guarded by payment history; also serves admin overrides.

        Returns:
            {"email", "package", "modified"}; modified is False when the user
            was already on that tier

        Raises:
            NotFoundError: If no user has this email
        """
        require_fields(email=email, packageName=package_name)
        tier = _package_tier(package_name)

        matched, modified = self.user_repo.set_package(email, tier)
        if not matched:
            raise NotFoundError(f"User not found: {email}")

        if modified:
            logger.info("User %s moved to %s package", email, tier.value)
        return {"email": email, "package": tier.value, "modified": bool(modified)}

    def complete_purchase(
        self,
        email: str,
        amount: Any,
        method: str,
        status: str,
        transaction_id: Optional[str] = None,
        package_name: Optional[str] = None,
    ) -> Dict:
        """
        Payment confirmation flow: record the payment, then upgrade only on success.

        Package and user are checked before anything is written, so a rejected
        confirmation leaves no payment behind.

        Raises:
            ServiceValidationError: Bad package name or missing payment fields
            NotFoundError: Successful payment for an unknown user
        """
        if package_name:
            _package_tier(package_name)
        if status == PAYMENT_SUCCESS and package_name:
            require_fields(email=email)
            if self.user_repo.get_by_email(email) is None:
                raise NotFoundError(f"User not found: {email}")

        payment_id = self.record_payment(
            email, amount, method, status, transaction_id, package_name
        )
        if status != PAYMENT_SUCCESS or not package_name:
            return {"insertedId": payment_id, "upgraded": False, "package": None}

        result = self.upgrade_package(email, package_name)
        return {"insertedId": payment_id, "upgraded": True, "package": result["package"]}

    def list_payments(self, email: str) -> List[Payment]:
        """Payment history for a user, newest first"""
        require_fields(email=email)
        return self.payment_repo.list_by_email(email)
