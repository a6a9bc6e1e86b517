"""
Payment routes - package checkout, payment ledger and tier upgrades.
"""

from typing import List

from fastapi import APIRouter, Depends, Query, status

from api.dependencies import get_subscription_service
from domain.schemas import (
    AlreadyPaidResponse,
    InsertedResponse,
    PackageUpgradeRequest,
    PackageUpgradeResponse,
    PaymentCreate,
    PaymentIntentRequest,
    PaymentIntentResponse,
    PaymentResponse,
    PurchaseResponse,
)
from services import SubscriptionService

router = APIRouter(tags=["Payments"])


@router.post("/create-payment-intent", response_model=PaymentIntentResponse)
def create_payment_intent(
    payload: PaymentIntentRequest,
    subscriptions: SubscriptionService = Depends(get_subscription_service),
):
    """Open a payment intent priced server-side from the package name"""
    secret = subscriptions.create_payment_intent(payload.package_name, payload.email)
    return PaymentIntentResponse(client_secret=secret)


@router.post(
    "/payments", response_model=InsertedResponse, status_code=status.HTTP_201_CREATED
)
def record_payment(
    payload: PaymentCreate,
    subscriptions: SubscriptionService = Depends(get_subscription_service),
):
    """Append a payment record. Does not change the user's package."""
    payment_id = subscriptions.record_payment(
        payload.email,
        payload.amount,
        payload.method,
        payload.status,
        payload.transaction_id,
        payload.package_name,
    )
    return InsertedResponse(inserted_id=payment_id)


@router.post(
    "/payments/confirm",
    response_model=PurchaseResponse,
    status_code=status.HTTP_201_CREATED,
)
def confirm_payment(
    payload: PaymentCreate,
    subscriptions: SubscriptionService = Depends(get_subscription_service),
):
    """Record a gateway result and grant the package only if it succeeded"""
    return subscriptions.complete_purchase(
        payload.email,
        payload.amount,
        payload.method,
        payload.status,
        payload.transaction_id,
        payload.package_name,
    )


@router.get("/payments", response_model=List[PaymentResponse])
def list_payments(
    email: str = Query(..., description="Payer email"),
    subscriptions: SubscriptionService = Depends(get_subscription_service),
):
    return subscriptions.list_payments(email)


@router.get("/payments/already-paid", response_model=AlreadyPaidResponse)
def already_paid(
    email: str = Query(...),
    package_name: str = Query(..., alias="packageName"),
    subscriptions: SubscriptionService = Depends(get_subscription_service),
):
    return AlreadyPaidResponse(already_paid=subscriptions.has_paid_for(email, package_name))


@router.patch("/users/package", response_model=PackageUpgradeResponse)
def upgrade_package(
    payload: PackageUpgradeRequest,
    subscriptions: SubscriptionService = Depends(get_subscription_service),
):
    """Set the user's package tier (post-payment grant or admin override)"""
    return subscriptions.upgrade_package(payload.email, payload.package_name)
