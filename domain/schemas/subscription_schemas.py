from typing import Any, Optional

from pydantic import Field

from domain.enums import PackageTier
from domain.schemas.base import CamelModel, IdentifiedModel


class PaymentIntentRequest(CamelModel):
    package_name: Optional[str] = Field(None, description="silver, gold or platinum")
    email: Optional[str] = Field(
        None, description="When given, purchases of an already paid tier are refused"
    )


class PaymentIntentResponse(CamelModel):
    client_secret: str


class PaymentCreate(CamelModel):
    """Schema for recording a payment reported by the checkout flow"""

    email: Optional[str] = None
    amount: Optional[Any] = None
    method: Optional[str] = None
    status: Optional[str] = None
    transaction_id: Optional[str] = None
    package_name: Optional[str] = None


class PaymentResponse(IdentifiedModel):
    email: str
    date: str
    amount: float
    method: str
    status: str
    transaction_id: Optional[str] = None
    package_name: Optional[str] = None


class AlreadyPaidResponse(CamelModel):
    already_paid: bool


class PackageUpgradeRequest(CamelModel):
    email: Optional[str] = None
    package_name: Optional[str] = None


class PackageUpgradeResponse(CamelModel):
    email: str
    package: PackageTier
    modified: bool = Field(..., description="False when the user was already on the tier")


class PurchaseResponse(CamelModel):
    """Outcome of the payment confirmation flow"""

    inserted_id: str
    upgraded: bool
    package: Optional[PackageTier] = None
