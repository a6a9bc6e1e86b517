from datetime import date
from typing import Optional

from pydantic import Field

from domain.models.base import DocumentModel


class Payment(DocumentModel):
    """
    Append-only payment ledger entry.

    `date` has day granularity (ISO `YYYY-MM-DD`); same-day payments carry
    no ordering between them.
    """

    email: str
    date: str = Field(default_factory=lambda: date.today().isoformat())
    amount: float
    method: str
    status: str
    transaction_id: Optional[str] = None
    package_name: Optional[str] = None
