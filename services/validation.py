"""Input checks shared by the service layer."""

import math
from typing import Any

from app.exceptions import ServiceValidationError


def require_fields(**fields: Any) -> None:
    """Raise ServiceValidationError naming every empty field."""
    missing = [name for name, value in fields.items() if value is None or value == ""]
    if missing:
        raise ServiceValidationError(
            f"Missing required field(s): {', '.join(missing)}",
            details={"missing": missing},
        )


def parse_rating(value: Any) -> float:
    """Lenient numeric parse: anything unparsable becomes 0."""
    try:
        rating = float(value)
    except (TypeError, ValueError):
        return 0.0
    if math.isnan(rating) or math.isinf(rating):
        return 0.0
    return rating
