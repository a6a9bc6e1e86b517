"""
Domain enums for DormiDine application.
Contains all enumeration types used across the domain models.
"""

import enum


class UserRole(str, enum.Enum):
    """User roles. Promotion is one-way: user -> admin"""

    USER = "user"
    ADMIN = "admin"


class PackageTier(str, enum.Enum):
    """Subscription package tiers"""

    FREE = "free"
    SILVER = "silver"
    GOLD = "gold"
    PLATINUM = "platinum"


class RequestStatus(str, enum.Enum):
    """Meal request lifecycle states"""

    PENDING = "pending"
    CANCELLED = "cancelled"


class MealPool(str, enum.Enum):
    """Disjoint meal collections sharing the same engagement rules"""

    MEALS = "meals"
    UPCOMING = "upcoming-meals"


# Payment status string the gateway confirmation flow writes on success
PAYMENT_SUCCESS = "Success"

# Minor currency units; kept server-side only
PACKAGE_PRICES = {
    PackageTier.SILVER: 999,
    PackageTier.GOLD: 1999,
    PackageTier.PLATINUM: 2999,
}
