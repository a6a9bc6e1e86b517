"""API routes package"""

from . import health, meals, payments, requests, reviews, users

__all__ = ["health", "meals", "payments", "requests", "reviews", "users"]
