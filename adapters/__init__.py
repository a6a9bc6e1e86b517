"""
Adapters package - External service connections.
MongoDB ledger store and the Stripe payment gateway.
"""

from adapters import mongo_adapter, payment_gateway

__all__ = [
    "mongo_adapter",
    "payment_gateway",
]
