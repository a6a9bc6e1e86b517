"""Stripe payment gateway adapter.

Opens PaymentIntents through the Stripe REST API and hands back the
client secret the browser needs to confirm the payment. No retries are
performed here; callers decide whether to try again.

Example:
    >>> with StripeGateway(secret_key="sk_test_...") as gateway:
    ...     secret = gateway.create_payment_intent(1999, "usd")
"""

from typing import Any, Dict, Optional, Protocol
import logging

import httpx

from app.exceptions import GatewayError

logger = logging.getLogger("dormidine.payments.gateway")


class PaymentGateway(Protocol):
    """Port consumed by the subscription service."""

    def create_payment_intent(self, amount: int, currency: str) -> str:
        ...


class StripeGateway:
    """PaymentGateway implementation backed by Stripe PaymentIntents."""

    PAYMENT_INTENTS_PATH = "/v1/payment_intents"

    def __init__(
        self,
        secret_key: str,
        api_base: str = "https://api.stripe.com",
        timeout: float = 10.0,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        self._secret_key = secret_key
        self._client = httpx.Client(
            base_url=api_base,
            timeout=httpx.Timeout(timeout),
            auth=(secret_key, ""),
            transport=transport,
        )

    def __enter__(self) -> "StripeGateway":
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        self.close()

    def close(self) -> None:
        self._client.close()

    def create_payment_intent(self, amount: int, currency: str) -> str:
        """
        Create a PaymentIntent and return its client secret.

        Args:
            amount: Amount in minor currency units (e.g. cents)
            currency: ISO currency code

        Returns:
            Opaque client secret for client-side confirmation

        Raises:
            GatewayError: If the key is missing, the request fails or Stripe rejects it
        """
        if not self._secret_key:
            raise GatewayError("Payment gateway is not configured")

        form = {
            "amount": str(amount),
            "currency": currency,
            "automatic_payment_methods[enabled]": "true",
        }
        try:
            response = self._client.post(self.PAYMENT_INTENTS_PATH, data=form)
        except httpx.HTTPError as exc:
            logger.error("Payment intent request failed: %s", exc)
            raise GatewayError("Payment intent failed") from exc

        if response.status_code >= 400:
            message = _stripe_error_message(response)
            logger.error(
                "Payment intent rejected",
                extra={"status": response.status_code, "error": message},
            )
            raise GatewayError(
                f"Payment intent failed: {message}", status_code=response.status_code
            )

        client_secret = response.json().get("client_secret")
        if not client_secret:
            raise GatewayError("Payment intent response had no client secret")

        logger.info("Payment intent created", extra={"amount": amount, "currency": currency})
        return client_secret


def _stripe_error_message(response: httpx.Response) -> str:
    try:
        body: Dict[str, Any] = response.json()
    except ValueError:
        return f"HTTP {response.status_code}"
    return body.get("error", {}).get("message") or f"HTTP {response.status_code}"
