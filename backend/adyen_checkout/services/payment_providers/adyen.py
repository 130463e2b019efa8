"""Adyen Checkout API client for payment method discovery.

Only the endpoints the checkout payment selection needs are wrapped:
1. POST /paymentMethods lists the methods available for a cart
2. DELETE /storedPaymentMethods/{id} disables a shopper's stored method
"""

import json
import logging
from typing import Any
from urllib.error import URLError
from urllib.parse import urlencode
from urllib.request import Request, urlopen

from adyen_checkout.core.config import settings
from adyen_checkout.services.payment_means.payment_method import PaymentMethodCollection

logger = logging.getLogger(__name__)


class AdyenPaymentMethodService:
    """Adyen payment method service.

    No retries or caching; each call goes to Adyen and transport errors
    surface as RuntimeError.
    """

    def __init__(
        self,
        api_key: str | None = None,
        merchant_account: str | None = None,
        environment: str | None = None,
        live_url_prefix: str | None = None,
        timeout: int | None = None,
    ):
        self.api_key = api_key or settings.adyen_api_key
        self.merchant_account = merchant_account or settings.adyen_merchant_account
        self.environment = environment or settings.adyen_environment
        self.live_url_prefix = live_url_prefix or settings.adyen_live_url_prefix
        self.timeout = timeout or settings.adyen_request_timeout

        if self.environment == "live" and self.live_url_prefix:
            self._base_url = (
                f"https://{self.live_url_prefix}-checkout-live.adyenpayments.com/checkout/v71"
            )
        else:
            self._base_url = "https://checkout-test.adyen.com/v71"

    def _make_request(
        self,
        method: str,
        endpoint: str,
        data: dict[str, Any] | None = None,
    ) -> dict[str, Any]:
        """Make an HTTP request to the Adyen API."""
        url = f"{self._base_url}{endpoint}"
        headers = {
            "Content-Type": "application/json",
            "Accept": "application/json",
            "X-API-Key": self.api_key,
        }

        body = json.dumps(data).encode() if data else None
        request = Request(url, data=body, headers=headers, method=method)

        try:
            with urlopen(request, timeout=self.timeout) as response:
                content = response.read().decode()
                result: dict[str, Any] = json.loads(content) if content else {}
                return result
        except URLError as e:
            raise RuntimeError(f"Adyen API request failed: {e}") from e

    def get_payment_methods(
        self,
        country_code: str,
        currency: str,
        value: float,
        shopper_reference: str | None = None,
    ) -> PaymentMethodCollection:
        """Fetch the payment methods Adyen offers for this cart."""
        request_data: dict[str, Any] = {
            "merchantAccount": self.merchant_account,
            "countryCode": country_code.upper(),
            "amount": {
                "value": int(round(value * 100)),
                "currency": currency.upper(),
            },
            "channel": "Web",
        }
        if shopper_reference:
            request_data["shopperReference"] = shopper_reference

        response = self._make_request("POST", "/paymentMethods", request_data)
        payment_methods = PaymentMethodCollection.from_adyen_response(response)
        logger.info(
            "Fetched %d Adyen payment methods for %s %s",
            len(payment_methods),
            country_code,
            currency,
        )
        return payment_methods

    def disable_stored_method(self, stored_method_id: str, shopper_reference: str) -> None:
        """Disable a stored payment method (recurring token) for a shopper."""
        query = urlencode(
            {"shopperReference": shopper_reference, "merchantAccount": self.merchant_account}
        )
        self._make_request("DELETE", f"/storedPaymentMethods/{stored_method_id}?{query}")
        logger.info("Disabled stored payment method %s", stored_method_id)
