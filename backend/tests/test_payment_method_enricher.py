"""Tests for the default PaymentMethodEnricher."""

from adyen_checkout.services.payment_means.enricher import (
    PaymentMethodEnricher,
    PaymentMethodEnricherBase,
)
from adyen_checkout.services.payment_means.payment_mean import PaymentMean, SourceType
from adyen_checkout.services.payment_means.payment_method import PaymentMethod


class TestPaymentMethodEnricher:
    def test_is_an_enricher(self):
        assert isinstance(PaymentMethodEnricher(), PaymentMethodEnricherBase)

    def test_enriches_regular_method(self):
        enricher = PaymentMethodEnricher(environment="test")
        raw = {
            "id": 15,
            "name": "bcmc_bancontact_card",
            "description": "Bancontact",
            "additionaldescription": "Pay with Bancontact",
            "source": SourceType.ADYEN.value,
            "attribute": {"adyen_type": "bcmc_bancontact_card"},
        }
        method = PaymentMethod.from_raw({"type": "bcmc", "name": "Bancontact card"}).with_code(
            "bancontact_card"
        )

        result = enricher(raw, method)

        assert result["id"] == 15
        assert result["enriched"] is True
        assert result["adyenType"] == "bcmc"
        assert result["isStoredPayment"] is False
        assert result["isAdyenPaymentMethod"] is True
        assert result["additionaldescription"] == "Pay with Bancontact"
        assert result["image"] == (
            "https://checkoutshopper-test.adyen.com/checkoutshopper/images/logos/bcmc.svg"
        )
        assert result["metadata"] == {"type": "bcmc", "name": "Bancontact card"}
        assert "stored_method_id" not in result
        assert raw.get("enriched") is None

    def test_enriched_payload_builds_enriched_payment_mean(self):
        raw = {"id": 15, "source": SourceType.ADYEN.value}
        method = PaymentMethod.from_raw({"type": "ideal"}).with_code("ideal")

        payment_mean = PaymentMean.from_raw(PaymentMethodEnricher()(raw, method))

        assert payment_mean.enriched is True
        assert str(payment_mean.adyen_type) == "ideal"
        assert payment_mean.is_adyen_source

    def test_enriches_stored_method(self):
        enricher = PaymentMethodEnricher(environment="live")
        umbrella = {
            "id": 25,
            "name": "adyen_stored_payment_umbrella",
            "description": "Stored payment",
            "source": SourceType.SHOPWARE_DEFAULT.value,
            "hide": True,
        }
        method = PaymentMethod.from_raw(
            {
                "id": "8415718415172200",
                "type": "scheme",
                "name": "VISA",
                "lastFour": "1111",
                "expiryMonth": "03",
                "expiryYear": "2030",
            }
        )

        result = enricher(umbrella, method)

        assert result["stored_method_id"] == "8415718415172200"
        assert result["stored_method_umbrella_id"] == "25_8415718415172200"
        assert result["description"] == "VISA"
        assert result["source"] == SourceType.ADYEN.value
        assert result["hide"] is False
        assert result["isStoredPayment"] is True
        assert result["additionaldescription"] == "************1111 (03/2030)"
        assert result["image"] == (
            "https://checkoutshopper-live.adyen.com/checkoutshopper/images/logos/scheme.svg"
        )

    def test_stored_method_without_card_details(self):
        umbrella = {"id": 25, "description": "Stored payment", "additionaldescription": "Saved"}
        method = PaymentMethod.from_raw({"id": "sepa-1", "type": "sepadirectdebit"})

        result = PaymentMethodEnricher()(umbrella, method)

        assert result["description"] == "Stored payment"
        assert result["additionaldescription"] == "Saved"
        assert result["stored_method_umbrella_id"] == "25_sepa-1"
