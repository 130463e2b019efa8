from adyen_checkout.services.payment_means.enricher import PaymentMethodEnricher
from adyen_checkout.services.payment_providers.adyen import AdyenPaymentMethodService


def get_payment_method_service() -> AdyenPaymentMethodService:
    """Adyen payment method service configured from settings."""
    return AdyenPaymentMethodService()


def get_enricher() -> PaymentMethodEnricher:
    return PaymentMethodEnricher()
