from adyen_checkout.schemas.checkout import (
    CheckoutPaymentMean,
    CheckoutPaymentMeansResponse,
    DisableStoredMethodRequest,
    DisableStoredMethodResponse,
)
from adyen_checkout.schemas.payment_mean import (
    ImportRequest,
    ImportResultResponse,
    PaymentMeanCreate,
    PaymentMeanResponse,
    PaymentMeanUpdate,
)
from adyen_checkout.schemas.user_preference import UserPreferenceResponse, UserPreferenceUpdate

__all__ = [
    "CheckoutPaymentMean",
    "CheckoutPaymentMeansResponse",
    "DisableStoredMethodRequest",
    "DisableStoredMethodResponse",
    "ImportRequest",
    "ImportResultResponse",
    "PaymentMeanCreate",
    "PaymentMeanResponse",
    "PaymentMeanUpdate",
    "UserPreferenceResponse",
    "UserPreferenceUpdate",
]
