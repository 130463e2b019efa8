from adyen_checkout.models.payment_mean import PaymentMeanRecord
from adyen_checkout.models.user_preference import UserPreference

__all__ = [
    "PaymentMeanRecord",
    "UserPreference",
]
