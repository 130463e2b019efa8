from adyen_checkout.repositories.payment_mean_repository import PaymentMeanRepository
from adyen_checkout.repositories.user_preference_repository import UserPreferenceRepository

__all__ = [
    "PaymentMeanRepository",
    "UserPreferenceRepository",
]
