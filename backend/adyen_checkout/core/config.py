from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    APP_NAME: str = "Adyen Checkout Payment Means"
    version: str = "0.1.0"
    DEBUG: bool = False
    APP_DATABASE_DSN: str = "sqlite:////tmp/adyen_checkout.db"

    # Adyen settings
    adyen_api_key: str = ""
    adyen_merchant_account: str = ""
    adyen_environment: str = "test"  # "test" or "live"
    adyen_live_url_prefix: str = ""
    adyen_request_timeout: int = 30

    # Name of the payment mean that stands in for every stored Adyen method
    adyen_stored_payment_umbrella_code: str = "adyen_stored_payment_umbrella"

    # CORS
    CORS_ORIGINS: str = "http://localhost:3000,http://localhost:5173"

    @property
    def adyen_is_live(self) -> bool:
        return self.adyen_environment == "live"


settings = Settings()
