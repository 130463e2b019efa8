from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from adyen_checkout.core.config import settings
from adyen_checkout.routers import checkout, payment_means, user_preferences

OPENAPI_TAGS = [
    {"name": "Checkout", "description": "Payment means offered at checkout, enriched by Adyen."},
    {"name": "Payment Means", "description": "Manage the store's payment means and Adyen imports."},
    {"name": "User Preferences", "description": "Shoppers' preferred stored payment methods."},
]

app = FastAPI(
    title=settings.APP_NAME,
    version=settings.version,
    description=(
        "Checkout payment selection backed by Adyen. "
        "Merges native payment means with live Adyen payment methods and "
        "resolves stored payment methods for the shopper."
    ),
    openapi_tags=OPENAPI_TAGS,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=[o.strip() for o in settings.CORS_ORIGINS.split(",") if o.strip()],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


app.include_router(checkout.router, prefix="/v1/checkout", tags=["Checkout"])
app.include_router(payment_means.router, prefix="/v1/payment_means", tags=["Payment Means"])
app.include_router(
    user_preferences.router,
    prefix="/v1/user_preferences",
    tags=["User Preferences"],
)


@app.get("/")
async def root() -> dict[str, str]:
    return {
        "app": settings.APP_NAME,
        "version": settings.version,
        "adyen_environment": settings.adyen_environment,
        "status": "running",
    }
