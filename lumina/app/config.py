import os

class Config:
    SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret")
    JSON_SORT_KEYS = False

    # Comma-separated list
    CORS_ORIGINS = [o.strip() for o in os.getenv("CORS_ORIGINS", "").split(",") if o.strip()]

    # Optional CSV catalog; the built-in catalog is used when unset
    CATALOG_CSV = os.getenv("CATALOG_CSV") or None
    CURRENCY_SYMBOL = os.getenv("CURRENCY_SYMBOL", "$")

    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
    APP_HOST = os.getenv("APP_HOST", "0.0.0.0")
    APP_PORT = int(os.getenv("APP_PORT", "8080"))


class TestingConfig(Config):
    TESTING = True
    SECRET_KEY = "test-secret"
    CATALOG_CSV = None
