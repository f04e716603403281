"""Application configuration settings"""

import os
from dotenv import load_dotenv

load_dotenv()


def _flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).lower() in {"1", "true", "yes", "on"}


class Config:
    TESTING = _flag("TESTING")
    DEBUG = _flag("DEBUG")

    # Supabase project (hosted tables, auth and edge functions)
    SUPABASE_URL: str = os.getenv("SUPABASE_URL", "")
    SUPABASE_KEY: str = os.getenv("SUPABASE_KEY", "")
    SUPABASE_JWT_SECRET: str = os.getenv("SUPABASE_JWT_SECRET", "")
    SUPABASE_JWT_AUDIENCE: str = os.getenv("SUPABASE_JWT_AUDIENCE", "authenticated")

    # Navigation targets used by the route guard
    SIGN_IN_PATH: str = os.getenv("SIGN_IN_PATH", "/auth")
    DEFAULT_LANDING_PATH: str = os.getenv("DEFAULT_LANDING_PATH", "/dashboard")
    # Route guards kept in memory at most (one per live session)
    MAX_ROUTE_GUARDS: int = int(os.getenv("MAX_ROUTE_GUARDS", "10000"))

    # Process dialog
    PROCESS_COMPLETE_DELAY: float = float(os.getenv("PROCESS_COMPLETE_DELAY", "1.0"))

    # Listings
    FEATURED_ACCOMMODATIONS_LIMIT: int = int(
        os.getenv("FEATURED_ACCOMMODATIONS_LIMIT", "6")
    )

    # Edge functions
    ASSISTANT_FUNCTION: str = os.getenv("ASSISTANT_FUNCTION", "chat-assistant")
    EMAIL_FUNCTION: str = os.getenv("EMAIL_FUNCTION", "send-email")

    # Logging
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
    LOG_PATH: str | None = os.getenv("LOG_PATH") or None
    LOG_FORMAT: str = os.getenv(
        "LOG_FORMAT",
        "%(asctime)s %(levelname)s [%(correlation_id)s] %(name)s: %(message)s",
    )


class DevelopmentConfig(Config):
    """Development configuration"""

    DEBUG = True


class TestingConfig(Config):
    """Testing configuration"""

    TESTING = True
    SUPABASE_URL = "http://localhost:54321"
    SUPABASE_KEY = "test-anon-key"
    SUPABASE_JWT_SECRET = "test-jwt-secret-0123456789abcdef0123456789"
    PROCESS_COMPLETE_DELAY = 0.01


class ProductionConfig(Config):
    """Production configuration"""

    pass


# Configuration dictionary
config = {
    "development": DevelopmentConfig,
    "testing": TestingConfig,
    "production": ProductionConfig,
    "default": DevelopmentConfig,
}


def get_config(env=None):
    """Get configuration based on environment"""
    if env is None:
        env = os.getenv("APP_ENV", "development")
    return config.get(env, config["default"])
