"""Application configuration settings"""

import os
from dotenv import load_dotenv

load_dotenv()

_TRUTHY = {"1", "true", "yes", "on"}


class Config:
    APP_ENV = os.getenv("APP_ENV", "development")
    TESTING = os.getenv("TESTING", "false").lower() in _TRUTHY
    DEBUG = os.getenv("DEBUG", "false").lower() in _TRUTHY
    HOST = os.getenv("HOST", "0.0.0.0")
    PORT = int(os.getenv("PORT", "8080"))

    # Logging
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
    LOG_PATH = os.getenv("LOG_PATH", "")
    LOG_FORMAT = os.getenv(
        "LOG_FORMAT",
        "%(asctime)s %(levelname)s [%(correlation_id)s] %(name)s: %(message)s",
    )

    # Database
    # sqlite+aiosqlite for local runs, postgresql+asyncpg in deployments
    DATABASE_URL: str = os.getenv("DATABASE_URL", "sqlite+aiosqlite:///./chattask.db")
    DATABASE_ECHO = os.getenv("DATABASE_ECHO", "false").lower() in _TRUTHY
    # Create tables on startup (migrations are out of scope)
    DATABASE_CREATE_TABLES = os.getenv("DATABASE_CREATE_TABLES", "true").lower() in _TRUTHY
    # Insert missing permissions, system roles and task statuses on startup
    SEED_REFERENCE_DATA = os.getenv("SEED_REFERENCE_DATA", "true").lower() in _TRUTHY

    # External services
    USER_SERVICE_URL: str = os.getenv("USER_SERVICE_URL", "http://localhost:8081")
    FILE_SERVICE_URL: str = os.getenv("FILE_SERVICE_URL", "http://localhost:8082")
    CHAT_SERVICE_URL: str = os.getenv("CHAT_SERVICE_URL", "http://localhost:8080")
    GATEWAY_TIMEOUT_SECONDS = float(os.getenv("GATEWAY_TIMEOUT_SECONDS", "5"))

    # Kafka notifications
    KAFKA_ENABLED = os.getenv("KAFKA_ENABLED", "false").lower() in _TRUTHY
    KAFKA_BROKERS: str = os.getenv("KAFKA_BROKERS", "localhost:9092")
    KAFKA_NOTIFICATIONS_TOPIC: str = os.getenv("KAFKA_NOTIFICATIONS_TOPIC", "notifications")
    KAFKA_CLIENT_ID: str = os.getenv("KAFKA_CLIENT_ID", "chattask")

    # Pagination
    MESSAGES_DEFAULT_LIMIT = int(os.getenv("MESSAGES_DEFAULT_LIMIT", "20"))
    SEARCH_MAX_LIMIT = int(os.getenv("SEARCH_MAX_LIMIT", "50"))
    TASKS_DEFAULT_LIMIT = int(os.getenv("TASKS_DEFAULT_LIMIT", "20"))


class DevelopmentConfig(Config):
    """Development configuration"""

    DEBUG = True


class TestingConfig(Config):
    """Testing configuration"""

    TESTING = True
    DATABASE_URL = "sqlite+aiosqlite:///:memory:"
    KAFKA_ENABLED = False


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
