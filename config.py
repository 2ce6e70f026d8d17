import os
import yaml

ROOT_PATH = os.path.dirname(__file__)
CONFIG_FILE_PATH = os.path.join(ROOT_PATH, "env.yaml")

if os.path.exists(CONFIG_FILE_PATH):
    with open(CONFIG_FILE_PATH, "r") as r_file:
        data = yaml.safe_load(r_file) or dict()
else:
    data = dict()


class ApplicationConfig:
    DB_URI = data.get("DB_URI", "sqlite+aiosqlite:///./data_brain.db")
    API_PREFIX = data.get("API_PREFIX", "/api/v1")
    API_PORT = data.get("API_PORT", 8000)
    API_HOST = data.get("API_HOST", "0.0.0.0")
    CORS_ORIGINS = data.get("CORS_ORIGINS", [])
    CORS_ALLOW_CREDENTIALS = data.get("CORS_ALLOW_CREDENTIALS", True)
    LOG_LEVEL = data.get("LOG_LEVEL", "INFO")
    ENVIRONMENT = data.get("ENVIRONMENT", "development")
    ENABLE_LOGGING_MIDDLEWARE = bool(data.get("ENABLE_LOGGING_MIDDLEWARE", 1))
    AUTO_CREATE_SCHEMA = bool(data.get("AUTO_CREATE_SCHEMA", 1))
    ADMIN_API_KEY = data.get("ADMIN_API_KEY", "")
    API_KEY_HASH_SALT = data.get("API_KEY_HASH_SALT", "")
    API_KEY_PREFIX_LIVE = data.get("API_KEY_PREFIX_LIVE", "sk_live_")
    API_KEY_PREFIX_TEST = data.get("API_KEY_PREFIX_TEST", "sk_test_")
    DEFAULT_QUOTA_ROWS = data.get("DEFAULT_QUOTA_ROWS", 100_000)
    DEFAULT_MAX_TABLES = data.get("DEFAULT_MAX_TABLES", 100)
    BATCH_MAX_OPERATIONS = data.get("BATCH_MAX_OPERATIONS", 50)
