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
    DB_URI = data.get("DB_URI", "sqlite+aiosqlite:///./invoices.db")
    DB_POOL_SIZE = data.get("DB_POOL_SIZE", 10)
    DB_POOL_TIMEOUT = data.get("DB_POOL_TIMEOUT", 30)  # Seconds a request waits for a free connection
    DB_ECHO = bool(data.get("DB_ECHO", False))
    AUTO_CREATE_TABLES = bool(data.get("AUTO_CREATE_TABLES", True))
    API_PREFIX = data.get("API_PREFIX", "/api")
    API_PORT = data.get("API_PORT", 5000)
    API_HOST = data.get("API_HOST", "0.0.0.0")
    API_RELOAD = data.get("API_RELOAD", False)
    CORS_ORIGINS = data.get("CORS_ORIGINS", ["*"])
    CORS_ALLOW_CREDENTIALS = data.get("CORS_ALLOW_CREDENTIALS", True)
    LOG_LEVEL = data.get("LOG_LEVEL", "INFO")
    ENABLE_LOGGING_MIDDLEWARE = bool(data.get("ENABLE_LOGGING_MIDDLEWARE", 1))

    # Session tokens
    JWT_SECRET = data.get("JWT_SECRET", os.environ.get("JWT_SECRET", "change-me"))
    JWT_ALGORITHM = data.get("JWT_ALGORITHM", "HS256")
    JWT_EXPIRES_HOURS = data.get("JWT_EXPIRES_HOURS", 24)

    # Credential store
    BCRYPT_ROUNDS = data.get("BCRYPT_ROUNDS", 10)
    ADMIN_EMAIL_DOMAIN = data.get("ADMIN_EMAIL_DOMAIN", "company.com")

    # Presentation client
    API_BASE_URL = data.get("API_BASE_URL", "http://localhost:5000")
    CLIENT_SESSION_FILE = data.get(
        "CLIENT_SESSION_FILE",
        os.path.join(os.path.expanduser("~"), ".invoice_maker", "session.json"),
    )
    CLIENT_TIMEOUT_SECONDS = data.get("CLIENT_TIMEOUT_SECONDS", 10.0)
    DEFAULT_CURRENCY = data.get("DEFAULT_CURRENCY", "LKR")
