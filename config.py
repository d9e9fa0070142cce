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
    DB_URI = data.get("DB_URI", "sqlite+aiosqlite:///./movie_reviews.db")
    AUTO_CREATE_TABLES = bool(data.get("AUTO_CREATE_TABLES", True))
    API_PREFIX = data.get("API_PREFIX", "/api")
    API_PORT = data.get("API_PORT", 5000)
    API_HOST = data.get("API_HOST", "0.0.0.0")
    CORS_ORIGINS = data.get("CORS_ORIGINS", ["http://localhost:3000"])
    CORS_ALLOW_CREDENTIALS = data.get("CORS_ALLOW_CREDENTIALS", True)
    LOG_LEVEL = data.get("LOG_LEVEL", "INFO")
    ENVIRONMENT = data.get("ENVIRONMENT", "development")

    JWT_SECRET = data.get("JWT_SECRET", "dev-secret-key-change-in-production")
    JWT_EXPIRES_DAYS = int(data.get("JWT_EXPIRES_DAYS", 7))
    RESET_TOKEN_TTL_MINUTES = int(data.get("RESET_TOKEN_TTL_MINUTES", 60))
    TOP_RATED_MIN_RATINGS = int(data.get("TOP_RATED_MIN_RATINGS", 5))

    MAIL_BACKEND = data.get("MAIL_BACKEND", "console")
    SMTP_HOST = data.get("SMTP_HOST", "smtp.gmail.com")
    SMTP_PORT = int(data.get("SMTP_PORT", 587))
    SMTP_USE_TLS = bool(data.get("SMTP_USE_TLS", True))
    EMAIL_USER = data.get("EMAIL_USER", "")
    EMAIL_PASS = data.get("EMAIL_PASS", "")
    MAIL_FROM_NAME = data.get("MAIL_FROM_NAME", "Movie Reviewer App")
    CLIENT_URL = data.get("CLIENT_URL", "http://localhost:3000")

    # "<max requests>/<window seconds>" per client address; 0 requests disables a limit
    RATE_LIMIT_ENABLED = bool(data.get("RATE_LIMIT_ENABLED", True))
    LOGIN_RATE_LIMIT = data.get("LOGIN_RATE_LIMIT", "10/900")
    REGISTER_RATE_LIMIT = data.get("REGISTER_RATE_LIMIT", "20/900")
    PASSWORD_RESET_RATE_LIMIT = data.get("PASSWORD_RESET_RATE_LIMIT", "5/900")
