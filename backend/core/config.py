import os
from pathlib import Path

from dotenv import load_dotenv


load_dotenv()

BASE_DIR = Path(__file__).resolve().parents[2]


def _get_bool(value: str | None, default: bool = False) -> bool:
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}

APP_ENV = os.getenv("APP_ENV", "development")

DATA_DIR = Path(os.getenv("DATA_DIR", str(BASE_DIR / "data" / "input")))
EXPORT_DIR = Path(os.getenv("EXPORT_DIR", str(BASE_DIR / "data" / "exports")))
ADMIN_FILE_NAME = os.getenv("ADMIN_FILE_NAME", "Admin.json")
PROFESSORS_FILE_NAME = os.getenv("PROFESSORS_FILE_NAME", "professors.json")

JWT_SECRET_KEY = os.getenv("JWT_SECRET_KEY", "change-me")
JWT_ALGORITHM = os.getenv("JWT_ALGORITHM", "HS256")
JWT_EXPIRES_MINUTES = int(os.getenv("JWT_EXPIRES_MINUTES", "1440"))

TOKEN_COOKIE_NAME = os.getenv("TOKEN_COOKIE_NAME", "token")
COOKIE_SECURE = _get_bool(os.getenv("COOKIE_SECURE"), default=True)
COOKIE_SAMESITE = os.getenv("COOKIE_SAMESITE", "none")
# Browser scripts may read the cookie during local development only.
COOKIE_HTTPONLY = _get_bool(os.getenv("COOKIE_HTTPONLY"), default=APP_ENV.lower() != "development")

FRONTEND_URL = os.getenv("FRONTEND_URL", "http://localhost:5173")

def validate_runtime_config() -> None:
    if APP_ENV.lower() == "production" and JWT_SECRET_KEY == "change-me":
        raise RuntimeError("JWT_SECRET_KEY must be set in production.")
