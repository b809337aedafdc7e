
import os
from typing import List

from dotenv import load_dotenv

load_dotenv()

DB_USER = os.getenv("DB_USER", "app")
DB_PASS = os.getenv("DB_PASS", "apppw")
DB_HOST = os.getenv("DB_HOST", "localhost")
DB_PORT = os.getenv("DB_PORT", "3306")
DB_NAME = os.getenv("DB_NAME", "canteen")

JWT_SECRET = os.getenv("JWT_SECRET", "super-secret-key-change-me")
JWT_ALG = "HS256"
JWT_EXPIRE_DAYS = int(os.getenv("JWT_EXPIRE_DAYS", "7"))

ADMIN_EMAIL = os.getenv("ADMIN_EMAIL", "admin@canteen.com")
ADMIN_PASSWORD = os.getenv("ADMIN_PASSWORD", "admin123")
ADMIN_NAME = os.getenv("ADMIN_NAME", "Admin")

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")


def database_url() -> str:
    url = os.getenv("DATABASE_URL")
    if url:
        return url
    return (
        f"mysql+pymysql://{DB_USER}:{DB_PASS}@{DB_HOST}:{DB_PORT}/{DB_NAME}"
        "?charset=utf8mb4"
    )


def seed_demo_data() -> bool:
    return os.getenv("SEED_DEMO_DATA", "true").strip().lower() in {"1", "true", "yes"}


def allow_origins() -> List[str]:
    origins_env = os.getenv("FRONT_ORIGINS", "*")
    if origins_env and origins_env != "*":
        return [o.strip() for o in origins_env.split(",") if o.strip()]
    return ["*"]
