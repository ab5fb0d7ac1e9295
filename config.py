from dotenv import load_dotenv
import os

load_dotenv()


def _env_bool(name: str, default: bool) -> bool:
    val = os.getenv(name)
    if val is None:
        return default
    return val.strip().lower() in ("1", "true", "yes", "on")


def engine_options(uri):
    # Pool settings only apply to server databases; SQLite uses a single-file/static pool
    if not uri or not uri.startswith("postgres"):
        return {}
    return {
        'pool_pre_ping': True,  # Test connection sebelum digunakan
        'pool_recycle': 300,
        'pool_size': 5,
        'max_overflow': 10,
        'pool_timeout': 30,
        'connect_args': {
            'connect_timeout': 10,
        }
    }


class Config:
    SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret")
    SQLALCHEMY_DATABASE_URI = os.getenv("SQLALCHEMY_DATABASE_URI", "sqlite:///nutriapp.db")
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    SQLALCHEMY_ENGINE_OPTIONS = engine_options(SQLALCHEMY_DATABASE_URI)

    # "sqlalchemy" talks to the relational database directly, "supabase" to hosted tables
    STORAGE_BACKEND = os.getenv("STORAGE_BACKEND", "sqlalchemy")
    SUPABASE_URL = os.getenv("SUPABASE_URL")
    SUPABASE_KEY = os.getenv("SUPABASE_KEY")

    MULTI_TENANT = _env_bool("MULTI_TENANT", True)
    # "application" computes BMI before writing, "database" reads back the trigger value
    BMI_SOURCE = os.getenv("BMI_SOURCE", "application")

    CORS_ORIGIN = os.getenv("CORS_ORIGIN", "http://localhost:4200")
    PORT = int(os.getenv("PORT", "4000"))
    JWT_EXPIRES_HOURS = int(os.getenv("JWT_EXPIRES_HOURS", "12"))
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
