from dotenv import load_dotenv
import os

load_dotenv()

DEFAULT_DATABASE_URI = "sqlite:///bebe_care.db"


def _engine_options(uri):
    if not uri.startswith("postgresql"):
        return {}

    # Pool settings for PostgreSQL; idle connections are dropped by hosted servers
    return {
        'pool_pre_ping': True,  # ping before checkout
        'pool_recycle': 300,    # recycle every 5 minutes
        'pool_size': 5,
        'max_overflow': 10,
        'pool_timeout': 30,
        'connect_args': {
            'sslmode': os.getenv("DATABASE_SSLMODE", "require"),
            'connect_timeout': 10,
        }
    }


class Config:
    SECRET_KEY = os.getenv("SECRET_KEY")
    SQLALCHEMY_DATABASE_URI = os.getenv("SQLALCHEMY_DATABASE_URI", DEFAULT_DATABASE_URI)
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    SQLALCHEMY_ENGINE_OPTIONS = _engine_options(SQLALCHEMY_DATABASE_URI)

    CORS_ORIGINS = os.getenv("CORS_ORIGINS", "*")
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
    PORT = int(os.getenv("PORT", "3001"))
