import os

from dotenv import load_dotenv

load_dotenv()

APP_ENV = os.getenv("APP_ENV", "development")

# Database parameters
MONGODB_URI = os.getenv("MONGODB_URI", "mongodb://localhost:27017")
MONGODB_DB = os.getenv("MONGODB_DB", "fake_school")

# Token parameters
TOKEN_SECRET = os.getenv("TOKEN_SECRET", "change-me")
JWT_ALGORITHM = os.getenv("JWT_ALGORITHM", "HS256")
TOKEN_EXPIRES_DAYS = 3
BCRYPT_ROUNDS = int(os.getenv("BCRYPT_ROUNDS", "12"))

# Service parameters
HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "3000"))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")


def validate_runtime_config() -> None:
    if APP_ENV.lower() == "production" and TOKEN_SECRET == "change-me":
        raise RuntimeError("TOKEN_SECRET must be set in production.")
