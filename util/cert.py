from enum import Enum
import datetime
import bcrypt
import jwt
from fastapi.concurrency import run_in_threadpool

import settings


class TokenStatus(str, Enum):
    valid = "valid"
    invalid = "invalid"
    malformed = "malformed"


def hash_password(password: str) -> str:
    hashed = bcrypt.hashpw(
        password.encode("utf-8"), bcrypt.gensalt(rounds=settings.BCRYPT_ROUNDS)
    )
    return hashed.decode("utf-8")


def check_password(password: str, hashed: str) -> bool:
    try:
        return bcrypt.checkpw(password.encode("utf-8"), hashed.encode("utf-8"))
    except ValueError:
        # Stored value is not a bcrypt hash
        return False


async def hash_password_async(password: str) -> str:
    return await run_in_threadpool(hash_password, password)


async def check_password_async(password: str, hashed: str) -> bool:
    return await run_in_threadpool(check_password, password, hashed)


def jwt_encode(user_id: str, email: str, secret: str | None = None) -> str:
    now = datetime.datetime.now(datetime.timezone.utc)
    payload = {
        "user_id": user_id,
        "email": email,
        "iat": now,
        "exp": now + datetime.timedelta(days=settings.TOKEN_EXPIRES_DAYS),
    }
    return jwt.encode(
        payload, secret or settings.TOKEN_SECRET, algorithm=settings.JWT_ALGORITHM
    )


def jwt_decode(token: str, secret: str | None = None):
    """
    Verify a token and return (status, payload or failure detail)
    """
    try:
        payload = jwt.decode(
            token, secret or settings.TOKEN_SECRET, algorithms=[settings.JWT_ALGORITHM]
        )
    except jwt.ExpiredSignatureError:
        return TokenStatus.invalid, "jwt expired"
    except jwt.InvalidSignatureError:
        return TokenStatus.invalid, "invalid signature"
    except jwt.DecodeError:
        return TokenStatus.malformed, "jwt malformed"
    except jwt.InvalidTokenError as exc:
        return TokenStatus.invalid, str(exc)
    return TokenStatus.valid, payload
