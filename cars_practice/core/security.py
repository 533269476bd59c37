"""Password hashing (bcrypt) and bearer token signing (HS256 JWT)."""
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone

from jose import JWTError, jwt
from passlib.context import CryptContext

from cars_practice.core.config import get_settings
from cars_practice.core.errors import InvalidOrExpiredToken

pwd_context = CryptContext(
    schemes=["bcrypt"],
    deprecated="auto",
    bcrypt__rounds=get_settings().bcrypt_rounds,
)


@dataclass(frozen=True)
class TokenPayload:
    user_id: int
    email: str


def verify_password(plain: str, hashed: str) -> bool:
    return pwd_context.verify(plain, hashed)


def hash_password(password: str) -> str:
    return pwd_context.hash(password)


def create_access_token(user_id: int, email: str, issued_at: datetime | None = None) -> str:
    """Sign a token for the user, valid for `access_token_expire_minutes` from issue."""
    settings = get_settings()
    issued_at = issued_at or datetime.now(timezone.utc)
    expire = issued_at + timedelta(minutes=settings.access_token_expire_minutes)
    to_encode = {
        "sub": str(user_id),
        "email": email,
        "iat": issued_at,
        "exp": expire,
        "type": "access",
    }
    return jwt.encode(to_encode, settings.secret_key, algorithm=settings.algorithm)


def decode_access_token(token: str) -> TokenPayload:
    """Verify signature and expiry; raise InvalidOrExpiredToken otherwise."""
    settings = get_settings()
    try:
        claims = jwt.decode(token, settings.secret_key, algorithms=[settings.algorithm])
    except JWTError as exc:  # includes ExpiredSignatureError
        raise InvalidOrExpiredToken() from exc

    try:
        return TokenPayload(user_id=int(claims["sub"]), email=str(claims["email"]))
    except (KeyError, TypeError, ValueError) as exc:
        raise InvalidOrExpiredToken() from exc
