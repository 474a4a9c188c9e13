# forum/core/security.py
"""
Password hashes for Authenticating and signed tokens for Sessioning.

A token only carries the id of a row in the `sessions` table; the user bound
to it is read from that row on every request.
"""
import os
import datetime as dt
import jwt  # PyJWT
from passlib.context import CryptContext
from dotenv import load_dotenv
from pathlib import Path

ENV_PATH = Path(__file__).resolve().parents[3] / ".env"
load_dotenv(dotenv_path=ENV_PATH)

pwd_context = CryptContext(schemes=["argon2"], deprecated="auto")

JWT_SECRET = os.getenv("JWT_SECRET", "dev-secret")  # Override outside development
ACCESS_TOKEN_EXPIRE_MINUTES = int(os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", "1440"))
JWT_ALG = "HS256"

def hash_password(plain: str) -> str:
    return pwd_context.hash(plain)

def verify_password(plain: str, hashed: str) -> bool:
    return pwd_context.verify(plain, hashed)

def create_access_token(session_id: str) -> str:
    """Sign {sub: session id, iat, exp}; expiry is ACCESS_TOKEN_EXPIRE_MINUTES after issue."""
    now = dt.datetime.now(dt.timezone.utc)
    payload = {
        "sub": session_id,
        "iat": now,
        "exp": now + dt.timedelta(minutes=ACCESS_TOKEN_EXPIRE_MINUTES),
    }
    return jwt.encode(payload, JWT_SECRET, algorithm=JWT_ALG)

def decode_access_token(token: str) -> dict:
    """
    Verify signature and expiry and return the payload.

    Raises jwt.InvalidTokenError (or a subclass such as ExpiredSignatureError);
    Sessioning.load treats any of them as a logged-out session.
    """
    return jwt.decode(token, JWT_SECRET, algorithms=[JWT_ALG])
