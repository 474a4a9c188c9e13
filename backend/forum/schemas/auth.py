"""
Pydantic schemas for session and user endpoints.
"""
from pydantic import BaseModel

__all__ = ["Credentials", "UsernameIn", "PasswordChangeIn"]

class Credentials(BaseModel):
    """
    Request model for registration and login.
    Empty strings pass schema validation and are rejected by the Authenticating concept.
    """
    username: str = ""  # User login name
    password: str = ""  # Plain text password (hashed server-side)

class UsernameIn(BaseModel):
    username: str = ""  # New username

class PasswordChangeIn(BaseModel):
    """Request model for changing the password of the logged-in user."""
    currentPassword: str  # Must match the stored password
    newPassword: str  # Will be hashed before storage
