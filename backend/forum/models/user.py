"""
Database model for users.
Holds login credentials only; profile data lives in other concepts.
"""
from tortoise import fields

from .base import DocModel

class User(DocModel):
    """
    User database model (Authenticating).

    Security:
    - Password is stored as an Argon2 hash (never store plain text passwords)
    - Username must be unique across all users (enforced by the database)
    """
    username = fields.CharField(max_length=256, unique=True, index=True)  # Login name
    password_hash = fields.CharField(max_length=255)  # Argon2 hash

    doc_hidden = ("password_hash",)

    class Meta:
        table = "users"
