"""
Database models for the friend relation.
"""
from enum import Enum
from tortoise import fields

from .base import DocModel

class RequestStatus(str, Enum):
    PENDING = "pending"
    ACCEPTED = "accepted"
    REJECTED = "rejected"

class FriendRequest(DocModel):
    """Friend request from one user to another (Friending)."""
    from_user = fields.UUIDField(index=True)
    to_user = fields.UUIDField(index=True)
    status = fields.CharEnumField(RequestStatus, max_length=16, default=RequestStatus.PENDING)

    doc_aliases = {"from_user": "from", "to_user": "to"}

    class Meta:
        table = "friend_requests"

class Friend(DocModel):
    """
    Friendship between two users (Friending).
    Stored once per pair with user1 < user2 so the unique constraint covers both orders.
    """
    user1 = fields.UUIDField(index=True)
    user2 = fields.UUIDField(index=True)

    class Meta:
        table = "friends"
        unique_together = (("user1", "user2"),)
