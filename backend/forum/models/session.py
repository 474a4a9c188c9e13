from tortoise import fields

from .base import DocModel

class Session(DocModel):
    """
    Server-side login session (Sessioning).
    A session with no bound user is logged out; rows are deleted on logout.
    """
    user = fields.UUIDField(null=True, index=True)  # Bound user id

    class Meta:
        table = "sessions"
