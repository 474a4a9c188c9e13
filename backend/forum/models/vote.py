from tortoise import fields

from .base import DocModel

class Vote(DocModel):
    """
    A user's vote on a response (Voting).
    value is +1 (up) or -1 (down); no row means the user has not voted.
    """
    user = fields.UUIDField(index=True)
    response = fields.UUIDField(index=True)
    value = fields.SmallIntField()

    class Meta:
        table = "votes"
        unique_together = (("user", "response"),)
