"""
Voting concept: per-user up/down votes on responses.
"""
from uuid import UUID

from tortoise.exceptions import IntegrityError

from forum.core.errors import ConflictError, NotFoundError
from forum.models.vote import Vote

UP = 1
DOWN = -1


class VotingConcept:
    """Owns the `votes` table; (user, response) is unique."""

    async def upvote(self, user: UUID, response: UUID) -> dict:
        await self._cast(user, response, UP)
        return {"msg": "Upvoted!"}

    async def downvote(self, user: UUID, response: UUID) -> dict:
        await self._cast(user, response, DOWN)
        return {"msg": "Downvoted!"}

    async def unvote(self, user: UUID, response: UUID) -> dict:
        deleted = await Vote.filter(user=user, response=response).delete()
        if not deleted:
            raise NotFoundError("You have not voted on response {0}!", response)
        return {"msg": "Vote removed!"}

    async def get_vote(self, user: UUID, response: UUID) -> int:
        """+1, -1, or 0 when the user has not voted."""
        vote = await Vote.get_or_none(user=user, response=response)
        return vote.value if vote else 0

    async def get_count(self, response: UUID) -> int:
        up, down = (await self.get_tallies([response]))[0]
        return up - down

    async def get_tallies(self, responses: list[UUID]) -> list[tuple[int, int]]:
        """(upvotes, downvotes) per response, positionally."""
        tallies = {r: [0, 0] for r in responses}
        for vote in await Vote.filter(response__in=responses):
            tallies[vote.response][0 if vote.value == UP else 1] += 1
        return [tuple(tallies[r]) for r in responses]

    async def delete_votes(self, response: UUID) -> None:
        await Vote.filter(response=response).delete()

    async def _cast(self, user: UUID, response: UUID, value: int) -> None:
        vote = await Vote.get_or_none(user=user, response=response)
        if vote is None:
            try:
                await Vote.create(user=user, response=response, value=value)
            except IntegrityError:
                raise ConflictError("A vote on response {0} is already being recorded!", response)
            return
        if vote.value == value:
            raise ConflictError("You have already {0} response {1}!", "upvoted" if value == UP else "downvoted", response)
        # Switching sides replaces the previous vote
        vote.value = value
        await vote.save()
