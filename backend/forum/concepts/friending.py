"""
Friending concept: friend requests and the friendship relation.
"""
from uuid import UUID

from tortoise.exceptions import IntegrityError
from tortoise.expressions import Q

from forum.core.errors import ConflictError, NotAllowedError, NotFoundError
from forum.models.friend import Friend, FriendRequest, RequestStatus


class FriendRequestAlreadyExistsError(ConflictError):
    def __init__(self, from_user: UUID, to_user: UUID):
        self.from_user = from_user
        self.to_user = to_user
        super().__init__("Friend request between {0} and {1} already exists!", from_user, to_user)


class FriendRequestNotFoundError(NotFoundError):
    def __init__(self, from_user: UUID, to_user: UUID):
        self.from_user = from_user
        self.to_user = to_user
        super().__init__("Friend request from {0} to {1} does not exist!", from_user, to_user)


class FriendNotFoundError(NotFoundError):
    def __init__(self, user1: UUID, user2: UUID):
        self.user1 = user1
        self.user2 = user2
        super().__init__("Friendship between {0} and {1} does not exist!", user1, user2)


class AlreadyFriendsError(ConflictError):
    def __init__(self, user1: UUID, user2: UUID):
        self.user1 = user1
        self.user2 = user2
        super().__init__("{0} and {1} are already friends!", user1, user2)


def _pair(user1: UUID, user2: UUID) -> tuple[UUID, UUID]:
    return (user1, user2) if str(user1) < str(user2) else (user2, user1)


class FriendingConcept:
    """Owns the `friend_requests` and `friends` tables."""

    async def get_requests(self, user: UUID) -> list[FriendRequest]:
        return await FriendRequest.filter(Q(from_user=user) | Q(to_user=user)).order_by("-created_at")

    async def send_request(self, from_user: UUID, to_user: UUID) -> dict:
        await self._can_send_request(from_user, to_user)
        await FriendRequest.create(from_user=from_user, to_user=to_user)
        return {"msg": "Sent request!"}

    async def accept_request(self, from_user: UUID, to_user: UUID) -> dict:
        request = await self._pending_request(from_user, to_user)
        user1, user2 = _pair(from_user, to_user)
        try:
            await Friend.create(user1=user1, user2=user2)
        except IntegrityError:
            raise AlreadyFriendsError(from_user, to_user)
        request.status = RequestStatus.ACCEPTED
        await request.save()
        return {"msg": "Accepted request!"}

    async def reject_request(self, from_user: UUID, to_user: UUID) -> dict:
        request = await self._pending_request(from_user, to_user)
        request.status = RequestStatus.REJECTED
        await request.save()
        return {"msg": "Rejected request!"}

    async def remove_request(self, from_user: UUID, to_user: UUID) -> dict:
        request = await self._pending_request(from_user, to_user)
        await request.delete()
        return {"msg": "Removed request!"}

    async def remove_friend(self, user: UUID, friend: UUID) -> dict:
        user1, user2 = _pair(user, friend)
        deleted = await Friend.filter(user1=user1, user2=user2).delete()
        if not deleted:
            raise FriendNotFoundError(user, friend)
        return {"msg": "Unfriended!"}

    async def get_friends(self, user: UUID) -> list[UUID]:
        friendships = await Friend.filter(Q(user1=user) | Q(user2=user)).order_by("created_at")
        return [f.user2 if f.user1 == user else f.user1 for f in friendships]

    async def _pending_request(self, from_user: UUID, to_user: UUID) -> FriendRequest:
        request = await FriendRequest.get_or_none(from_user=from_user, to_user=to_user, status=RequestStatus.PENDING)
        if request is None:
            raise FriendRequestNotFoundError(from_user, to_user)
        return request

    async def _can_send_request(self, from_user: UUID, to_user: UUID) -> None:
        if from_user == to_user:
            raise NotAllowedError("Cannot send a friend request to yourself!")
        user1, user2 = _pair(from_user, to_user)
        if await Friend.exists(user1=user1, user2=user2):
            raise AlreadyFriendsError(from_user, to_user)
        pending = FriendRequest.filter(
            Q(from_user=from_user, to_user=to_user) | Q(from_user=to_user, to_user=from_user),
            status=RequestStatus.PENDING,
        )
        if await pending.exists():
            raise FriendRequestAlreadyExistsError(from_user, to_user)
