"""
Authenticating concept: user accounts and credentials.
"""
import logging
from uuid import UUID

from tortoise.exceptions import IntegrityError

from forum.core.errors import BadValuesError, ConflictError, NotAllowedError, NotFoundError, UnauthenticatedError
from forum.core.security import hash_password, verify_password
from forum.models.user import User

logger = logging.getLogger("uvicorn.error")

DELETED_USER = "DELETED_USER"


class AuthenticatingConcept:
    """Owns the `users` table."""

    async def create(self, username: str, password: str) -> dict:
        if not username or not password:
            raise BadValuesError("Username and password must be non-empty!")
        try:
            user = await User.create(username=username, password_hash=hash_password(password))
        except IntegrityError:
            raise ConflictError("User with username {0} already exists!", username)
        logger.info("[auth] created user %s", user.id)
        return {"msg": "User created successfully!", "user": user}

    async def get_user_by_id(self, _id: UUID) -> User:
        user = await User.get_or_none(id=_id)
        if user is None:
            raise NotFoundError("User not found!")
        return user

    async def get_user_by_username(self, username: str) -> User:
        user = await User.get_or_none(username=username)
        if user is None:
            raise NotFoundError("User not found!")
        return user

    async def get_users(self, username: str | None = None) -> list[User]:
        # If username is empty or None, return all users
        qs = User.all() if not username else User.filter(username=username)
        return await qs.order_by("username")

    async def ids_to_usernames(self, ids: list[UUID]) -> list[str]:
        """Resolve ids positionally; ids of deleted users map to DELETED_USER."""
        users = await User.filter(id__in=list(set(ids)))
        id_to_user = {u.id: u for u in users}
        return [id_to_user[i].username if i in id_to_user else DELETED_USER for i in ids]

    async def authenticate(self, username: str, password: str) -> User:
        user = await User.get_or_none(username=username)
        if user is None or not verify_password(password, user.password_hash):
            raise UnauthenticatedError("Username or password is incorrect.")
        return user

    async def update_username(self, _id: UUID, username: str) -> dict:
        if not username:
            raise BadValuesError("Username must be non-empty!")
        user = await self.get_user_by_id(_id)
        user.username = username
        try:
            await user.save()
        except IntegrityError:
            raise ConflictError("User with username {0} already exists!", username)
        return {"msg": "Updated user successfully!"}

    async def update_password(self, _id: UUID, current_password: str, new_password: str) -> dict:
        if not new_password:
            raise BadValuesError("Password must be non-empty!")
        user = await self.get_user_by_id(_id)
        if not verify_password(current_password, user.password_hash):
            raise NotAllowedError("The given current password is wrong!")
        user.password_hash = hash_password(new_password)
        await user.save()
        return {"msg": "Updated password successfully!"}

    async def delete(self, _id: UUID) -> dict:
        await User.filter(id=_id).delete()
        logger.info("[auth] deleted user %s", _id)
        return {"msg": "User deleted!"}
