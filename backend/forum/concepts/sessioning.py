"""
Sessioning concept: binds a client session to a logged-in user.

States: LoggedOut (no record, or a record with no user) and LoggedIn(user).
The client carries a signed token naming a row in the `sessions` table; the
row is the source of truth, so ending a session invalidates its token.
"""
from dataclasses import dataclass
from uuid import UUID

import jwt

from forum.core.errors import NotAllowedError, UnauthenticatedError
from forum.core.security import create_access_token, decode_access_token
from forum.models.session import Session


@dataclass
class SessionDoc:
    id: UUID | None = None  # Session record id
    user: UUID | None = None  # Bound user, None when logged out
    token: str | None = None  # Token issued by `start`, to be handed to the client


class SessioningConcept:
    """Owns the `sessions` table."""

    async def load(self, token: str | None) -> SessionDoc:
        """Rebuild the session for a request; any unusable token yields a logged-out session."""
        if not token:
            return SessionDoc()
        try:
            session_id = UUID(decode_access_token(token)["sub"])
        except (jwt.InvalidTokenError, KeyError, ValueError):
            return SessionDoc()
        record = await Session.get_or_none(id=session_id)
        if record is None or record.user is None:
            return SessionDoc()
        return SessionDoc(id=record.id, user=record.user)

    async def start(self, session: SessionDoc, user: UUID) -> None:
        self.is_logged_out(session)
        record = await Session.create(user=user)
        session.id = record.id
        session.user = user
        session.token = create_access_token(str(record.id))

    async def end(self, session: SessionDoc) -> None:
        if session.id is not None:
            await Session.filter(id=session.id).delete()
        session.id = None
        session.user = None
        session.token = None

    async def end_all(self, user: UUID) -> None:
        """End every session bound to `user`, e.g. when the account is deleted."""
        await Session.filter(user=user).delete()

    def get_user(self, session: SessionDoc) -> UUID:
        if session.user is None:
            raise UnauthenticatedError("Must be logged in!")
        return session.user

    def is_logged_out(self, session: SessionDoc) -> None:
        if session.user is not None:
            raise NotAllowedError("Must be logged out!")
