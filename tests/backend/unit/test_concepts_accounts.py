"""
Unit tests for the Authenticating and Sessioning concepts.
"""
import uuid

import pytest

from forum.concepts.authenticating import DELETED_USER, AuthenticatingConcept
from forum.concepts.sessioning import SessionDoc, SessioningConcept
from forum.core.errors import (
    BadValuesError,
    ConflictError,
    NotAllowedError,
    NotFoundError,
    UnauthenticatedError,
)
from forum.models import User


pytestmark = pytest.mark.asyncio

authing = AuthenticatingConcept()
sessioning = SessioningConcept()


class TestAuthenticating:

    async def test_create_hashes_password(self, db):
        created = await authing.create("alice", "secret")
        assert created["msg"] == "User created successfully!"
        stored = await User.get(username="alice")
        assert stored.password_hash != "secret"
        assert "passwordHash" not in created["user"].to_doc()

    async def test_create_rejects_empty_fields(self, db):
        with pytest.raises(BadValuesError):
            await authing.create("", "secret")
        with pytest.raises(BadValuesError):
            await authing.create("alice", "")

    async def test_create_rejects_duplicate_username(self, db):
        await authing.create("alice", "secret")
        with pytest.raises(ConflictError) as exc:
            await authing.create("alice", "other")
        assert "alice" in exc.value.message

    async def test_authenticate(self, db):
        await authing.create("alice", "secret")
        user = await authing.authenticate("alice", "secret")
        assert user.username == "alice"
        with pytest.raises(UnauthenticatedError):
            await authing.authenticate("alice", "wrong")
        with pytest.raises(UnauthenticatedError):
            await authing.authenticate("nobody", "secret")

    async def test_update_username(self, db):
        alice = (await authing.create("alice", "secret"))["user"]
        await authing.create("bob", "secret")
        await authing.update_username(alice.id, "alicia")
        assert (await authing.get_user_by_id(alice.id)).username == "alicia"
        with pytest.raises(ConflictError):
            await authing.update_username(alice.id, "bob")
        with pytest.raises(BadValuesError):
            await authing.update_username(alice.id, "")

    async def test_update_password_requires_current_password(self, db):
        alice = (await authing.create("alice", "secret"))["user"]
        with pytest.raises(NotAllowedError):
            await authing.update_password(alice.id, "wrong", "new-secret")
        await authing.update_password(alice.id, "secret", "new-secret")
        await authing.authenticate("alice", "new-secret")

    async def test_ids_to_usernames_marks_deleted_users(self, db):
        alice = (await authing.create("alice", "secret"))["user"]
        bob = (await authing.create("bob", "secret"))["user"]
        await authing.delete(bob.id)
        names = await authing.ids_to_usernames([bob.id, alice.id, alice.id])
        assert names == [DELETED_USER, "alice", "alice"]

    async def test_lookups(self, db):
        await authing.create("alice", "secret")
        await authing.create("bob", "secret")
        assert [u.username for u in await authing.get_users()] == ["alice", "bob"]
        assert [u.username for u in await authing.get_users("bob")] == ["bob"]
        with pytest.raises(NotFoundError):
            await authing.get_user_by_username("carol")
        with pytest.raises(NotFoundError):
            await authing.get_user_by_id(uuid.uuid4())


class TestSessioning:

    async def test_start_and_reload(self, db):
        user = uuid.uuid4()
        session = SessionDoc()
        await sessioning.start(session, user)
        assert sessioning.get_user(session) == user
        reloaded = await sessioning.load(session.token)
        assert reloaded.user == user

    async def test_logged_out_session(self, db):
        session = SessionDoc()
        with pytest.raises(UnauthenticatedError):
            sessioning.get_user(session)
        sessioning.is_logged_out(session)

    async def test_start_requires_logged_out(self, db):
        session = SessionDoc()
        await sessioning.start(session, uuid.uuid4())
        with pytest.raises(NotAllowedError):
            sessioning.is_logged_out(session)
        with pytest.raises(NotAllowedError):
            await sessioning.start(session, uuid.uuid4())

    async def test_end_invalidates_token(self, db):
        session = SessionDoc()
        await sessioning.start(session, uuid.uuid4())
        token = session.token
        await sessioning.end(session)
        assert session.user is None
        assert (await sessioning.load(token)).user is None
        # Ending twice is harmless
        await sessioning.end(session)

    async def test_end_all_logs_out_every_session(self, db):
        user = uuid.uuid4()
        first, second, other = SessionDoc(), SessionDoc(), SessionDoc()
        await sessioning.start(first, user)
        await sessioning.start(second, user)
        await sessioning.start(other, uuid.uuid4())
        await sessioning.end_all(user)
        assert (await sessioning.load(first.token)).user is None
        assert (await sessioning.load(second.token)).user is None
        assert (await sessioning.load(other.token)).user is not None

    async def test_bad_tokens_load_as_logged_out(self, db):
        assert (await sessioning.load(None)).user is None
        assert (await sessioning.load("not-a-token")).user is None
