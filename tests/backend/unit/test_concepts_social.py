"""
Unit tests for the Sideing, Labeling, Friending and Voting concepts.
"""
import asyncio
import uuid

import pytest

from forum.concepts.friending import (
    AlreadyFriendsError,
    FriendingConcept,
    FriendNotFoundError,
    FriendRequestAlreadyExistsError,
    FriendRequestNotFoundError,
)
from forum.concepts.labeling import LabelAuthorNotMatchError, LabelingConcept
from forum.concepts.sideing import NoSideFoundForUserError, SideingConcept, UserAlreadyHasTopicSideError
from forum.concepts.voting import VotingConcept
from forum.core.errors import BadValuesError, ConflictError, NotAllowedError, NotFoundError
from forum.models import Degree, RequestStatus, TargetKind


pytestmark = pytest.mark.asyncio

sideing = SideingConcept()
topic_labeling = LabelingConcept(TargetKind.TOPIC)
response_labeling = LabelingConcept(TargetKind.RESPONSE)
friending = FriendingConcept()
voting = VotingConcept()


class TestSideing:

    async def test_one_side_per_user_and_topic(self, db):
        user, issue = uuid.uuid4(), uuid.uuid4()
        created = await sideing.create(user, issue, "Strongly Agree")
        assert created["side"].degree == Degree.STRONGLY_AGREE
        with pytest.raises(UserAlreadyHasTopicSideError):
            await sideing.create(user, issue, "Neutral")
        # Another topic is fine
        await sideing.create(user, uuid.uuid4(), "Neutral")

    async def test_invalid_degree_is_not_found(self, db):
        with pytest.raises(NotFoundError) as exc:
            await sideing.create(uuid.uuid4(), uuid.uuid4(), "Kinda")
        assert "Kinda" in exc.value.message

    async def test_update(self, db):
        user, issue = uuid.uuid4(), uuid.uuid4()
        await sideing.create(user, issue, "Neutral")
        await sideing.update(user, issue, "Disagree")
        [side] = await sideing.get_side_by_user_and_issue(user, issue)
        assert side.degree == Degree.DISAGREE
        # Missing newside leaves the side unchanged
        await sideing.update(user, issue, None)
        [side] = await sideing.get_side_by_user_and_issue(user, issue)
        assert side.degree == Degree.DISAGREE

    async def test_update_without_side(self, db):
        with pytest.raises(NoSideFoundForUserError):
            await sideing.update(uuid.uuid4(), uuid.uuid4(), "Agree")

    async def test_sides_by_issue_and_degree(self, db):
        issue = uuid.uuid4()
        agreeing = uuid.uuid4()
        await sideing.create(agreeing, issue, "Agree")
        await sideing.create(uuid.uuid4(), issue, "Disagree")
        found = await sideing.get_sides_by_issue_and_degree(issue, "Agree")
        assert [s.user for s in found] == [agreeing]

    async def test_assert_user_has_side(self, db):
        user, issue = uuid.uuid4(), uuid.uuid4()
        with pytest.raises(NoSideFoundForUserError):
            await sideing.assert_user_has_side(user, issue)
        await sideing.create(user, issue, "Undecided")
        await sideing.assert_user_has_side(user, issue)


class TestLabeling:

    async def test_add_and_remove(self, db):
        item = uuid.uuid4()
        await topic_labeling.create(uuid.uuid4(), "science")
        await topic_labeling.add_label_to_item("science", item)
        assert [lbl.title for lbl in await topic_labeling.get_labels_by_item(item)] == ["science"]
        with pytest.raises(ConflictError):
            await topic_labeling.add_label_to_item("science", item)
        await topic_labeling.remove_label_from_item("science", item)
        assert await topic_labeling.get_labels_by_item(item) == []
        with pytest.raises(NotFoundError):
            await topic_labeling.remove_label_from_item("science", item)

    async def test_concurrent_attaches_keep_every_item(self, db):
        await topic_labeling.create(uuid.uuid4(), "science")
        items = [uuid.uuid4() for _ in range(5)]
        await asyncio.gather(*(topic_labeling.add_label_to_item("science", item) for item in items))
        label = await topic_labeling.get_label_by_title("science")
        assert sorted(label.items) == sorted(str(item) for item in items)

    async def test_attach_to_missing_label(self, db):
        with pytest.raises(NotFoundError):
            await topic_labeling.add_label_to_item("nope", uuid.uuid4())

    async def test_titles_unique_per_kind(self, db):
        await topic_labeling.create(uuid.uuid4(), "science")
        with pytest.raises(ConflictError):
            await topic_labeling.create(uuid.uuid4(), "science")
        await response_labeling.create(uuid.uuid4(), "science")
        with pytest.raises(BadValuesError):
            await response_labeling.create(uuid.uuid4(), "")

    async def test_kinds_do_not_see_each_other(self, db):
        await topic_labeling.create(uuid.uuid4(), "science")
        with pytest.raises(NotFoundError):
            await response_labeling.get_label_by_title("science")

    async def test_assert_author_is_user(self, db):
        author = uuid.uuid4()
        await topic_labeling.create(author, "science")
        await topic_labeling.assert_author_is_user("science", author)
        with pytest.raises(LabelAuthorNotMatchError):
            await topic_labeling.assert_author_is_user("science", uuid.uuid4())


class TestFriending:

    async def test_accept_makes_friends_both_ways(self, db):
        alice, bob = uuid.uuid4(), uuid.uuid4()
        await friending.send_request(alice, bob)
        await friending.accept_request(alice, bob)
        assert await friending.get_friends(alice) == [bob]
        assert await friending.get_friends(bob) == [alice]
        [request] = await friending.get_requests(bob)
        assert request.status == RequestStatus.ACCEPTED

    async def test_cannot_befriend_self(self, db):
        alice = uuid.uuid4()
        with pytest.raises(NotAllowedError):
            await friending.send_request(alice, alice)

    async def test_duplicate_request_either_direction(self, db):
        alice, bob = uuid.uuid4(), uuid.uuid4()
        await friending.send_request(alice, bob)
        with pytest.raises(FriendRequestAlreadyExistsError):
            await friending.send_request(alice, bob)
        with pytest.raises(FriendRequestAlreadyExistsError):
            await friending.send_request(bob, alice)

    async def test_request_to_existing_friend(self, db):
        alice, bob = uuid.uuid4(), uuid.uuid4()
        await friending.send_request(alice, bob)
        await friending.accept_request(alice, bob)
        with pytest.raises(AlreadyFriendsError):
            await friending.send_request(bob, alice)

    async def test_reject_and_remove_request(self, db):
        alice, bob = uuid.uuid4(), uuid.uuid4()
        await friending.send_request(alice, bob)
        await friending.reject_request(alice, bob)
        assert await friending.get_friends(bob) == []
        with pytest.raises(FriendRequestNotFoundError):
            await friending.accept_request(alice, bob)
        # A rejected request does not block a new one
        await friending.send_request(alice, bob)
        await friending.remove_request(alice, bob)
        with pytest.raises(FriendRequestNotFoundError):
            await friending.remove_request(alice, bob)

    async def test_remove_friend(self, db):
        alice, bob = uuid.uuid4(), uuid.uuid4()
        await friending.send_request(alice, bob)
        await friending.accept_request(alice, bob)
        await friending.remove_friend(bob, alice)
        assert await friending.get_friends(alice) == []
        with pytest.raises(FriendNotFoundError):
            await friending.remove_friend(alice, bob)


class TestVoting:

    async def test_votes_and_count(self, db):
        response = uuid.uuid4()
        await voting.upvote(uuid.uuid4(), response)
        await voting.upvote(uuid.uuid4(), response)
        await voting.downvote(uuid.uuid4(), response)
        assert await voting.get_count(response) == 1
        assert await voting.get_tallies([response, uuid.uuid4()]) == [(2, 1), (0, 0)]

    async def test_switching_replaces_vote(self, db):
        user, response = uuid.uuid4(), uuid.uuid4()
        await voting.upvote(user, response)
        await voting.downvote(user, response)
        assert await voting.get_vote(user, response) == -1
        assert await voting.get_count(response) == -1

    async def test_repeat_vote_conflicts(self, db):
        user, response = uuid.uuid4(), uuid.uuid4()
        await voting.upvote(user, response)
        with pytest.raises(ConflictError):
            await voting.upvote(user, response)

    async def test_unvote(self, db):
        user, response = uuid.uuid4(), uuid.uuid4()
        with pytest.raises(NotFoundError):
            await voting.unvote(user, response)
        await voting.downvote(user, response)
        await voting.unvote(user, response)
        assert await voting.get_vote(user, response) == 0

    async def test_delete_votes(self, db):
        response = uuid.uuid4()
        await voting.upvote(uuid.uuid4(), response)
        await voting.delete_votes(response)
        assert await voting.get_count(response) == 0
