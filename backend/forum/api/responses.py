"""
Read-side projections for the frontend.

This module is the only place allowed to depend on every concept: it turns
concept documents into client-friendly dicts by resolving embedded ids (author
ids to usernames, target ids to titles) through the owning concepts' batch
resolvers. It never mutates any entity.

It also registers the error formatters that humanise errors carrying raw ids,
since a concept such as Topicing cannot look up usernames itself.
"""
from uuid import UUID

from forum.concepts import (
    authing,
    responding_to_response,
    responding_to_topic,
    topicing,
)
from forum.concepts.friending import (
    AlreadyFriendsError,
    FriendNotFoundError,
    FriendRequestAlreadyExistsError,
    FriendRequestNotFoundError,
)
from forum.concepts.labeling import LabelAuthorNotMatchError
from forum.concepts.responding import DELETED_RESPONSE, ResponseAuthorNotMatchError
from forum.concepts.sideing import NoSideFoundForUserError, UserAlreadyHasTopicSideError
from forum.concepts.topicing import TopicAuthorNotMatchError
from forum.api.routes import register_error
from forum.models import FriendRequest, Label, Response, Side, TargetKind, Topic, User


def user(u: User) -> dict:
    return u.to_doc()


def users(us: list[User]) -> list[dict]:
    return [u.to_doc() for u in us]


async def topic(t: Topic | None) -> dict | None:
    """Convert a Topic into a readable format by replacing the author id with a username."""
    if t is None:
        return None
    return (await topics([t]))[0]


async def topics(ts: list[Topic]) -> list[dict]:
    """Same as `topic` for a list, resolving all authors in one query."""
    authors = await authing.ids_to_usernames([t.author for t in ts])
    return [{**t.to_doc(), "author": authors[i]} for i, t in enumerate(ts)]


async def response_titles(ids: list[UUID]) -> list[str]:
    """
    Titles of responses of either kind, positionally.

    A reply may target a response to a topic or another reply, so both
    Responding instances are asked and the first real title wins.
    """
    to_topic = await responding_to_topic.ids_to_titles(ids)
    to_response = await responding_to_response.ids_to_titles(ids)
    return [a if a != DELETED_RESPONSE else b for a, b in zip(to_topic, to_response)]


async def respond(r: Response | None) -> dict | None:
    if r is None:
        return None
    return (await responses([r]))[0]


async def responses(rs: list[Response]) -> list[dict]:
    """
    Convert Responses by replacing author ids with usernames and adding the
    title of each target (topic title or response title, depending on kind).
    Targets that were deleted render as DELETED_TOPIC / DELETED_RESPONSE.
    """
    authors = await authing.ids_to_usernames([r.author for r in rs])
    topic_targets = [r.target for r in rs if r.target_kind == TargetKind.TOPIC]
    response_targets = [r.target for r in rs if r.target_kind == TargetKind.RESPONSE]
    topic_titles = iter(await topicing.ids_to_titles(topic_targets))
    reply_titles = iter(await response_titles(response_targets))
    out = []
    for i, r in enumerate(rs):
        title = next(topic_titles) if r.target_kind == TargetKind.TOPIC else next(reply_titles)
        out.append({**r.to_doc(), "author": authors[i], "targetTitle": title})
    return out


async def side(s: Side | None) -> dict | None:
    if s is None:
        return None
    return (await sides([s]))[0]


async def sides(ss: list[Side]) -> list[dict]:
    """Add the username of each side's user and the title of its topic."""
    authors = await authing.ids_to_usernames([s.user for s in ss])
    titles = await topicing.ids_to_titles([s.issue for s in ss])
    return [{**s.to_doc(), "author": authors[i], "topic": titles[i]} for i, s in enumerate(ss)]


async def labels(ls: list[Label]) -> list[dict]:
    """Replace the author id with a username and item ids with item titles (raw ids kept in itemIds)."""
    authors = await authing.ids_to_usernames([label.author for label in ls])
    out = []
    for i, label in enumerate(ls):
        ids = [UUID(item) for item in label.items]
        if label.kind == TargetKind.TOPIC:
            titles = await topicing.ids_to_titles(ids)
        else:
            titles = await response_titles(ids)
        out.append({**label.to_doc(), "author": authors[i], "items": titles, "itemIds": label.items})
    return out


async def label(lbl: Label | None) -> dict | None:
    if lbl is None:
        return None
    return (await labels([lbl]))[0]


async def friend_requests(requests: list[FriendRequest]) -> list[dict]:
    """Convert FriendRequests by replacing both user ids with usernames."""
    senders = [r.from_user for r in requests]
    receivers = [r.to_user for r in requests]
    usernames = await authing.ids_to_usernames(senders + receivers)
    n = len(requests)
    return [{**r.to_doc(), "from": usernames[i], "to": usernames[i + n]} for i, r in enumerate(requests)]


# ===== Error formatters =====

async def _username(_id: UUID) -> str:
    return (await authing.get_user_by_id(_id)).username


async def _author_and_topic(e) -> str:
    title = (await topicing.get_topic_by_id(e._id)).title
    return e.format_with(await _username(e.author), title)


async def _author_only(e) -> str:
    return e.format_with(await _username(e.author), e._id)


async def _label_author(e: LabelAuthorNotMatchError) -> str:
    return e.format_with(await _username(e.author), e.title)


async def _request_users(e) -> str:
    return e.format_with(await _username(e.from_user), await _username(e.to_user))


async def _friend_users(e) -> str:
    return e.format_with(await _username(e.user1), await _username(e.user2))


register_error(TopicAuthorNotMatchError, _author_and_topic)
register_error(ResponseAuthorNotMatchError, _author_only)
register_error(LabelAuthorNotMatchError, _label_author)
register_error(NoSideFoundForUserError, _author_and_topic)
register_error(UserAlreadyHasTopicSideError, _author_and_topic)
register_error(FriendRequestAlreadyExistsError, _request_users)
register_error(FriendRequestNotFoundError, _request_users)
register_error(FriendNotFoundError, _friend_users)
register_error(AlreadyFriendsError, _friend_users)
