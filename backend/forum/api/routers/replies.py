# forum/api/routers/replies.py
import random
from typing import Optional
from uuid import UUID

from fastapi import Depends, Query

from forum.api import responses
from forum.api.deps import get_session
from forum.api.routes import Route
from forum.concepts import (
    SessionDoc,
    Target,
    authing,
    response_labeling,
    responding_to_response,
    responding_to_topic,
    sessioning,
    sideing,
    topicing,
    voting,
)
from forum.concepts.responding import RespondingConcept
from forum.core.errors import BadValuesError, NotFoundError
from forum.models import Response, TargetKind
from forum.schemas.forum import ResponseContentIn, ResponseIn, ResponseTitleIn

RESPONSE_SORTS = ("newest", "random", "upvotes", "downvotes", "controversial")


async def find_response(_id: UUID) -> Response:
    """Look a response up in both kinds."""
    for concept in (responding_to_topic, responding_to_response):
        found = await concept.ids_to_responses([_id])
        if found:
            return found[0]
    raise NotFoundError("Response {0} does not exist!", _id)


async def _update_title(concept: RespondingConcept, _id: UUID, body: Optional[ResponseTitleIn], session: SessionDoc):
    user = sessioning.get_user(session)
    await concept.assert_author_is_user(_id, user)
    return await concept.update_title(_id, body.title if body else None)


async def _update_content(concept: RespondingConcept, _id: UUID, body: Optional[ResponseContentIn], session: SessionDoc):
    user = sessioning.get_user(session)
    await concept.assert_author_is_user(_id, user)
    return await concept.update_content(_id, body.content if body else None)


async def _delete(concept: RespondingConcept, _id: UUID, session: SessionDoc):
    user = sessioning.get_user(session)
    await concept.assert_author_is_user(_id, user)
    result = await concept.delete(_id)
    await voting.delete_votes(_id)
    return result


# ===== All responses =====

async def get_responses(author: str | None = Query(default=None), id: UUID | None = Query(default=None)):
    """
    Responses of both kinds, filtered by author username and/or target id.
    A target id is first looked up among topics, then among responses.
    """
    author_id = (await authing.get_user_by_username(author)).id if author else None
    if id is None:
        if author_id is None:
            rows = await responding_to_response.get_responses() + await responding_to_topic.get_responses()
        else:
            rows = await responding_to_topic.get_by_author(author_id) + await responding_to_response.get_by_author(author_id)
        return await responses.responses(rows)
    for concept in (responding_to_topic, responding_to_response):
        if author_id is None:
            rows = await concept.get_by_target(id)
        else:
            rows = await concept.get_by_author_and_target(author_id, id)
        if rows:
            break
    return await responses.responses(rows)


# ===== Responses to topics =====

async def get_responses_to_topic(author: str | None = Query(default=None), topic: str | None = Query(default=None)):
    if author and topic:
        author_id = (await authing.get_user_by_username(author)).id
        topic_id = (await topicing.get_topic_by_title(topic)).id
        rows = await responding_to_topic.get_by_author_and_target(author_id, topic_id)
    elif author:
        author_id = (await authing.get_user_by_username(author)).id
        rows = await responding_to_topic.get_by_author(author_id)
    elif topic:
        topic_id = (await topicing.get_topic_by_title(topic)).id
        rows = await responding_to_topic.get_by_target(topic_id)
    else:
        rows = await responding_to_topic.get_responses()
    return await responses.responses(rows)


async def create_response_to_topic(topic: str, body: ResponseIn, session: SessionDoc = Depends(get_session)):
    user = sessioning.get_user(session)
    topic_id = (await topicing.get_topic_by_title(topic)).id
    created = await responding_to_topic.create(user, body.title, body.content, Target(TargetKind.TOPIC, topic_id))
    return {"msg": created["msg"], "response": await responses.respond(created["response"])}


async def update_response_to_topic_title(id: UUID, body: Optional[ResponseTitleIn] = None, session: SessionDoc = Depends(get_session)):
    return await _update_title(responding_to_topic, id, body, session)


async def update_response_to_topic_content(id: UUID, body: Optional[ResponseContentIn] = None, session: SessionDoc = Depends(get_session)):
    return await _update_content(responding_to_topic, id, body, session)


async def delete_response_to_topic(id: UUID, session: SessionDoc = Depends(get_session)):
    return await _delete(responding_to_topic, id, session)


async def sort_responses_to_topic(topic: str, sort: str):
    """
    Responses to a topic in the given order:
        - newest: most recently created first
        - random: shuffled
        - upvotes / downvotes: most up (down) votes first
        - controversial: closest to an even split first, busier threads breaking ties
    """
    if sort not in RESPONSE_SORTS:
        raise BadValuesError("Sort must be one of {0}!", ", ".join(RESPONSE_SORTS))
    topic_id = (await topicing.get_topic_by_title(topic)).id
    rows = await responding_to_topic.get_by_target(topic_id)
    if sort == "random":
        random.shuffle(rows)
    elif sort != "newest":
        tallies = dict(zip([r.id for r in rows], await voting.get_tallies([r.id for r in rows])))
        if sort == "upvotes":
            rows.sort(key=lambda r: tallies[r.id][0], reverse=True)
        elif sort == "downvotes":
            rows.sort(key=lambda r: tallies[r.id][1], reverse=True)
        else:
            rows.sort(key=lambda r: (abs(tallies[r.id][0] - tallies[r.id][1]), -sum(tallies[r.id])))
    return await responses.responses(rows)


async def get_responses_to_topic_by_label(topic: str, label: str):
    topic_id = (await topicing.get_topic_by_title(topic)).id
    tag = await response_labeling.get_label_by_title(label)
    rows = await responding_to_topic.get_by_target(topic_id)
    return await responses.responses([r for r in rows if str(r.id) in tag.items])


async def get_responses_to_topic_by_degree(topic: str, degree: str):
    """Responses to a topic whose authors hold the given side on it."""
    topic_id = (await topicing.get_topic_by_title(topic)).id
    holders = {s.user for s in await sideing.get_sides_by_issue_and_degree(topic_id, degree)}
    rows = await responding_to_topic.get_by_target(topic_id)
    return await responses.responses([r for r in rows if r.author in holders])


# ===== Responses to responses =====

async def get_responses_to_response(author: str | None = Query(default=None), id: UUID | None = Query(default=None)):
    """Replies filtered by author username and/or the id of the response they answer."""
    author_id = (await authing.get_user_by_username(author)).id if author else None
    if author_id and id:
        rows = await responding_to_response.get_by_author_and_target(author_id, id)
    elif author_id:
        rows = await responding_to_response.get_by_author(author_id)
    elif id:
        rows = await responding_to_response.get_by_target(id)
    else:
        rows = await responding_to_response.get_responses()
    return await responses.responses(rows)


async def create_response_to_response(targetId: UUID, body: ResponseIn, session: SessionDoc = Depends(get_session)):
    user = sessioning.get_user(session)
    target = await find_response(targetId)
    created = await responding_to_response.create(user, body.title, body.content, Target(TargetKind.RESPONSE, target.id))
    return {"msg": created["msg"], "response": await responses.respond(created["response"])}


async def update_response_to_response_title(id: UUID, body: Optional[ResponseTitleIn] = None, session: SessionDoc = Depends(get_session)):
    return await _update_title(responding_to_response, id, body, session)


async def update_response_to_response_content(id: UUID, body: Optional[ResponseContentIn] = None, session: SessionDoc = Depends(get_session)):
    return await _update_content(responding_to_response, id, body, session)


async def delete_response_to_response(id: UUID, session: SessionDoc = Depends(get_session)):
    return await _delete(responding_to_response, id, session)


async def get_degree_of_response(id: UUID):
    """The side the author of a response to a topic holds on that topic."""
    response = await responding_to_topic.get_by_id(id)
    await sideing.assert_user_has_side(response.author, response.target)
    found = await sideing.get_side_by_user_and_issue(response.author, response.target)
    return {"response": str(response.id), **(await responses.side(found[0]))}


routes = [
    Route("GET", "/responses", get_responses, "Get Responses (empty for all)", ("author", "id")),
    Route("GET", "/responses/topic", get_responses_to_topic, "Get Responses to Topics (empty for all)", ("author", "topic")),
    Route("POST", "/responses/topic/{topic}", create_response_to_topic, "Create Response to Topic", ("topic", "title", "content")),
    Route("PATCH", "/responses/topic/{id}/title", update_response_to_topic_title, "Update Title of Response to Topic", ("id", "title")),
    Route("PATCH", "/responses/topic/{id}/content", update_response_to_topic_content, "Update Content of Response to Topic", ("id", "content")),
    Route("DELETE", "/responses/topic/{id}", delete_response_to_topic, "Delete Response to Topic", ("id",)),
    Route("GET", "/responses/topic/{topic}/sort/{sort}", sort_responses_to_topic,
          "Get all responses to topics by given sort (newest, random, upvotes, downvotes, controversial)", ("topic", "sort")),
    Route("GET", "/responses/topic/{topic}/label/{label}", get_responses_to_topic_by_label,
          "Get all responses to given topic with label", ("topic", "label")),
    Route("GET", "/responses/topic/{topic}/degree/{degree}", get_responses_to_topic_by_degree,
          "Get all responses to given topic with degree of opinion", ("topic", "degree")),
    Route("GET", "/responses/response", get_responses_to_response, "Get Responses to Responses (empty for all)", ("author", "id")),
    Route("POST", "/responses/response/{targetId}", create_response_to_response, "Create Response to Response", ("targetId", "title", "content")),
    Route("PATCH", "/responses/response/{id}/title", update_response_to_response_title, "Update Title of Response to Response", ("id", "title")),
    Route("PATCH", "/responses/response/{id}/content", update_response_to_response_content, "Update Content of Response to Response", ("id", "content")),
    Route("DELETE", "/responses/response/{id}", delete_response_to_response, "Delete Response to Response", ("id",)),
    Route("GET", "/responses/response/{id}/degree", get_degree_of_response, "Get degree of opinion given response to topic", ("id",)),
]
