# forum/api/routers/votes.py
from uuid import UUID

from fastapi import Depends, Query

from forum.api.deps import get_session
from forum.api.routes import Route
from forum.api.routers.replies import find_response
from forum.concepts import SessionDoc, sessioning, voting


async def upvote(id: UUID, session: SessionDoc = Depends(get_session)):
    """Upvote a response; replaces an earlier downvote, 409 if already upvoted."""
    user = sessioning.get_user(session)
    response = await find_response(id)
    return await voting.upvote(user, response.id)


async def downvote(id: UUID, session: SessionDoc = Depends(get_session)):
    user = sessioning.get_user(session)
    response = await find_response(id)
    return await voting.downvote(user, response.id)


async def unvote(id: UUID, session: SessionDoc = Depends(get_session)):
    user = sessioning.get_user(session)
    return await voting.unvote(user, id)


async def get_count(id: UUID = Query()):
    """Upvotes minus downvotes for a response."""
    response = await find_response(id)
    return {"response": str(response.id), "count": await voting.get_count(response.id)}


routes = [
    Route("PATCH", "/vote/upvote/{id}", upvote, "Set vote to response to upvote", ("id",)),
    Route("PATCH", "/vote/downvote/{id}", downvote, "Set vote to response to downvote", ("id",)),
    Route("PATCH", "/vote/unvote/{id}", unvote, "Set vote to response to not voting anymore", ("id",)),
    Route("GET", "/vote/count", get_count, "Get count of response (upvotes - downvotes)", ("id",)),
]
