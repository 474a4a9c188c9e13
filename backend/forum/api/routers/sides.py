# forum/api/routers/sides.py
from typing import Optional

from fastapi import Depends, Query

from forum.api import responses
from forum.api.deps import get_session
from forum.api.routes import Route
from forum.concepts import SessionDoc, authing, sessioning, sideing, topicing
from forum.models import Degree
from forum.schemas.forum import SideIn, SideUpdateIn


async def get_sides(user: str = Query(min_length=1), topic: str | None = Query(default=None)):
    """Sides of a user, on one topic when `topic` (a title) is given."""
    user_id = (await authing.get_user_by_username(user)).id
    if topic:
        topic_id = (await topicing.get_topic_by_title(topic)).id
        rows = await sideing.get_side_by_user_and_issue(user_id, topic_id)
    else:
        rows = await sideing.get_side_by_user(user_id)
    return await responses.sides(rows)


async def create_side(topic: str, body: SideIn, session: SessionDoc = Depends(get_session)):
    """
    Declare the caller's side on a topic.

    Error kinds:
        - 404: unknown topic, or degree outside the eight allowed values
        - 409: the caller already has a side on this topic
    """
    user = sessioning.get_user(session)
    topic_id = (await topicing.get_topic_by_title(topic)).id
    created = await sideing.create(user, topic_id, body.degree)
    return {"msg": created["msg"], "side": await responses.side(created["side"])}


async def update_side(topic: str, body: Optional[SideUpdateIn] = None, session: SessionDoc = Depends(get_session)):
    user = sessioning.get_user(session)
    topic_id = (await topicing.get_topic_by_title(topic)).id
    await sideing.assert_user_has_side(user, topic_id)
    return await sideing.update(user, topic_id, body.newside if body else None)


routes = [
    Route("GET", "/side", get_sides, "Get sides of user for topic (all if no topic)", ("user", "topic")),
    Route("POST", "/side/new/{topic}", create_side,
          "Create Side to Topic (possible degrees: " + ", ".join(d.value for d in Degree) + ")", ("topic", "degree")),
    Route("PATCH", "/side/update/{topic}", update_side, "Update Side", ("topic", "newside")),
]
