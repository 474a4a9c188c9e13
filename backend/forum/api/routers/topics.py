# forum/api/routers/topics.py
import random
from uuid import UUID

from fastapi import Depends, Query

from forum.api import responses
from forum.api.deps import get_session
from forum.api.routes import Route
from forum.concepts import SessionDoc, responding_to_topic, sessioning, topic_labeling, topicing
from forum.core.errors import BadValuesError
from forum.schemas.forum import TopicIn

TOPIC_SORTS = ("newest", "random", "engagement")


async def get_topics(search: str | None = Query(default=None)):
    """All topics (newest first), or those whose title contains `search` (case-insensitive)."""
    if search:
        rows = await topicing.search_topic_titles(search)
    else:
        rows = await topicing.get_topics()
    return await responses.topics(rows)


async def create_topic(body: TopicIn, session: SessionDoc = Depends(get_session)):
    user = sessioning.get_user(session)
    created = await topicing.create(user, body.title, body.description)
    return {"msg": created["msg"], "topic": await responses.topic(created["topic"])}


async def delete_topic(title: str, session: SessionDoc = Depends(get_session)):
    """Delete a topic by title. Only its author may do this (403 otherwise)."""
    user = sessioning.get_user(session)
    topic = await topicing.get_topic_by_title(title)
    await topicing.assert_author_is_user(topic.id, user)
    return await topicing.delete(topic.id)


async def sort_topics(sort: str = Query(default="newest")):
    """
    All topics in the given order:
        - newest: most recently created first
        - random: shuffled
        - engagement: most responses first
    """
    if sort not in TOPIC_SORTS:
        raise BadValuesError("Sort must be one of {0}!", ", ".join(TOPIC_SORTS))
    rows = await topicing.get_topics()
    if sort == "random":
        random.shuffle(rows)
    elif sort == "engagement":
        counts = await responding_to_topic.count_by_targets([t.id for t in rows])
        engagement = {t.id: n for t, n in zip(rows, counts)}
        rows.sort(key=lambda t: engagement[t.id], reverse=True)
    return await responses.topics(rows)


async def get_topics_by_label(label: str):
    tag = await topic_labeling.get_label_by_title(label)
    rows = await topicing.get_topics_by_ids([UUID(item) for item in tag.items])
    return await responses.topics(rows)


routes = [
    Route("GET", "/topics", get_topics, "Search All Topics by Title", ("search",)),
    Route("POST", "/topic", create_topic, "Create Topic", ("title", "description")),
    Route("DELETE", "/topic/{title}", delete_topic, "Delete Topic", ("title",)),
    Route("GET", "/topics/sort", sort_topics, "Get all topics by given sort (newest, random, engagement)", ("sort",)),
    Route("GET", "/topics/label/{label}", get_topics_by_label, "Get all topics with label given", ("label",)),
]
