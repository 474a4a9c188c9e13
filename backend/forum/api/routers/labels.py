# forum/api/routers/labels.py
from uuid import UUID

from fastapi import Depends

from forum.api import responses
from forum.api.deps import get_session
from forum.api.routes import Route
from forum.api.routers.replies import find_response
from forum.concepts import SessionDoc, response_labeling, sessioning, topic_labeling, topicing
from forum.concepts.labeling import LabelingConcept
from forum.schemas.forum import LabelIn


async def _create(labeling: LabelingConcept, body: LabelIn, session: SessionDoc):
    user = sessioning.get_user(session)
    created = await labeling.create(user, body.label)
    return {"msg": created["msg"], "label": await responses.label(created["label"])}


async def _delete(labeling: LabelingConcept, title: str, session: SessionDoc):
    user = sessioning.get_user(session)
    await labeling.assert_author_is_user(title, user)
    label = await labeling.get_label_by_title(title)
    return await labeling.delete(label.id)


# ===== Topic labels =====

async def get_topic_labels():
    return await responses.labels(await topic_labeling.get_all_labels())


async def create_topic_label(body: LabelIn, session: SessionDoc = Depends(get_session)):
    return await _create(topic_labeling, body, session)


async def delete_topic_label(title: str, session: SessionDoc = Depends(get_session)):
    return await _delete(topic_labeling, title, session)


async def add_label_to_topic(label: str, topic: str, session: SessionDoc = Depends(get_session)):
    """Attach a topic label to a topic (by title). Any logged-in user may label."""
    sessioning.get_user(session)
    topic_id = (await topicing.get_topic_by_title(topic)).id
    return await topic_labeling.add_label_to_item(label, topic_id)


async def remove_label_from_topic(label: str, topic: str, session: SessionDoc = Depends(get_session)):
    sessioning.get_user(session)
    topic_id = (await topicing.get_topic_by_title(topic)).id
    return await topic_labeling.remove_label_from_item(label, topic_id)


# ===== Response labels =====

async def get_response_labels():
    return await responses.labels(await response_labeling.get_all_labels())


async def create_response_label(body: LabelIn, session: SessionDoc = Depends(get_session)):
    return await _create(response_labeling, body, session)


async def delete_response_label(title: str, session: SessionDoc = Depends(get_session)):
    return await _delete(response_labeling, title, session)


async def add_label_to_response(label: str, id: UUID, session: SessionDoc = Depends(get_session)):
    sessioning.get_user(session)
    response = await find_response(id)
    return await response_labeling.add_label_to_item(label, response.id)


async def remove_label_from_response(label: str, id: UUID, session: SessionDoc = Depends(get_session)):
    # The response may already be deleted; detaching its id is still allowed
    sessioning.get_user(session)
    return await response_labeling.remove_label_from_item(label, id)


routes = [
    Route("GET", "/label/topic", get_topic_labels, "Get all Topic Labels"),
    Route("POST", "/label/topic", create_topic_label, "Create Topic Label", ("label",)),
    Route("DELETE", "/label/topic/{title}", delete_topic_label, "Delete Topic Label", ("title",)),
    Route("PATCH", "/label/{label}/add/topic/{topic}", add_label_to_topic, "Add Label to Topic", ("label", "topic")),
    Route("PATCH", "/label/{label}/remove/topic/{topic}", remove_label_from_topic, "Remove Label from Topic", ("label", "topic")),
    Route("GET", "/label/response", get_response_labels, "Get all Response Labels"),
    Route("POST", "/label/response", create_response_label, "Create Response Label", ("label",)),
    Route("DELETE", "/label/response/{title}", delete_response_label, "Delete Response Label", ("title",)),
    Route("PATCH", "/label/{label}/add/response/{id}", add_label_to_response, "Add Label to Response", ("label", "id")),
    Route("PATCH", "/label/{label}/remove/response/{id}", remove_label_from_response, "Remove Label from Response", ("label", "id")),
]
