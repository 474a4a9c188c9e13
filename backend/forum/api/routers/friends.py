# forum/api/routers/friends.py
from fastapi import Depends

from forum.api import responses
from forum.api.deps import get_session
from forum.api.routes import Route
from forum.concepts import SessionDoc, authing, friending, sessioning


async def get_friends(session: SessionDoc = Depends(get_session)):
    """Usernames of the caller's friends."""
    user = sessioning.get_user(session)
    return await authing.ids_to_usernames(await friending.get_friends(user))


async def remove_friend(friend: str, session: SessionDoc = Depends(get_session)):
    user = sessioning.get_user(session)
    friend_id = (await authing.get_user_by_username(friend)).id
    return await friending.remove_friend(user, friend_id)


async def get_requests(session: SessionDoc = Depends(get_session)):
    """Friend requests sent by or to the caller, in any status."""
    user = sessioning.get_user(session)
    return await responses.friend_requests(await friending.get_requests(user))


async def send_friend_request(to: str, session: SessionDoc = Depends(get_session)):
    user = sessioning.get_user(session)
    to_id = (await authing.get_user_by_username(to)).id
    return await friending.send_request(user, to_id)


async def remove_friend_request(to: str, session: SessionDoc = Depends(get_session)):
    user = sessioning.get_user(session)
    to_id = (await authing.get_user_by_username(to)).id
    return await friending.remove_request(user, to_id)


async def accept_friend_request(sender: str, session: SessionDoc = Depends(get_session)):
    user = sessioning.get_user(session)
    from_id = (await authing.get_user_by_username(sender)).id
    return await friending.accept_request(from_id, user)


async def reject_friend_request(sender: str, session: SessionDoc = Depends(get_session)):
    user = sessioning.get_user(session)
    from_id = (await authing.get_user_by_username(sender)).id
    return await friending.reject_request(from_id, user)


routes = [
    Route("GET", "/friends", get_friends, "Get Friends"),
    Route("DELETE", "/friends/{friend}", remove_friend, "Remove Friend", ("friend",)),
    Route("GET", "/friend/requests", get_requests, "Get Friend Requests"),
    Route("POST", "/friend/requests/{to}", send_friend_request, "Send Friend Request", ("to",)),
    Route("DELETE", "/friend/requests/{to}", remove_friend_request, "Remove Friend Request", ("to",)),
    Route("PUT", "/friend/accept/{sender}", accept_friend_request, "Accept Friend Request", ("sender",)),
    Route("PUT", "/friend/reject/{sender}", reject_friend_request, "Reject Friend Request", ("sender",)),
]
