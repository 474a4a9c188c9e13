# forum/api/routers/users.py
from fastapi import Depends, Response

from forum.api import responses
from forum.api.deps import get_session, store_session
from forum.api.routes import Route
from forum.concepts import SessionDoc, authing, sessioning
from forum.schemas.auth import Credentials, PasswordChangeIn, UsernameIn


async def get_session_user(session: SessionDoc = Depends(get_session)):
    """Return the logged-in user (401 when logged out)."""
    user = sessioning.get_user(session)
    return responses.user(await authing.get_user_by_id(user))


async def get_users():
    return responses.users(await authing.get_users())


async def get_user(username: str):
    return responses.user(await authing.get_user_by_username(username))


async def create_user(body: Credentials, session: SessionDoc = Depends(get_session)):
    """
    Register a new account. Only allowed while logged out.

    Error kinds:
        - 400: empty username or password
        - 403: caller is logged in
        - 409: username already taken
    """
    sessioning.is_logged_out(session)
    created = await authing.create(body.username, body.password)
    return {"msg": created["msg"], "user": responses.user(created["user"])}


async def update_username(body: UsernameIn, session: SessionDoc = Depends(get_session)):
    user = sessioning.get_user(session)
    return await authing.update_username(user, body.username)


async def update_password(body: PasswordChangeIn, session: SessionDoc = Depends(get_session)):
    user = sessioning.get_user(session)
    return await authing.update_password(user, body.currentPassword, body.newPassword)


async def delete_user(response: Response, session: SessionDoc = Depends(get_session)):
    """
    Delete the logged-in account and end all of its sessions.

    Topics, responses, sides, labels and votes written by the account are kept;
    their author renders as DELETED_USER afterwards.
    """
    user = sessioning.get_user(session)
    await sessioning.end(session)
    await sessioning.end_all(user)
    store_session(response, session)
    return await authing.delete(user)


async def log_in(body: Credentials, response: Response, session: SessionDoc = Depends(get_session)):
    """
    Authenticate and start a session.

    The session token is returned in the body and also set as an HttpOnly
    cookie for browser-based clients.
    """
    u = await authing.authenticate(body.username, body.password)
    await sessioning.start(session, u.id)
    store_session(response, session)
    return {"msg": "Logged in!", "accessToken": session.token}


async def log_out(response: Response, session: SessionDoc = Depends(get_session)):
    await sessioning.end(session)
    store_session(response, session)
    return {"msg": "Logged out!"}


routes = [
    Route("GET", "/session", get_session_user, "Get Session User (logged in user)"),
    Route("GET", "/users", get_users, "Get Users"),
    Route("GET", "/users/{username}", get_user, "Get User", ("username",)),
    Route("POST", "/users", create_user, "Create User", ("username", "password")),
    Route("PATCH", "/users/username", update_username, "Update Username", ("username",)),
    Route("PATCH", "/users/password", update_password, "Update Password", ("currentPassword", "newPassword")),
    Route("DELETE", "/users", delete_user, "Delete User"),
    Route("POST", "/login", log_in, "Login", ("username", "password")),
    Route("POST", "/logout", log_out, "Logout"),
]
