from fastapi import Header, Request, Response
from forum.concepts import SessionDoc, sessioning
from forum.config import settings

async def get_session(
    request: Request,
    authorization: str | None = Header(default=None),
) -> SessionDoc:
    """
    FastAPI dependency that loads the caller's session.

    This dependency extracts the session token from either:
    1. Authorization header (Bearer token) - preferred method
    2. HttpOnly cookie (accessToken) - fallback method

    A missing, invalid or ended token yields a logged-out session rather than
    an error; handlers decide whether they need a user via
    `sessioning.get_user` / `sessioning.is_logged_out`.

    Usage:
        @router.get("/protected")
        async def protected_route(session: SessionDoc = Depends(get_session)):
            user = sessioning.get_user(session)
    """
    token = None
    # 1) Prioritize Authorization: Bearer xxx
    if authorization and authorization.lower().startswith("bearer "):
        token = authorization.split(" ", 1)[1].strip()
    # 2) Secondly HttpOnly Cookie: accessToken
    if not token:
        token = request.cookies.get(settings.session_cookie)
    return await sessioning.load(token)

def store_session(response: Response, session: SessionDoc) -> None:
    """
    Mirror the session onto the client cookie after `start` or `end`.
    """
    if session.token:
        response.set_cookie(settings.session_cookie, session.token, httponly=True, secure=False, samesite="lax")
    elif session.id is None:
        response.delete_cookie(settings.session_cookie)
