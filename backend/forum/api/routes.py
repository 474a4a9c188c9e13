"""
Route table and error-formatter registry.

Every endpoint is declared as a `Route` entry in its router module's `routes`
list; `build_router` turns a table into a FastAPI APIRouter at startup. The
request/response models and path/query typing on each handler are the
validation step that runs before the handler body.
"""
import logging
from typing import Any, Awaitable, Callable, NamedTuple

from fastapi import APIRouter

from forum.core.errors import ForumError

logger = logging.getLogger("uvicorn.error")


class Route(NamedTuple):
    method: str  # GET, POST, PUT, PATCH or DELETE
    path: str  # Path relative to the API prefix, FastAPI {param} syntax
    endpoint: Callable[..., Awaitable[Any]]
    name: str  # Human-readable operation name (used by the test console)
    fields: tuple[str, ...] = ()  # Inputs shown by the test console (path, query and body)


def build_router(routes: list[Route], tag: str) -> APIRouter:
    router = APIRouter(tags=[tag])
    for route in routes:
        router.add_api_route(
            route.path,
            route.endpoint,
            methods=[route.method],
            summary=route.name,
            name=route.endpoint.__name__,
        )
    return router


ErrorFormatter = Callable[[Any], Awaitable[str]]

_error_formatters: dict[type, ErrorFormatter] = {}


def register_error(error_type: type[ForumError], formatter: ErrorFormatter) -> None:
    """
    Register an async formatter that turns an error carrying raw ids into a
    client-facing message (e.g. replacing a user id with a username).
    """
    _error_formatters[error_type] = formatter


async def format_error(error: ForumError) -> str:
    for klass in type(error).__mro__:
        formatter = _error_formatters.get(klass)
        if formatter is None:
            continue
        try:
            return await formatter(error)
        except ForumError as exc:
            # An id inside the error may refer to something deleted meanwhile
            logger.warning("[errors] could not format %s: %s", type(error).__name__, exc.message)
            break
    return error.message
