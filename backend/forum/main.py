# forum/main.py
import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

# Your configuration and DB
from forum.config import settings
from forum.core.db import init_db, close_db
from forum.core.errors import ForumError

from forum.api.console import build_console_router
from forum.api.routes import build_router, format_error
from forum.api.routers import users, topics, replies, sides, labels, friends, votes

# Importing the projections registers the error formatters
import forum.api.responses  # noqa: F401

logger = logging.getLogger("uvicorn.error")

# The app's synchronizations, one route table per concept group
ROUTE_TABLES = {
    "users": users.routes,
    "topics": topics.routes,
    "responses": replies.routes,
    "sides": sides.routes,
    "labels": labels.routes,
    "friends": friends.routes,
    "votes": votes.routes,
}

app = FastAPI(title=settings.APP_NAME)

# CORS (with Cookie)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

@app.exception_handler(ForumError)
async def forum_error_handler(request: Request, exc: ForumError):
    """
    Map an error kind to its HTTP status and humanise registered error types
    (ids replaced by usernames / titles) before replying {"error": message}.
    """
    message = await format_error(exc)
    logger.info("[errors] %s %s -> %d %s", request.method, request.url.path, exc.status_code, message)
    return JSONResponse(status_code=exc.status_code, content={"error": message})

@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    """Malformed ids and missing or mistyped bodies, reported as {"error": message} with 422."""
    message = "; ".join(
        f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}" for err in exc.errors()
    )
    logger.info("[errors] %s %s -> 422 %s", request.method, request.url.path, message)
    return JSONResponse(status_code=422, content={"error": message})

@app.on_event("startup")
async def on_startup():
    await init_db(generate_schemas=settings.generate_schemas)

@app.on_event("shutdown")
async def on_shutdown():
    await close_db()

# REST
for tag, table in ROUTE_TABLES.items():
    app.include_router(build_router(table, tag), prefix=settings.api_prefix)

# Manual test console
app.include_router(build_console_router(
    [route for table in ROUTE_TABLES.values() for route in table],
    settings.api_prefix,
    settings.APP_NAME,
))

@app.get("/healthz")
def healthz():
    return {"ok": True}
