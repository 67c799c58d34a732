import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from . import config
from .errors import PostError, PostNotFoundError
from .routers import posts


logging.basicConfig(
    level=getattr(logging, config.LOG_LEVEL.upper(), logging.INFO),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(title="Postbook")

app.include_router(posts.router)


@app.exception_handler(PostNotFoundError)
async def post_not_found_handler(request: Request, exc: PostNotFoundError) -> JSONResponse:
    logger.info("Post not found for %s (slug=%s)", request.url.path, exc.slug)
    return JSONResponse(status_code=404, content={"detail": "Post not found"})


@app.exception_handler(PostError)
async def post_error_handler(request: Request, exc: PostError) -> JSONResponse:
    logger.error("Failed to read posts for %s: %s", request.url.path, exc)
    return JSONResponse(status_code=500, content={"detail": "Failed to load post"})


@app.get("/health")
async def healthcheck() -> dict[str, str]:
    return {"status": "ok"}
