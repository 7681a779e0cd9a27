"""
Users endpoints.

The Users service exposes only a greeting and a liveness check.
User registration and management are not served over HTTP.
"""

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

from amazon_api.users.schemas.hello import HelloWorld

router = APIRouter()

HELLO_WORLD_MSG = "Hello World!!!"


@router.get("", response_model=HelloWorld)
async def hello_world() -> HelloWorld:
    return HelloWorld(hello_world_msg=HELLO_WORLD_MSG)


@router.get("/hello", response_class=PlainTextResponse)
async def health() -> str:
    """Liveness check answering the literal text ``OK``."""
    return "OK"
