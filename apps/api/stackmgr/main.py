import sys
from contextlib import asynccontextmanager

from fastapi import FastAPI

from stackmgr.api.v1.router import api_router
from stackmgr.core.config import get_settings
from stackmgr.db.init_db import init_db
from stackmgr.services.stack_manager import DOCKER_BINARY, binary_suffix

settings = get_settings()


@asynccontextmanager
async def lifespan(_: FastAPI):
    init_db()
    yield


app = FastAPI(title=settings.app_name, version="0.1.0", lifespan=lifespan)
app.include_router(api_router, prefix=settings.api_v1_prefix)


@app.get("/healthz")
def healthz() -> dict:
    return {"status": "ok", "docker": docker_binary_available()}


def docker_binary_available() -> bool:
    binary = settings.docker_binary_path / f"{DOCKER_BINARY}{binary_suffix(sys.platform)}"
    return binary.is_file()
