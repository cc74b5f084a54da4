from pydantic import BaseModel, ConfigDict, Field

from stackmgr.schemas.endpoint import Endpoint
from stackmgr.schemas.registry import DockerHub, Registry

DEFAULT_ENTRY_POINT = "docker-compose.yml"


class Stack(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str = Field(min_length=1, max_length=128)
    project_path: str = ""
    entry_point: str = DEFAULT_ENTRY_POINT


class StackDeployRequest(BaseModel):
    endpoint: Endpoint
    project_path: str = Field(min_length=1)
    entry_point: str = Field(default=DEFAULT_ENTRY_POINT, min_length=1)
    registries: list[Registry] = Field(default_factory=list)
    dockerhub: DockerHub = Field(default_factory=DockerHub)


class StackRemoveRequest(BaseModel):
    endpoint: Endpoint


class OperationResponse(BaseModel):
    status: str = "ok"
    stack: str | None = None
