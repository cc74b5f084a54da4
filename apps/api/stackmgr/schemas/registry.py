from pydantic import BaseModel, ConfigDict, Field

from stackmgr.schemas.endpoint import Endpoint


class Registry(BaseModel):
    model_config = ConfigDict(frozen=True)

    url: str = ""
    username: str = ""
    password: str = Field(default="", repr=False)
    authentication: bool = False


class DockerHub(BaseModel):
    model_config = ConfigDict(frozen=True)

    username: str = ""
    password: str = Field(default="", repr=False)
    authentication: bool = False


class RegistryLoginRequest(BaseModel):
    endpoint: Endpoint
    registries: list[Registry] = Field(default_factory=list)
    dockerhub: DockerHub = Field(default_factory=DockerHub)


class RegistryLogoutRequest(BaseModel):
    endpoint: Endpoint
