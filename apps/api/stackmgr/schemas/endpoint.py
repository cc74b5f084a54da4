from pydantic import BaseModel, ConfigDict, Field


class TLSConfiguration(BaseModel):
    model_config = ConfigDict(frozen=True)

    tls: bool = False
    tls_skip_verify: bool = False
    tls_ca_cert_path: str = ""
    tls_cert_path: str = ""
    tls_key_path: str = ""


class Endpoint(BaseModel):
    model_config = ConfigDict(frozen=True)

    url: str = Field(min_length=1)
    tls_config: TLSConfiguration = Field(default_factory=TLSConfiguration)
