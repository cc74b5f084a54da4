from __future__ import annotations

import os
import shutil
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

RUNTIME_DIR = Path(__file__).resolve().parent / ".runtime"
RUNTIME_DIR.mkdir(parents=True, exist_ok=True)

os.environ.setdefault("DATABASE_URL", f"sqlite:///{(RUNTIME_DIR / 'test.db').resolve()}")
os.environ.setdefault("DOCKER_BINARY_PATH", str((RUNTIME_DIR / "bin").resolve()))

from stackmgr.core.deps import get_stack_manager  # noqa: E402
from stackmgr.db.session import SessionLocal  # noqa: E402
from stackmgr.main import app  # noqa: E402
from stackmgr.models.audit_log import AuditLog  # noqa: E402
from stackmgr.schemas.endpoint import Endpoint, TLSConfiguration  # noqa: E402
from stackmgr.services.stack_manager import StackManager  # noqa: E402

BINARY_DIR = "/opt/docker/bin"


class FakeCommandRunner:
    """Records every invocation; fails the calls whose args contain a scripted token."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, list[str]]] = []
        self.failures: dict[str, str] = {}

    def fail_when(self, token: str, stderr: str) -> None:
        self.failures[token] = stderr

    def execute(self, path: str, args) -> tuple[bool, str]:
        args = list(args)
        self.calls.append((path, args))
        for token, stderr in self.failures.items():
            if token in args:
                return False, stderr
        return True, ""

    @property
    def commands(self) -> list[list[str]]:
        return [args for _, args in self.calls]


@pytest.fixture(scope="session", autouse=True)
def prepare_runtime() -> None:
    if RUNTIME_DIR.exists():
        shutil.rmtree(RUNTIME_DIR)
    (RUNTIME_DIR / "bin").mkdir(parents=True, exist_ok=True)


@pytest.fixture
def raw_client():
    app.dependency_overrides.clear()
    with TestClient(app) as client:
        yield client
    app.dependency_overrides.clear()


@pytest.fixture(autouse=True)
def reset_state(raw_client):
    with SessionLocal() as db:
        db.query(AuditLog).delete()
        db.commit()
    yield


@pytest.fixture
def fake_runner() -> FakeCommandRunner:
    return FakeCommandRunner()


@pytest.fixture
def manager(fake_runner) -> StackManager:
    return StackManager(BINARY_DIR, runner=fake_runner, platform="linux")


@pytest.fixture
def client(raw_client, manager):
    app.dependency_overrides[get_stack_manager] = lambda: manager
    yield raw_client
    app.dependency_overrides.pop(get_stack_manager, None)


@pytest.fixture
def db_session():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture
def endpoint() -> Endpoint:
    return Endpoint(url="tcp://10.0.0.5:2376")


@pytest.fixture
def tls_endpoint() -> Endpoint:
    return Endpoint(
        url="tcp://10.0.0.5:2376",
        tls_config=TLSConfiguration(
            tls=True,
            tls_ca_cert_path="/certs/ca.pem",
            tls_cert_path="/certs/cert.pem",
            tls_key_path="/certs/key.pem",
        ),
    )
