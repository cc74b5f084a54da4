from __future__ import annotations

import logging
import re
import sys
from pathlib import Path
from typing import Sequence

from stackmgr.schemas.endpoint import Endpoint
from stackmgr.schemas.registry import DockerHub, Registry
from stackmgr.schemas.stack import Stack
from stackmgr.services.command_runner import CommandRunner, SubprocessCommandRunner

logger = logging.getLogger(__name__)
STACK_NAME_RE = re.compile(r"^[a-zA-Z0-9._-]{1,128}$")
DOCKER_BINARY = "docker"
_SECRET_FLAGS = {"--password"}


class CommandExecutionError(Exception):
    """A docker invocation failed; the message is the captured stderr verbatim."""

    def __init__(self, stderr: str) -> None:
        super().__init__(stderr)
        self.stderr = stderr


def binary_suffix(platform: str) -> str:
    if platform.startswith("win"):
        return ".exe"
    return ""


def prepare_docker_command_and_args(
    binary_dir: str | Path,
    endpoint: Endpoint,
    platform: str | None = None,
) -> tuple[str, list[str]]:
    platform = sys.platform if platform is None else platform
    command = str(Path(binary_dir) / f"{DOCKER_BINARY}{binary_suffix(platform)}")

    args = ["-H", endpoint.url]
    tls = endpoint.tls_config
    if tls.tls:
        args.append("--tls")

        if not tls.tls_skip_verify:
            args.extend(["--tlsverify", "--tlscacert", tls.tls_ca_cert_path])

        if tls.tls_cert_path and tls.tls_key_path:
            args.extend(["--tlscert", tls.tls_cert_path, "--tlskey", tls.tls_key_path])

    return command, args


def compose_file_path(stack: Stack) -> str:
    return str(Path(stack.project_path) / stack.entry_point)


def redact_args(args: Sequence[str]) -> list[str]:
    redacted: list[str] = []
    hide_next = False
    for arg in args:
        redacted.append("******" if hide_next else arg)
        hide_next = arg in _SECRET_FLAGS
    return redacted


class StackManager:
    """Drives the docker CLI for registry logins and swarm stack lifecycle.

    Every operation builds a fresh argument list for the target endpoint and
    blocks until the docker process exits. The first failing invocation raises
    CommandExecutionError and aborts whatever remains of the operation.
    """

    def __init__(self, binary_dir: str | Path, runner: CommandRunner | None = None, platform: str | None = None) -> None:
        self.binary_dir = Path(binary_dir)
        self.runner = runner or SubprocessCommandRunner()
        self.platform = platform

    def login(self, dockerhub: DockerHub, registries: Sequence[Registry], endpoint: Endpoint) -> None:
        command, args = self._prepare(endpoint)
        for registry in registries:
            if not registry.authentication:
                continue
            registry_args = args + ["login", "--username", registry.username, "--password", registry.password, registry.url]
            self._run_command(command, registry_args)

        if dockerhub.authentication:
            dockerhub_args = args + ["login", "--username", dockerhub.username, "--password", dockerhub.password]
            self._run_command(command, dockerhub_args)

    def logout(self, endpoint: Endpoint) -> None:
        command, args = self._prepare(endpoint)
        self._run_command(command, args + ["logout"])

    def deploy(self, stack: Stack, endpoint: Endpoint) -> None:
        stack_file_path = compose_file_path(stack)
        command, args = self._prepare(endpoint)
        args.extend(["stack", "deploy", "--with-registry-auth", "--compose-file", stack_file_path, stack.name])
        self._run_command(command, args)

    def remove(self, stack: Stack, endpoint: Endpoint) -> None:
        command, args = self._prepare(endpoint)
        args.extend(["stack", "rm", stack.name])
        self._run_command(command, args)

    def _prepare(self, endpoint: Endpoint) -> tuple[str, list[str]]:
        return prepare_docker_command_and_args(self.binary_dir, endpoint, self.platform)

    def _run_command(self, command: str, args: list[str]) -> None:
        logger.debug("exec: %s %s", command, " ".join(redact_args(args)))
        ok, stderr = self.runner.execute(command, args)
        if not ok:
            logger.warning("docker command failed: stderr=%s", stderr[:200])
            raise CommandExecutionError(stderr)
