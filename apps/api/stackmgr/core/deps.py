from fastapi import HTTPException, status

from stackmgr.core.config import get_settings
from stackmgr.services.stack_manager import STACK_NAME_RE, CommandExecutionError, StackManager


def get_stack_manager() -> StackManager:
    return StackManager(get_settings().docker_binary_path)


def validate_stack_name(name: str) -> str:
    if not STACK_NAME_RE.match(name):
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid stack name")
    return name


def command_failed(exc: CommandExecutionError) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail={"message": "docker command failed", "stderr": exc.stderr},
    )
