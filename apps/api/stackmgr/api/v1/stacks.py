import logging

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from stackmgr.core.audit import write_audit_log
from stackmgr.core.deps import command_failed, get_stack_manager, validate_stack_name
from stackmgr.db.session import get_db
from stackmgr.schemas.stack import OperationResponse, Stack, StackDeployRequest, StackRemoveRequest
from stackmgr.services.stack_manager import CommandExecutionError, StackManager, compose_file_path

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/stacks", tags=["stacks"])


@router.post("/{name}/deploy", response_model=OperationResponse)
def deploy_stack(
    payload: StackDeployRequest,
    name: str = Depends(validate_stack_name),
    manager: StackManager = Depends(get_stack_manager),
    db: Session = Depends(get_db),
) -> OperationResponse:
    stack = Stack(name=name, project_path=payload.project_path, entry_point=payload.entry_point)
    detail = {"compose_file": compose_file_path(stack)}
    try:
        manager.login(payload.dockerhub, payload.registries, payload.endpoint)
        try:
            manager.deploy(stack, payload.endpoint)
        finally:
            _logout_quietly(manager, payload)
    except CommandExecutionError as exc:
        write_audit_log(
            db,
            action="stack.deploy",
            resource_type="stack",
            resource_id=name,
            endpoint_url=payload.endpoint.url,
            status="failed",
            detail={**detail, "stderr": exc.stderr},
        )
        raise command_failed(exc) from exc

    write_audit_log(
        db,
        action="stack.deploy",
        resource_type="stack",
        resource_id=name,
        endpoint_url=payload.endpoint.url,
        detail=detail,
    )
    return OperationResponse(stack=name)


@router.post("/{name}/remove", response_model=OperationResponse)
def remove_stack(
    payload: StackRemoveRequest,
    name: str = Depends(validate_stack_name),
    manager: StackManager = Depends(get_stack_manager),
    db: Session = Depends(get_db),
) -> OperationResponse:
    stack = Stack(name=name)
    try:
        manager.remove(stack, payload.endpoint)
    except CommandExecutionError as exc:
        write_audit_log(
            db,
            action="stack.remove",
            resource_type="stack",
            resource_id=name,
            endpoint_url=payload.endpoint.url,
            status="failed",
            detail={"stderr": exc.stderr},
        )
        raise command_failed(exc) from exc

    write_audit_log(
        db,
        action="stack.remove",
        resource_type="stack",
        resource_id=name,
        endpoint_url=payload.endpoint.url,
    )
    return OperationResponse(stack=name)


def _logout_quietly(manager: StackManager, payload: StackDeployRequest) -> None:
    try:
        manager.logout(payload.endpoint)
    except CommandExecutionError as exc:
        logger.warning("logout after deploy failed: endpoint=%s stderr=%s", payload.endpoint.url, exc.stderr[:200])
