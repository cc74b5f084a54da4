from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from stackmgr.core.audit import write_audit_log
from stackmgr.core.deps import command_failed, get_stack_manager
from stackmgr.db.session import get_db
from stackmgr.schemas.registry import RegistryLoginRequest, RegistryLogoutRequest
from stackmgr.schemas.stack import OperationResponse
from stackmgr.services.stack_manager import CommandExecutionError, StackManager

router = APIRouter(prefix="/registries", tags=["registries"])


@router.post("/login", response_model=OperationResponse)
def registry_login(
    payload: RegistryLoginRequest,
    manager: StackManager = Depends(get_stack_manager),
    db: Session = Depends(get_db),
) -> OperationResponse:
    registries = [registry.url for registry in payload.registries if registry.authentication]
    detail = {"registries": registries, "dockerhub": payload.dockerhub.authentication}
    try:
        manager.login(payload.dockerhub, payload.registries, payload.endpoint)
    except CommandExecutionError as exc:
        write_audit_log(
            db,
            action="registry.login",
            resource_type="registry",
            endpoint_url=payload.endpoint.url,
            status="failed",
            detail={**detail, "stderr": exc.stderr},
        )
        raise command_failed(exc) from exc

    write_audit_log(
        db,
        action="registry.login",
        resource_type="registry",
        endpoint_url=payload.endpoint.url,
        detail=detail,
    )
    return OperationResponse()


@router.post("/logout", response_model=OperationResponse)
def registry_logout(
    payload: RegistryLogoutRequest,
    manager: StackManager = Depends(get_stack_manager),
    db: Session = Depends(get_db),
) -> OperationResponse:
    try:
        manager.logout(payload.endpoint)
    except CommandExecutionError as exc:
        write_audit_log(
            db,
            action="registry.logout",
            resource_type="registry",
            endpoint_url=payload.endpoint.url,
            status="failed",
            detail={"stderr": exc.stderr},
        )
        raise command_failed(exc) from exc

    write_audit_log(db, action="registry.logout", resource_type="registry", endpoint_url=payload.endpoint.url)
    return OperationResponse()
