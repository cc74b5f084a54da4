from typing import Any

from sqlalchemy.orm import Session

from stackmgr.models.audit_log import AuditLog


def write_audit_log(
    db: Session,
    *,
    action: str,
    resource_type: str,
    resource_id: str | None = None,
    endpoint_url: str | None = None,
    status: str = "success",
    detail: dict[str, Any] | None = None,
) -> None:
    log = AuditLog(
        action=action,
        resource_type=resource_type,
        resource_id=resource_id,
        endpoint_url=endpoint_url,
        status=status,
        detail=detail,
    )
    db.add(log)
    db.commit()
