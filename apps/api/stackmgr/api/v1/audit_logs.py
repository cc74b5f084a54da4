from fastapi import APIRouter, Depends, Query
from sqlalchemy import desc, select
from sqlalchemy.orm import Session

from stackmgr.db.session import get_db
from stackmgr.models.audit_log import AuditLog
from stackmgr.schemas.audit import AuditLogResponse

router = APIRouter(prefix="/audit-logs", tags=["audit-logs"])


@router.get("", response_model=list[AuditLogResponse])
def list_audit_logs(
    action: str | None = None,
    resource_type: str | None = None,
    status: str | None = None,
    limit: int = Query(default=200, ge=1, le=1000),
    db: Session = Depends(get_db),
) -> list[AuditLogResponse]:
    stmt = select(AuditLog)
    if action:
        stmt = stmt.where(AuditLog.action == action)
    if resource_type:
        stmt = stmt.where(AuditLog.resource_type == resource_type)
    if status:
        stmt = stmt.where(AuditLog.status == status)
    stmt = stmt.order_by(desc(AuditLog.created_at), desc(AuditLog.id)).limit(limit)

    records = list(db.scalars(stmt))
    return [
        AuditLogResponse(
            id=rec.id,
            action=rec.action,
            resource_type=rec.resource_type,
            resource_id=rec.resource_id,
            endpoint_url=rec.endpoint_url,
            status=rec.status,
            detail=rec.detail,
            created_at=rec.created_at,
        )
        for rec in records
    ]
