from fastapi import APIRouter

from stackmgr.api.v1 import audit_logs, registries, stacks

api_router = APIRouter()
api_router.include_router(registries.router)
api_router.include_router(stacks.router)
api_router.include_router(audit_logs.router)
