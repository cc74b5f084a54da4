from stackmgr.db.base import Base
from stackmgr.db.session import engine
from stackmgr.models import AuditLog  # noqa: F401


def init_db() -> None:
    Base.metadata.create_all(bind=engine)
