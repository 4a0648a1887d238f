# File: app/api/routes_health.py

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.api.deps import get_db
from app.db.session import ping_database

router = APIRouter(tags=["health"])


@router.get("/healthz", summary="Liveness + database check")
def healthz(db: Session = Depends(get_db)):
    ping_database(db)
    return {"status": "ok"}
