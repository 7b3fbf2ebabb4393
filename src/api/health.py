"""Health check endpoint."""

from fastapi import APIRouter, Depends, Request
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from src.db.database import get_db

router = APIRouter()


@router.get("/health")
def health_check(request: Request, db: Session = Depends(get_db)) -> dict[str, str]:
    """Return application, engine and database health status."""
    engine = getattr(request.app.state, "engine", None)
    engine_status = "ready" if engine is not None else "uninitialized"
    try:
        db.execute(text("SELECT 1"))
        return {"status": "ok", "database": "connected", "engine": engine_status}
    except SQLAlchemyError:
        return {"status": "error", "database": "disconnected", "engine": engine_status}
