from fastapi import APIRouter, Depends, Request
from sqlalchemy import func
from sqlalchemy.orm import Session

from jobboard.config import settings
from jobboard.database import get_db
from jobboard.dependencies import session_token
from jobboard.models.job import Job
from jobboard.services.session_service import session_manager

router = APIRouter(tags=["pages"])


@router.get("/")
async def landing(db: Session = Depends(get_db)):
    return {
        "name": "Euro Asia Global",
        "open_positions": db.query(func.count(Job.id)).scalar(),
        "jobs_url": f"{settings.api_prefix}/jobs",
        "apply_url": f"{settings.api_prefix}/apply",
        "refresh_interval_seconds": settings.job_refresh_seconds,
    }


# Everything below is reached only through the admin gate middleware.
@router.get("/admin")
@router.get("/admin/{section:path}")
async def admin_dashboard(request: Request, section: str = "", db: Session = Depends(get_db)):
    return {
        "section": section or "dashboard",
        "total_jobs": db.query(func.count(Job.id)).scalar(),
        "session_expires_in_seconds": session_manager.expires_in(session_token(request)),
        "refresh_interval_seconds": settings.job_refresh_seconds,
    }
