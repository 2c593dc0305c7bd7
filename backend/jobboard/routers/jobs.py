import logging
import uuid
from datetime import datetime, timezone

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from jobboard.database import get_db
from jobboard.dependencies import require_admin_session
from jobboard.models.job import Job
from jobboard.schemas.job import JobPayload, JobResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/jobs", tags=["jobs"])


def _job_to_response(job: Job) -> JobResponse:
    return JobResponse(
        id=job.id,
        title=job.title,
        location=job.location,
        type=job.type,
        salary=job.salary,
        category=job.category,
        requirements=list(job.requirements or []),
        deadline=job.deadline,
        vacancy=job.vacancy or 1,
        preferred_gender=job.preferred_gender or "Any",
        created_at=job.created_at,
    )


def _validated_record(req: JobPayload) -> dict:
    if req.missing_fields():
        raise HTTPException(status_code=400, detail="Required fields are missing")
    return req.to_record()


@router.get("", response_model=list[JobResponse])
async def list_jobs(db: Session = Depends(get_db)):
    try:
        jobs = db.query(Job).order_by(Job.created_at.desc()).all()
    except SQLAlchemyError:
        logger.exception("Failed to fetch jobs")
        return JSONResponse(content=[], status_code=500)
    return [_job_to_response(j) for j in jobs]


@router.get("/{job_id}", response_model=JobResponse)
async def get_job(job_id: str, db: Session = Depends(get_db)):
    job = db.query(Job).filter(Job.id == job_id).first()
    if not job:
        raise HTTPException(status_code=404, detail="Job not found")
    return _job_to_response(job)


@router.post(
    "",
    response_model=JobResponse,
    status_code=201,
    dependencies=[Depends(require_admin_session)],
)
async def create_job(req: JobPayload, db: Session = Depends(get_db)):
    record = _validated_record(req)
    job = Job(
        id=str(uuid.uuid4()),
        created_at=datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ"),
        **record,
    )
    db.add(job)
    db.commit()
    db.refresh(job)

    logger.info("Created job %s", job.id)
    return _job_to_response(job)


def _replace_job(job_id: str | None, req: JobPayload, db: Session) -> JobResponse:
    if not job_id:
        raise HTTPException(status_code=400, detail="Job ID is required")
    record = _validated_record(req)

    job = db.query(Job).filter(Job.id == job_id).first()
    if not job:
        raise HTTPException(status_code=404, detail="Job not found")

    # Full replace; id and created_at are never touched. Concurrent edits: last write wins.
    for key, value in record.items():
        setattr(job, key, value)
    db.commit()
    db.refresh(job)

    logger.info("Updated job %s", job.id)
    return _job_to_response(job)


def _delete_job(job_id: str | None, db: Session) -> dict:
    if not job_id:
        raise HTTPException(status_code=400, detail="Job ID is required")
    job = db.query(Job).filter(Job.id == job_id).first()
    if job:
        db.delete(job)
        db.commit()
        logger.info("Deleted job %s", job_id)
    return {"message": "Job deleted successfully"}


@router.put("", response_model=JobResponse, dependencies=[Depends(require_admin_session)])
async def update_job_by_query(req: JobPayload, id: str | None = None, db: Session = Depends(get_db)):
    return _replace_job(id, req, db)


@router.put("/{job_id}", response_model=JobResponse, dependencies=[Depends(require_admin_session)])
async def update_job(job_id: str, req: JobPayload, db: Session = Depends(get_db)):
    return _replace_job(job_id, req, db)


@router.delete("", dependencies=[Depends(require_admin_session)])
async def delete_job_by_query(id: str | None = None, db: Session = Depends(get_db)):
    return _delete_job(id, db)


@router.delete("/{job_id}", dependencies=[Depends(require_admin_session)])
async def delete_job(job_id: str, db: Session = Depends(get_db)):
    return _delete_job(job_id, db)
