import logging
from contextlib import asynccontextmanager
from fastapi import Depends, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, RedirectResponse
from sqlalchemy import func
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from jobboard.config import settings
from jobboard.database import get_db
from jobboard.dependencies import is_admin_path, session_token
from jobboard.models.job import Job
from jobboard.routers import applications, auth, jobs, pages
from jobboard.services.session_service import session_manager

logger = logging.getLogger("jobboard")


def configure_logging():
    logging.basicConfig(format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    logger.setLevel(settings.log_level.upper())


@asynccontextmanager
async def lifespan(app: FastAPI):
    configure_logging()
    try:
        from jobboard.database import get_engine
        get_engine()
        logger.info("Job store ready at %s", settings.db_path)
    except SQLAlchemyError as exc:
        logger.error("Could not open job store: %s", exc)
    yield
    session_manager.terminate_all()


app = FastAPI(
    title="Euro Asia Global Job Board",
    description="Recruitment agency job board with a minimal admin API",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def admin_gate(request: Request, call_next):
    # Deep links under /admin are gated too, not only the entry page.
    if is_admin_path(request.url.path) and not session_manager.validate(session_token(request)):
        return RedirectResponse(url="/", status_code=307)
    return await call_next(request)


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    return JSONResponse(
        status_code=400,
        content={
            "detail": "Required fields are missing or invalid",
            "errors": [
                {"loc": list(err.get("loc", ())), "msg": err.get("msg", "")}
                for err in exc.errors()
            ],
        },
    )


@app.exception_handler(SQLAlchemyError)
async def store_error_handler(request: Request, exc: SQLAlchemyError):
    logger.error("Job store failure on %s %s", request.method, request.url.path, exc_info=exc)
    return JSONResponse(status_code=500, content={"detail": "Internal server error"})


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
    logger.error("Unhandled error on %s %s", request.method, request.url.path, exc_info=exc)
    return JSONResponse(status_code=500, content={"detail": "Internal server error"})


app.include_router(jobs.router, prefix=settings.api_prefix)
app.include_router(auth.router, prefix=settings.api_prefix)
app.include_router(applications.router, prefix=settings.api_prefix)
app.include_router(pages.router)


@app.get("/health")
async def health(db: Session = Depends(get_db)):
    try:
        job_count = db.query(func.count(Job.id)).scalar()
    except SQLAlchemyError as exc:
        logger.error("Health check could not reach job store: %s", exc)
        return JSONResponse(
            status_code=500,
            content={"status": "error", "message": "Database connection failed"},
        )
    return {"status": "ok", "version": "0.1.0", "job_count": job_count}


def run():
    import uvicorn
    uvicorn.run(app, host=settings.host, port=settings.port)


if __name__ == "__main__":
    run()
