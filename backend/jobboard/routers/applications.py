import logging

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from jobboard.schemas.application import ApplicationRequest, ApplicationResult
from jobboard.services.mail_service import DeliveryError, send_application_email

logger = logging.getLogger(__name__)

router = APIRouter(tags=["applications"])


@router.post("/apply", response_model=ApplicationResult)
def submit_application(req: ApplicationRequest):
    if not req.is_complete():
        return JSONResponse(
            status_code=400,
            content={"success": False, "message": "All fields are required"},
        )

    try:
        send_application_email(
            name=req.name,
            email=req.email,
            mobile=req.mobile,
            qualifications=req.qualifications,
            job_title=req.jobTitle,
        )
    except DeliveryError as exc:
        logger.error("Application submission failed: %s", exc)
        return JSONResponse(
            status_code=500,
            content={"success": False, "message": "Failed to submit application"},
        )

    return ApplicationResult(success=True, message="Application submitted successfully")
