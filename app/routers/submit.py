"""Contact submission endpoint."""

import logging

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from app.models.responses import ErrorResponse, SuccessResponse
from app.models.submission import Invalid
from app.services.validation import validate_submission
from app.utils.body import parse_submission_body

logger = logging.getLogger("intake.submit")

router = APIRouter(tags=["submit"])


@router.post(
    "/submit",
    response_model=SuccessResponse,
    responses={400: {"model": ErrorResponse, "description": "Validation failed"}},
)
async def submit(request: Request):
    """Validate a single contact record sent as JSON or form data.

    Only the first failing rule is reported. On success the submitted fields
    are echoed back unchanged.
    """
    record = await parse_submission_body(request)
    outcome = validate_submission(record)

    if isinstance(outcome, Invalid):
        logger.info(f"Submission rejected: {outcome.code.value}")
        return JSONResponse(
            status_code=400,
            content=ErrorResponse(code=outcome.code.value, error=outcome.message).model_dump(),
        )

    logger.info("Submission accepted")
    return JSONResponse(status_code=200, content=SuccessResponse(data=outcome.data).model_dump())
