"""Registration form serving and submission endpoints"""

import logging
from pathlib import Path

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse, Response
from fastapi.templating import Jinja2Templates
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.formparsers import MultiPartException

from retreat_registration.config import config
from retreat_registration.models.choices import (
    Affiliation,
    DramaMinistry,
    Gender,
    HowHeard,
    WorshipMinister,
)
from retreat_registration.models.result import HandlerOutcome, SubmissionResult
from retreat_registration.services.registration_service import (
    RegistrationService,
    get_registration_service,
    parse_registration_form,
)

router = APIRouter()

# Get template directory relative to this file
template_dir = Path(__file__).parent.parent / "templates"
templates = Jinja2Templates(directory=str(template_dir))

logger = logging.getLogger(__name__)

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Headers": "authorization, x-client-info, apikey, content-type",
}

STATUS_BY_OUTCOME = {
    HandlerOutcome.COMPLETED: 200,
    HandlerOutcome.COMPLETED_NO_PHOTO: 200,
    HandlerOutcome.REJECTED: 400,
    HandlerOutcome.FAILED: 500,
}


@router.get("/", include_in_schema=False)
async def serve_registration_form(request: Request):
    """Serve the registration form page"""
    return templates.TemplateResponse(
        request,
        "form.html",
        {
            "event_title": config["event_title"],
            "home_url": config["home_url"],
            "genders": [g.value for g in Gender],
            "affiliations": [a.value for a in Affiliation],
            "how_heard_options": [h.value for h in HowHeard],
            "drama_options": [d.value for d in DramaMinistry],
            "worship_options": [w.value for w in WorshipMinister],
        },
    )


@router.options("/submit-registration")
async def registration_preflight():
    """Answer CORS preflight requests before doing any work"""
    return Response(status_code=200, headers=CORS_HEADERS)


@router.post("/submit-registration")
async def submit_registration(
    request: Request,
    registration_service: RegistrationService = Depends(get_registration_service),
):
    """Handle a registration form submission"""
    try:
        form_data = await request.form()
        values = await parse_registration_form(
            form_data, registration_service.photo_service.max_photo_bytes
        )
        outcome, result = await registration_service.process(values)
    except (MultiPartException, StarletteHTTPException) as e:
        # Starlette reports an unparsable multipart body as a 400 HTTPException
        detail = getattr(e, "detail", None) or getattr(e, "message", str(e))
        logger.warning(f"Rejected malformed registration form: {detail}")
        outcome = HandlerOutcome.REJECTED
        result = SubmissionResult(
            success=False, error=f"Malformed registration form: {detail}"
        )
    except Exception as e:
        logger.error(f"Error processing registration: {type(e).__name__}: {e}")
        outcome = HandlerOutcome.FAILED
        result = SubmissionResult(success=False, error=f"Registration failed: {e}")

    return JSONResponse(
        result.to_response(),
        status_code=STATUS_BY_OUTCOME[outcome],
        headers=CORS_HEADERS,
    )
