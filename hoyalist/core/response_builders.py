from html import escape

from fastapi import Request, Response, status
from fastapi.responses import HTMLResponse, JSONResponse

from hoyalist.core.exceptions import BaseAPIException, ValidationError, ValidationErrorKind
from hoyalist.schemas.lead import ErrorResponse, LeadCreatedResponse
from hoyalist.services.lead_submission import LeadSubmissionResult

NO_STORE = "no-store, no-cache, must-revalidate, max-age=0"

GENERIC_FAILURE_MESSAGE = "Sorry, we could not save your request. Please try again."

_BACK_LINK = '<p><a href="/homeowners">Back to form</a></p>'

_VALIDATION_FRAGMENTS = {
    ValidationErrorKind.MISSING_REQUIRED: (
        "Missing information",
        "<p>Please provide name, email, ZIP code, and project description.</p>",
    ),
    ValidationErrorKind.INVALID_EMAIL: (
        "Email format",
        "<p>Please enter a valid email address (example: <b>name@email.com</b>).</p>",
    ),
    ValidationErrorKind.CONSENT_REQUIRED: (
        "Consent required",
        "<p>Please check the consent box to submit your request.</p>",
    ),
    ValidationErrorKind.INVALID_ZIP: (
        "ZIP code format",
        "<p>Please enter a 5-digit ZIP code (example: <b>06119</b>).</p>",
    ),
    ValidationErrorKind.INVALID_PHONE: (
        "Phone number format",
        "<p>If you add a phone number, please use this format:</p>\n<p><b>+18885551234</b></p>",
    ),
    ValidationErrorKind.INVALID_BUDGET: (
        "Budget format",
        "<p>If you add a budget, please use numbers only (example: <b>2500</b>).</p>",
    ),
}


def no_store(response: Response) -> Response:
    response.headers["Cache-Control"] = NO_STORE
    return response


def wants_json(request: Request) -> bool:
    return "application/json" in request.headers.get("accept", "").lower()


def render_validation_error_html(exc: ValidationError) -> str:
    title, body = _VALIDATION_FRAGMENTS[exc.kind]
    return f"<h2>{title}</h2>\n{body}\n{_BACK_LINK}\n"


def render_failure_html() -> str:
    return (
        "<h2>Sorry, we could not save your request.</h2>\n"
        "<p>Please try again.</p>\n"
        f"{_BACK_LINK}\n"
    )


def render_success_html(result: LeadSubmissionResult) -> str:
    return (
        "<h2>Thanks! Your project was submitted.</h2>\n"
        f"<p>Location saved for ZIP <b>{escape(result.zip)}</b>.</p>\n"
        '<p><a href="/go">Download the app</a></p>\n'
        '<p><a href="/homeowners">Submit another request</a></p>\n'
    )


def build_lead_success_response(request: Request, result: LeadSubmissionResult) -> Response:
    if wants_json(request):
        body = LeadCreatedResponse(uid=result.uid, zip=result.zip)
        response = JSONResponse(status_code=status.HTTP_200_OK, content=body.model_dump())
    else:
        response = HTMLResponse(status_code=status.HTTP_200_OK, content=render_success_html(result))
    return no_store(response)


def build_lead_error_response(request: Request, exc: BaseAPIException) -> Response:
    """Render a pipeline error; only validation errors expose their detail."""
    if isinstance(exc, ValidationError):
        code, message = exc.code, exc.message
        html = render_validation_error_html(exc)
        status_code = status.HTTP_400_BAD_REQUEST
    else:
        code, message = "submission_failed", GENERIC_FAILURE_MESSAGE
        html = render_failure_html()
        status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    if wants_json(request):
        body = ErrorResponse(code=code, message=message)
        response = JSONResponse(status_code=status_code, content=body.model_dump())
    else:
        response = HTMLResponse(status_code=status_code, content=html)
    return no_store(response)
