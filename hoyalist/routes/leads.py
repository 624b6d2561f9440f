from fastapi import APIRouter, Depends, Request
from fastapi.responses import Response

from hoyalist.core.exceptions import GeocodeError, PersistenceError, ValidationError
from hoyalist.core.logging import get_structlog_logger
from hoyalist.core.response_builders import build_lead_error_response, build_lead_success_response
from hoyalist.routes.deps import get_geocoder, get_lead_persister
from hoyalist.services.geocoding import GeocoderClient
from hoyalist.services.lead_store import LeadPersister
from hoyalist.services.lead_submission import submit_lead

router = APIRouter(tags=["leads"])


@router.post("/lead", summary="Submit a homeowner project lead")
@router.post("/lead/", include_in_schema=False)
async def create_lead(
    request: Request,
    geocoder: GeocoderClient = Depends(get_geocoder),
    persister: LeadPersister = Depends(get_lead_persister),
) -> Response:
    logger = get_structlog_logger(__name__).bind(route="/lead", action="submit")

    form = await request.form()

    try:
        result = await submit_lead(form=form, geocoder=geocoder, persister=persister)
    except (ValidationError, GeocodeError, PersistenceError) as e:
        return build_lead_error_response(request, e)

    logger.info("lead.submitted", uid=result.uid, zip=result.zip)
    return build_lead_success_response(request, result)
