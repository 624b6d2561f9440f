from fastapi import APIRouter, status
from fastapi.responses import FileResponse, RedirectResponse, Response

from hoyalist.core.config import settings
from hoyalist.core.response_builders import no_store

router = APIRouter(tags=["pages"])


@router.get("/", include_in_schema=False)
async def root() -> Response:
    return no_store(RedirectResponse(settings.landing_path, status_code=status.HTTP_302_FOUND))


@router.get("/homeowners", summary="Lead capture form")
@router.get("/homeowners/", include_in_schema=False)
async def homeowners_page() -> Response:
    page = settings.public_path() / "homeowners.html"
    return no_store(FileResponse(page, media_type="text/html"))
