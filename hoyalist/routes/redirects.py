from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import RedirectResponse, Response

from hoyalist.core.logging import get_structlog_logger
from hoyalist.core.response_builders import no_store
from hoyalist.routes.deps import get_app_store_links
from hoyalist.services.redirects import AppStoreLinks, resolve_download_redirect, resolve_go_redirect

logger = get_structlog_logger(__name__)

router = APIRouter(tags=["redirects"])


def _redirect(url: str) -> Response:
    return no_store(RedirectResponse(url, status_code=status.HTTP_302_FOUND))


@router.get("/download", summary="Redirect to the app store page for this device")
@router.get("/download/", include_in_schema=False)
async def download(request: Request, links: AppStoreLinks = Depends(get_app_store_links)) -> Response:
    target = resolve_download_redirect(request.headers.get("user-agent"), links)
    logger.debug("redirect.download", target=target)
    return _redirect(target)


@router.get("/go", summary="Open the app store directly for this device")
@router.get("/go/", include_in_schema=False)
async def go(request: Request, links: AppStoreLinks = Depends(get_app_store_links)) -> Response:
    target = resolve_go_redirect(request.headers.get("user-agent"), links)
    logger.debug("redirect.go", target=target)
    return _redirect(target)
