# hoyalist/routes/__init__.py
"""
HTTP route handlers organized by domain.
"""

from hoyalist.routes.health import router as health_router
from hoyalist.routes.leads import router as leads_router
from hoyalist.routes.pages import router as pages_router
from hoyalist.routes.redirects import router as redirects_router

__all__ = [
    "health_router",
    "leads_router",
    "pages_router",
    "redirects_router",
]
