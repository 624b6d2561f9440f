# hoyalist/db/firestore.py
from __future__ import annotations

from typing import Optional

import firebase_admin
from firebase_admin import credentials, firestore_async
from google.cloud.firestore import AsyncClient

from hoyalist.core.config import Settings
from hoyalist.core.logging import get_structlog_logger

logger = get_structlog_logger(__name__)

FIREBASE_APP_NAME = "hoyalist"

# Global app/client instances
firebase_app: Optional[firebase_admin.App] = None
firestore_client: Optional[AsyncClient] = None


def init_firestore(settings: Settings) -> AsyncClient:
    """Initialise the Firebase Admin app and its async Firestore client."""
    global firebase_app, firestore_client

    if firestore_client is not None:
        return firestore_client

    cred = credentials.Certificate(settings.service_account_info())
    options = {}
    if settings.firebase_project_id:
        options["projectId"] = settings.firebase_project_id

    firebase_app = firebase_admin.initialize_app(cred, options or None, name=FIREBASE_APP_NAME)
    firestore_client = firestore_async.client(app=firebase_app)
    logger.info("firestore.initialized", project_id=firebase_app.project_id)
    return firestore_client


def get_firestore() -> Optional[AsyncClient]:
    return firestore_client


async def close_firestore() -> None:
    global firebase_app, firestore_client

    if firestore_client is not None:
        # The gRPC transport only exists once the client has made a call.
        transport = getattr(firestore_client, "_transport", None)
        if transport is not None:
            await transport.close()
    if firebase_app is not None:
        firebase_admin.delete_app(firebase_app)
        logger.info("firestore.closed")
    firebase_app = None
    firestore_client = None
