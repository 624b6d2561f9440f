import os
import uuid
from collections import defaultdict

import httpx
import pytest

os.environ.setdefault("ENVIRONMENT", "testing")

from hoyalist.services.geocoding import GeocoderClient  # noqa: E402
from hoyalist.services.lead_store import LeadPersister  # noqa: E402


HARTFORD_RESPONSE = {
    "status": "OK",
    "results": [
        {
            "address_components": [
                {"long_name": "06119", "short_name": "06119", "types": ["postal_code"]},
                {"long_name": "Hartford", "short_name": "Hartford", "types": ["locality", "political"]},
                {"long_name": "Hartford County", "short_name": "Hartford County",
                 "types": ["administrative_area_level_2", "political"]},
                {"long_name": "Connecticut", "short_name": "CT",
                 "types": ["administrative_area_level_1", "political"]},
                {"long_name": "United States", "short_name": "US", "types": ["country", "political"]},
            ],
            "formatted_address": "Hartford, CT 06119, USA",
            "geometry": {"location": {"lat": 41.7626, "lng": -72.7175}},
        }
    ],
}

VALID_FORM = {
    "name": "Dana Homeowner",
    "email": "Dana@Example.com",
    "phone": "+18885551234",
    "project": "Replace the back deck",
    "zip": "06119",
    "readyToHire": "yes",
    "urgent": "no",
    "budgetText": "$2,500",
    "concent": "yes",
}


class FakeDocumentReference:
    def __init__(self, collection: str, doc_id: str):
        self.collection = collection
        self.id = doc_id


class FakeCollectionReference:
    def __init__(self, name: str):
        self.name = name

    def document(self, doc_id=None):
        return FakeDocumentReference(self.name, doc_id or uuid.uuid4().hex[:20])


class FakeWriteBatch:
    def __init__(self, db: "FakeFirestore"):
        self._db = db
        self._writes = []

    def set(self, ref, data):
        self._writes.append((ref, dict(data)))

    async def commit(self):
        self._db.commits += 1
        if self._db.commit_error is not None:
            raise self._db.commit_error
        for ref, data in self._writes:
            self._db.documents[ref.collection][ref.id] = data


class FakeFirestore:
    """In-memory stand-in for the async Firestore client (collections + batches)."""

    def __init__(self):
        self.documents = defaultdict(dict)
        self.commit_error = None
        self.commits = 0

    def collection(self, name):
        return FakeCollectionReference(name)

    def batch(self):
        return FakeWriteBatch(self)

    def count(self, collection):
        return len(self.documents[collection])


class GeocodeStub:
    """Mock transport handler that records requests."""

    def __init__(self, status_code=200, payload=None, exc=None):
        self.status_code = status_code
        self.payload = HARTFORD_RESPONSE if payload is None else payload
        self.exc = exc
        self.requests = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.exc is not None:
            raise self.exc
        return httpx.Response(self.status_code, json=self.payload)


def make_geocoder(stub: GeocodeStub, api_key="test-key") -> GeocoderClient:
    http_client = httpx.AsyncClient(transport=httpx.MockTransport(stub))
    return GeocoderClient(api_key=api_key, http_client=http_client, timeout=2.0)


@pytest.fixture
def fake_db():
    return FakeFirestore()


@pytest.fixture
def persister(fake_db):
    return LeadPersister(fake_db)


@pytest.fixture
def geocode_stub():
    return GeocodeStub()


@pytest.fixture
def geocoder(geocode_stub):
    return make_geocoder(geocode_stub)


@pytest.fixture
def valid_form():
    return dict(VALID_FORM)
