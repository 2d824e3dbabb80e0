"""
Shared fixtures.

The API runs against the in-memory bundle; every test starts from an empty one.
"""

import uuid

import pytest
from fastapi.testclient import TestClient

from coursepay.api.dependencies import _in_memory_bundle
from coursepay.application.interfaces.course_repo import CourseRecord
from coursepay.config import get_settings
from coursepay.main import app
from tests.factories import COURSE_PRICE, make_settings, make_token


@pytest.fixture(autouse=True)
def bundle():
    _in_memory_bundle.cache_clear()
    app.dependency_overrides[get_settings] = lambda: make_settings()
    yield _in_memory_bundle()
    app.dependency_overrides.clear()
    _in_memory_bundle.cache_clear()


@pytest.fixture
def client() -> TestClient:
    return TestClient(app)


@pytest.fixture
def user_id() -> str:
    return str(uuid.uuid4())


@pytest.fixture
def auth_headers(user_id) -> dict:
    return {"Authorization": f"Bearer {make_token(user_id)}"}


@pytest.fixture
def course(bundle) -> CourseRecord:
    record = CourseRecord(
        id=str(uuid.uuid4()),
        title="Python for Data Engineering",
        price=COURSE_PRICE,
    )
    bundle["course_repo"].add(record)
    return record


@pytest.fixture
def create_payment(client, auth_headers, course):
    """Creates a payment for `course` and returns the response body."""

    def _create(amount=COURSE_PRICE) -> dict:
        response = client.post(
            "/api/v1/payments",
            json={"courseId": course.id, "amount": str(amount)},
            headers=auth_headers,
        )
        assert response.status_code == 200, response.json()
        return response.json()

    return _create
