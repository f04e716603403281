import asyncio
import os
import sys
from datetime import timedelta

import pytest

# Add backend directory to path
sys.path.insert(0, os.path.abspath(os.path.dirname(__file__) + '/..'))
os.environ.setdefault("APP_ENV", "testing")

from fastapi.testclient import TestClient

from discoverzim.config.settings import TestingConfig
from discoverzim.fastapi_app import create_fastapi_app
from discoverzim.setup.ioc import create_container
from fakes import FakeStore, FakeStoreProvider
from jwt_generation import generate_access_token

USER_ID = "user-1"
ADMIN_ID = "admin-1"


def token_for(user_id=USER_ID, email="traveller@example.com", **kwargs):
    kwargs.setdefault("secret", TestingConfig.SUPABASE_JWT_SECRET)
    kwargs.setdefault("audience", TestingConfig.SUPABASE_JWT_AUDIENCE)
    return generate_access_token(user_id=user_id, email=email, **kwargs)


def run(coroutine):
    """Drive a coroutine to completion on a fresh event loop."""
    return asyncio.run(coroutine)


@pytest.fixture()
def store():
    """A backend holding one plain user, one admin and a small catalogue."""
    return FakeStore(
        profiles=[
            {"id": USER_ID, "email": "traveller@example.com", "role": "USER"},
            {"id": ADMIN_ID, "email": "admin@example.com", "role": "ADMIN"},
        ],
        destinations=[
            {"id": "dest-falls", "name": "Victoria Falls", "location": "Victoria Falls",
             "description": "The smoke that thunders", "price": 50, "is_featured": True},
            {"id": "dest-zimbabwe", "name": "Great Zimbabwe", "location": "Masvingo",
             "description": "Medieval stone city", "price": 20, "is_featured": False},
        ],
        events=[
            {"id": "event-hifa", "title": "Harare Arts Festival", "location": "Harare",
             "start_date": "2030-04-28T09:00:00+00:00"},
            {"id": "event-old", "title": "Past Carnival", "location": "Masvingo",
             "start_date": "2020-01-01T09:00:00+00:00"},
        ],
        accommodations=[
            {"id": "acc-lodge", "name": "Safari Lodge", "location": "Hwange",
             "description": "Lodge by the waterhole", "price_per_night": 100,
             "max_guests": 4, "is_featured": True},
            {"id": "acc-hotel", "name": "Falls Hotel", "location": "Victoria Falls",
             "description": "Colonial hotel", "price_per_night": 250, "is_featured": True},
        ],
    )


@pytest.fixture()
def app(store):
    """Create a FastAPI app wired to the in-memory store."""
    return create_fastapi_app(create_container(TestingConfig, FakeStoreProvider(store)))


@pytest.fixture()
def client(app):
    """A test client for the FastAPI app."""
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture()
def auth_headers():
    """Authentication headers for a plain user."""
    return {"Authorization": f"Bearer {token_for()}"}


@pytest.fixture()
def admin_headers():
    """Authentication headers for an administrator."""
    return {"Authorization": f"Bearer {token_for(ADMIN_ID, 'admin@example.com')}"}


@pytest.fixture()
def expired_headers():
    return {"Authorization": f"Bearer {token_for(expires_in=timedelta(seconds=-60))}"}
