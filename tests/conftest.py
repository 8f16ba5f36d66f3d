import os

# baza testowa in-memory, ustawiona zanim app.data.database zbuduje engine
os.environ["DATABASE_URL"] = "sqlite://"

import pytest
from fastapi.testclient import TestClient

from app.api import create_app
from app.data.database import Base, SessionLocal, engine, init_db
from app.data.models import UserRole
from tests.factories import make_user


@pytest.fixture
def db():
    init_db()
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def seller(db):
    return make_user(db, "seller", UserRole.SELLER)


@pytest.fixture
def buyer(db):
    return make_user(db, "buyer")


@pytest.fixture
def client(db):
    with TestClient(create_app()) as c:
        yield c
