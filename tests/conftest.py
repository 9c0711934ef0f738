"""
Shared test fixtures
"""

import uuid

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from app.core.config import settings
from app.core.db import Base, get_db
from app.models import Activity, Event, Person, Tag
from app.utils.security import reset_rate_limiter
from main import app

# Test database setup
SQLALCHEMY_DATABASE_URL = "sqlite:///./test_app.db"
engine = create_engine(SQLALCHEMY_DATABASE_URL, connect_args={"check_same_thread": False})
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

@pytest.fixture(autouse=True)
def fast_deletes(monkeypatch):
    """Keep the artificial delete delay out of the test run"""
    monkeypatch.setattr(settings, "DELETE_DELAY_SECONDS", 0)
    reset_rate_limiter()
    yield
    reset_rate_limiter()

@pytest.fixture
def db_session():
    """Create test database session"""
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)

@pytest.fixture
def client(db_session):
    """API client bound to the test database"""
    def override_get_db():
        db = TestingSessionLocal()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()

@pytest.fixture
def sample_activity(db_session):
    """Create a sample activity"""
    activity = Activity(
        id=str(uuid.uuid4()),
        title="Board Game Night",
        description="Bring your favourite game",
        category="Social",
        city="Seattle",
        venue="The Game Room",
        latitude=47.6097,
        longitude=-122.3331,
    )
    db_session.add(activity)
    db_session.commit()
    db_session.refresh(activity)
    return activity

@pytest.fixture
def sample_event(db_session):
    """Create a sample event with organizers, tags and registrations"""
    organizer = Person(person_id=uuid.uuid4(), first_name="John", last_name="Doe")
    attendee = Person(person_id=uuid.uuid4(), first_name="Jane", last_name="Smith", age=30)
    tag = Tag(tag_id=uuid.uuid4(), tag_name="Music")

    event = Event(
        event_id=uuid.uuid4(),
        group_id=uuid.uuid4(),
        event_name="Test Event",
        event_description="Test Event Description",
        location="Test Location",
        group_name="Test Group",
        group_description="Test Group Description",
        organizers=[organizer],
        group_tags=[tag],
        tags=[tag],
        registration=[attendee],
    )
    db_session.add(event)
    db_session.commit()
    db_session.refresh(event)
    return event
