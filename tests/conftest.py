"""Shared pytest fixtures: in-memory database, homeowners, fixed clock."""

from datetime import date

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from dues.models import Base, User
from dues.services.months import FixedClock


@pytest.fixture
def db_session():
    """Create test database session."""
    engine = create_engine("sqlite:///:memory:")
    Base.metadata.create_all(engine)
    SessionLocal = sessionmaker(bind=engine)
    session = SessionLocal()
    yield session
    session.close()
    engine.dispose()


@pytest.fixture
def homeowner(db_session):
    """Create a homeowner at phase 1, block 4, lot 12."""
    user = User(name="Maria Santos", phase="1", block="4", lot="12")
    db_session.add(user)
    db_session.commit()
    return user


@pytest.fixture
def neighbor(db_session):
    """Create a second homeowner on the same block."""
    user = User(name="Jose Reyes", phase="1", block="4", lot="13")
    db_session.add(user)
    db_session.commit()
    return user


@pytest.fixture
def september_clock():
    """Clock frozen in mid September 2023."""
    return FixedClock(date(2023, 9, 18))
