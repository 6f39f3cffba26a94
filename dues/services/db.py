"""Database wiring: engine and session from DuesConfig, SQL-backed manager."""

from typing import Generator

from sqlalchemy import Engine, create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from dues.models import Base
from dues.services.config import DuesConfig
from dues.services.due_service import SqlDueOracle
from dues.services.ledger_service import SqlPaymentLedger
from dues.services.months import Clock
from dues.services.payment_manager import PaymentManager


def init_db(engine: Engine) -> None:
    """Create all dues tables that do not exist yet."""
    Base.metadata.create_all(engine)


def create_dues_engine(config: DuesConfig) -> Engine:
    """Create an engine for config.database_url.

    In-memory SQLite shares one connection so every session sees the same tables.
    """
    if config.database_url.startswith("sqlite"):
        kwargs = {"connect_args": {"check_same_thread": False}}
        if ":memory:" in config.database_url:
            kwargs["poolclass"] = StaticPool
        return create_engine(config.database_url, **kwargs)
    return create_engine(config.database_url, pool_pre_ping=True)


def create_session(config: DuesConfig) -> Generator[Session, None, None]:
    """
    Yield a session on config.database_url with the dues tables created.

    Example:
        ```python
        config = load_config()
        for session in create_session(config):
            manager = build_payment_manager(session)
        ```
    """
    engine = create_dues_engine(config)
    init_db(engine)
    SessionLocal = sessionmaker(bind=engine, autoflush=False)
    session = SessionLocal()

    try:
        yield session
    finally:
        session.close()
        engine.dispose()


def build_payment_manager(session: Session, clock: Clock | None = None) -> PaymentManager:
    """Wire a PaymentManager to the SQL ledger and rate schedule on session."""
    return PaymentManager(SqlPaymentLedger(session), SqlDueOracle(session), clock=clock)
