import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

import taskboard.models as models
import taskboard.schemas as schemas
from taskboard.database import Base, seed_boards
from taskboard.services import users as user_service

TEST_DATABASE_URL = "sqlite://"
engine = create_engine(
    TEST_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture(autouse=True)
def db_session() -> Session:
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def boards(db_session: Session):
    seed_boards(db_session, ["Open", "In Progress", "Done", "Sprint1"])
    return {board.name: board for board in db_session.query(models.Board).all()}


def register(session: Session, username: str, password: str = "secret123") -> models.User:
    user_in = schemas.UserCreate(
        username=username,
        email=f"{username}@example.com",
        password=password,
        first_name=username.capitalize(),
        last_name="Tester",
    )
    return user_service.register_user(session, user_in)


@pytest.fixture
def maria(db_session: Session) -> models.User:
    return register(db_session, "maria")


@pytest.fixture
def peter(db_session: Session) -> models.User:
    return register(db_session, "peter")
