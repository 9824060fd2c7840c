from typing import Any, Generator
from sqlmodel import SQLModel, create_engine, Session
from qod.config import settings

# SQLite connections are shared with FastAPI's worker threads
connect_args: dict[str, Any] = (
    {"check_same_thread": False} if settings.database_url.startswith("sqlite") else {}
)

# Create synchronous engine using settings
engine = create_engine(
    settings.database_url,
    echo=settings.db_echo,
    connect_args=connect_args,
)


# Function to create all tables
def create_db_and_tables() -> None:
    # Register table models on the metadata before creating
    import qod.repositories.models  # noqa: F401

    SQLModel.metadata.create_all(engine)


# Generator to provide DB sessions
def get_session() -> Generator[Session, None, None]:
    with Session(engine) as session:
        yield session
