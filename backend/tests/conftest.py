import os
import sys
import tempfile
from pathlib import Path

# Add backend directory to Python path FIRST
backend_dir = Path(__file__).parent.parent
sys.path.insert(0, str(backend_dir))

# Keep the app's own engine and log files away from the working directory
os.environ.setdefault("EMPLOYEES_DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("EMPLOYEES_LOG_DIR", tempfile.mkdtemp(prefix="employees-logs-"))

# Now import after path is set
import pytest
import pytest_asyncio
from decimal import Decimal
from sqlalchemy.ext.asyncio import async_sessionmaker
from sqlalchemy.pool import StaticPool

from database import build_engine
from init_db import init_database
from models import Employee
from repositories import EmployeeRepository
from tests.fakes import FakeEmployeeRepository


@pytest_asyncio.fixture
async def db_engine():
    """Create in-memory database for testing"""
    engine = build_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    await init_database(engine)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(db_engine):
    SessionLocal = async_sessionmaker(bind=db_engine, expire_on_commit=False)
    async with SessionLocal() as session:
        yield session


@pytest.fixture
def employee_repository(db_session):
    return EmployeeRepository(db_session)


@pytest.fixture
def fake_repository():
    return FakeEmployeeRepository()


@pytest.fixture
def mahmoud():
    return Employee(id=1, first_name="Mahmoud", middle_name="Ali", last_name="Elgendi",
                    salary=Decimal("5000.00"))


@pytest.fixture
def omar():
    return Employee(id=2, first_name="Omar", middle_name="Fuad", last_name="Tameemi",
                    salary=Decimal("4200.50"), manager_id=1)
