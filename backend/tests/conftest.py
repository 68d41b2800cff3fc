"""
LeadTrack - Test Configuration and Fixtures
"""
import os
from datetime import datetime
from typing import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport
from sqlalchemy.ext.asyncio import create_async_engine, AsyncSession, async_sessionmaker
from sqlalchemy.pool import NullPool
from faker import Faker

# Set testing environment before the app reads its settings
os.environ['DATABASE_URL'] = 'sqlite+aiosqlite:///./test.db'
os.environ['SECRET_KEY'] = 'test-secret-key-for-testing-only'
os.environ['JWT_SECRET_KEY'] = 'test-jwt-secret-key-for-testing'
os.environ['LOG_FILE'] = ''
os.environ['RATE_LIMIT_ENABLED'] = 'false'
os.environ['BCRYPT_ROUNDS'] = '4'
os.environ['SEED_DEFAULT_PROFILES'] = 'false'

from app.main import app
from app.core.database import Base, get_db
from app.core.security import get_password_hash, create_token_pair
from app.models import User, UserRole, Profile, LeadGenAssignment, SalesAssignment

fake = Faker()

TEST_PASSWORD = 'testpassword123'

# Test database setup
TEST_DATABASE_URL = 'sqlite+aiosqlite:///./test.db'
test_engine = create_async_engine(TEST_DATABASE_URL, echo=False, poolclass=NullPool)
TestSessionLocal = async_sessionmaker(
    bind=test_engine,
    class_=AsyncSession,
    expire_on_commit=False
)


async def create_user(db: AsyncSession, role: UserRole, **overrides) -> User:
    """Insert a user with a known password"""
    data = {
        'username': fake.unique.user_name(),
        'hashed_password': get_password_hash(TEST_PASSWORD),
        'name': fake.name(),
        'email': fake.email(),
        'role': role,
        'is_active': True,
    }
    data.update(overrides)
    user = User(**data)
    db.add(user)
    await db.commit()
    await db.refresh(user)
    return user


async def create_profile(db: AsyncSession, **overrides) -> Profile:
    data = {
        'name': fake.job(),
        'description': fake.sentence(),
        'resume_content': fake.paragraph(),
    }
    data.update(overrides)
    profile = Profile(**data)
    db.add(profile)
    await db.commit()
    await db.refresh(profile)
    return profile


def headers_for(user: User) -> dict:
    """Bearer headers for a user"""
    token = create_token_pair(user)['access_token']
    return {'Authorization': f'Bearer {token}'}


@pytest_asyncio.fixture
async def db_session() -> AsyncGenerator[AsyncSession, None]:
    """Create a fresh database for each test"""
    async with test_engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    async with TestSessionLocal() as session:
        yield session
        await session.rollback()

    async with test_engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)


@pytest_asyncio.fixture
async def client(db_session: AsyncSession) -> AsyncGenerator[AsyncClient, None]:
    """Create test client with database override"""
    async def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url='http://test') as ac:
        yield ac

    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def manager_user(db_session: AsyncSession) -> User:
    return await create_user(db_session, UserRole.MANAGER)


@pytest_asyncio.fixture
async def lead_gen_user(db_session: AsyncSession) -> User:
    return await create_user(db_session, UserRole.LEAD_GEN, created_at=datetime(2025, 2, 1, 9, 0))


@pytest_asyncio.fixture
async def sales_user(db_session: AsyncSession) -> User:
    return await create_user(db_session, UserRole.SALES)


@pytest_asyncio.fixture
async def profile(db_session: AsyncSession) -> Profile:
    return await create_profile(db_session, name='Software Engineer')


@pytest_asyncio.fixture
async def lead_gen_assignment(db_session: AsyncSession, lead_gen_user: User, profile: Profile) -> LeadGenAssignment:
    assignment = LeadGenAssignment(user_id=lead_gen_user.id, profile_id=profile.id)
    db_session.add(assignment)
    await db_session.commit()
    await db_session.refresh(assignment)
    return assignment


@pytest_asyncio.fixture
async def sales_assignment(db_session: AsyncSession, sales_user: User, profile: Profile) -> SalesAssignment:
    assignment = SalesAssignment(user_id=sales_user.id, profile_id=profile.id)
    db_session.add(assignment)
    await db_session.commit()
    await db_session.refresh(assignment)
    return assignment


@pytest.fixture
def manager_headers(manager_user: User) -> dict:
    return headers_for(manager_user)


@pytest.fixture
def lead_gen_headers(lead_gen_user: User) -> dict:
    return headers_for(lead_gen_user)


@pytest.fixture
def sales_headers(sales_user: User) -> dict:
    return headers_for(sales_user)


@pytest.fixture
def make_user(db_session: AsyncSession):
    """Factory: await make_user(UserRole.SALES, name='...')"""
    async def _make(role: UserRole, **overrides) -> User:
        return await create_user(db_session, role, **overrides)
    return _make


@pytest.fixture
def make_profile(db_session: AsyncSession):
    """Factory: await make_profile(name='...')"""
    async def _make(**overrides) -> Profile:
        return await create_profile(db_session, **overrides)
    return _make


@pytest.fixture
def auth_headers():
    """Factory: auth_headers(user) -> bearer headers"""
    return headers_for


def build_pdf(text: str) -> bytes:
    """Single page PDF showing one line of Helvetica text"""
    stream = b"BT /F1 12 Tf 72 720 Td (" + text.encode("latin-1") + b") Tj ET"
    objects = [
        b"<< /Type /Catalog /Pages 2 0 R >>",
        b"<< /Type /Pages /Kids [3 0 R] /Count 1 >>",
        b"<< /Type /Page /Parent 2 0 R /MediaBox [0 0 612 792] /Contents 4 0 R "
        b"/Resources << /Font << /F1 5 0 R >> >> >>",
        b"<< /Length %d >>\nstream\n" % len(stream) + stream + b"\nendstream",
        b"<< /Type /Font /Subtype /Type1 /BaseFont /Helvetica >>",
    ]

    out = bytearray(b"%PDF-1.4\n")
    offsets = []
    for number, body in enumerate(objects, start=1):
        offsets.append(len(out))
        out += b"%d 0 obj\n" % number + body + b"\nendobj\n"

    xref_offset = len(out)
    out += b"xref\n0 %d\n" % (len(objects) + 1)
    out += b"0000000000 65535 f \n"
    for offset in offsets:
        out += b"%010d 00000 n \n" % offset
    out += b"trailer\n<< /Size %d /Root 1 0 R >>\nstartxref\n%d\n%%EOF\n" % (len(objects) + 1, xref_offset)
    return bytes(out)


@pytest.fixture
def pdf_factory():
    """Factory: pdf_factory('Jane Doe Resume') -> PDF bytes"""
    return build_pdf
