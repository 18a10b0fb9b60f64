import os

# 앱 import 전에 설정 (Settings는 import 시점에 읽힘)
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["RATE_LIMIT_ENABLED"] = "false"

import pytest
from fastapi.testclient import TestClient
from sqlmodel import Session, SQLModel, create_engine
from sqlmodel.pool import StaticPool

from movies_api.main import app
from movies_api.deps.db import get_db
from movies_api.db.models import Genre, Movie

# 테스트용 인메모리 SQLite DB
TEST_DATABASE_URL = "sqlite:///:memory:"

engine = create_engine(
    TEST_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)

PNG_BYTES = b"\x89PNG\r\n\x1a\n" + b"\x00" * 64

# DB 초기화 및 세션 오버라이드
@pytest.fixture(name="session")
def session_fixture():
    SQLModel.metadata.create_all(engine)
    with Session(engine) as session:
        yield session
    SQLModel.metadata.drop_all(engine)

# 클라이언트 생성 (의존성 주입 오버라이드)
@pytest.fixture(name="client")
def client_fixture(session: Session):
    def get_session_override():
        return session

    app.dependency_overrides[get_db] = get_session_override

    client = TestClient(app)
    yield client
    app.dependency_overrides.clear()

# [Helper] 장르 직접 생성
@pytest.fixture
def make_genre(session: Session):
    def _make(name: str) -> Genre:
        genre = Genre(name=name)
        session.add(genre)
        session.commit()
        session.refresh(genre)
        return genre
    return _make

# [Helper] 영화 직접 생성
@pytest.fixture
def make_movie(session: Session):
    def _make(genre: Genre, title: str = "Movie", rate: float = 7.0) -> Movie:
        movie = Movie(
            title=title,
            year=2020,
            rate=rate,
            storeline=f"Storeline of {title}",
            poster=PNG_BYTES,
            genre_id=genre.id,
        )
        session.add(movie)
        session.commit()
        session.refresh(movie)
        return movie
    return _make
