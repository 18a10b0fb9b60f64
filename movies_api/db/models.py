from typing import Optional

from sqlalchemy import Column, Integer, LargeBinary, SmallInteger
from sqlmodel import SQLModel, Field

# genres.id는 SMALLINT지만 0~255 범위만 사용
GENRE_ID_MAX = 255
# movies.id는 32비트 정수
MOVIE_ID_MAX = 2**31 - 1


# ======================
# Genre
# ======================

class Genre(SQLModel, table=True):
    __tablename__ = "genres"

    # sqlite는 INTEGER PK여야 자동 증가
    id: Optional[int] = Field(
        default=None,
        sa_column=Column(
            SmallInteger().with_variant(Integer, "sqlite"),
            primary_key=True,
            autoincrement=True,
        ),
    )
    name: str = Field(max_length=100)


# ======================
# Movie
# ======================

class Movie(SQLModel, table=True):
    __tablename__ = "movies"

    id: Optional[int] = Field(default=None, primary_key=True)

    title: str = Field(max_length=250, index=True)
    year: int
    rate: float
    storeline: str = Field(max_length=2500)
    poster: bytes = Field(sa_column=Column(LargeBinary, nullable=False))

    # DB 레벨 FK 제약 없음 (생성 시 서비스에서 검증)
    genre_id: int = Field(index=True)
