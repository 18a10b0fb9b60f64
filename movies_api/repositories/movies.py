from typing import List, Optional, Tuple

from sqlmodel import Session, func, select

from movies_api.db.models import Genre, Movie


def _details_stmt():
    # 장르가 삭제/누락돼도 영화는 조회되도록 outer join
    return (
        select(Movie, Genre.name)
        .outerjoin(Genre, Genre.id == Movie.genre_id)
        .order_by(Movie.rate.desc())
    )


def list_movies(
    db: Session,
    genre_id: Optional[int] = None,
) -> List[Tuple[Movie, Optional[str]]]:
    stmt = _details_stmt()
    if genre_id is not None:
        stmt = stmt.where(Movie.genre_id == genre_id)
    return list(db.exec(stmt).all())


def get_movie_details(db: Session, movie_id: int) -> Optional[Tuple[Movie, Optional[str]]]:
    return db.exec(_details_stmt().where(Movie.id == movie_id)).first()


def get_movie(db: Session, movie_id: int) -> Optional[Movie]:
    return db.get(Movie, movie_id)


def count_movies(db: Session) -> int:
    return int(db.exec(select(func.count()).select_from(Movie)).one())


def count_by_genre(db: Session, genre_id: int) -> int:
    total = db.exec(
        select(func.count()).select_from(Movie).where(Movie.genre_id == genre_id)
    ).one()
    return int(total)


def save_movie(db: Session, movie: Movie) -> Movie:
    db.add(movie)
    db.commit()
    db.refresh(movie)
    return movie


def delete_movie(db: Session, movie: Movie) -> None:
    db.delete(movie)
    db.commit()
