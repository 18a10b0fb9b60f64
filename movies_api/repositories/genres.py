from typing import List, Optional

from sqlmodel import Session, func, select

from movies_api.db.models import GENRE_ID_MAX, Genre


def list_genres(db: Session) -> List[Genre]:
    return list(db.exec(select(Genre).order_by(Genre.name)).all())


def get_genre(db: Session, genre_id: int) -> Optional[Genre]:
    return db.get(Genre, genre_id)


def count_genres(db: Session) -> int:
    return int(db.exec(select(func.count()).select_from(Genre)).one())


def genre_exists(db: Session, genre_id: int) -> bool:
    return db.exec(select(Genre.id).where(Genre.id == genre_id)).first() is not None


def create_genre(db: Session, name: str) -> Genre:
    genre = Genre(name=name)
    db.add(genre)
    db.flush()
    # 자동 증가 ID가 허용 범위를 넘으면 저장하지 않음
    if genre.id > GENRE_ID_MAX:
        db.rollback()
        raise ValueError(f"Genre IDs are exhausted (max {GENRE_ID_MAX})")
    db.commit()
    db.refresh(genre)
    return genre


def update_genre(db: Session, genre: Genre, name: str) -> Genre:
    genre.name = name
    db.add(genre)
    db.commit()
    db.refresh(genre)
    return genre


def delete_genre(db: Session, genre: Genre) -> None:
    db.delete(genre)
    db.commit()
