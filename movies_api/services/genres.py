from typing import List

from sqlmodel import Session

from movies_api.core.errors import ErrorCode, http_error, not_found
from movies_api.core.logging import logger
from movies_api.db.models import Genre
from movies_api.repositories import genres as genres_repo
from movies_api.repositories import movies as movies_repo
from movies_api.schemas.genres import GenreResponse


def _get_or_404(db: Session, genre_id: int) -> Genre:
    genre = genres_repo.get_genre(db, genre_id)
    if not genre:
        raise not_found(f"No genre was found with ID: {genre_id}", genreId=genre_id)
    return genre


def list_all(db: Session) -> List[GenreResponse]:
    return [GenreResponse.model_validate(g) for g in genres_repo.list_genres(db)]


def get(db: Session, genre_id: int) -> GenreResponse:
    return GenreResponse.model_validate(_get_or_404(db, genre_id))


def create(db: Session, name: str) -> GenreResponse:
    try:
        genre = genres_repo.create_genre(db, name)
    except ValueError as e:
        raise http_error(409, ErrorCode.STATE_CONFLICT, str(e))
    logger.info("genre created id=%s name=%r", genre.id, genre.name)
    return GenreResponse.model_validate(genre)


def update(db: Session, genre_id: int, name: str) -> GenreResponse:
    genre = _get_or_404(db, genre_id)
    genre = genres_repo.update_genre(db, genre, name)
    logger.info("genre updated id=%s name=%r", genre.id, genre.name)
    return GenreResponse.model_validate(genre)


def delete(db: Session, genre_id: int) -> GenreResponse:
    """
    Remove a genre and return its last state.

    Genres still referenced by movies are not deleted (409).
    """
    genre = _get_or_404(db, genre_id)

    in_use = movies_repo.count_by_genre(db, genre_id)
    if in_use:
        raise http_error(
            409,
            ErrorCode.STATE_CONFLICT,
            f"Genre is used by {in_use} movie(s)",
            details={"genreId": genre_id, "movieCount": in_use},
        )

    deleted = GenreResponse.model_validate(genre)
    genres_repo.delete_genre(db, genre)
    logger.info("genre deleted id=%s", genre_id)
    return deleted
