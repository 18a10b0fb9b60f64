import os
from typing import List, Optional

from fastapi import UploadFile
from sqlmodel import Session

from movies_api.core.config import settings
from movies_api.core.errors import bad_request, not_found
from movies_api.core.logging import logger
from movies_api.db.models import Movie
from movies_api.repositories import genres as genres_repo
from movies_api.repositories import movies as movies_repo
from movies_api.schemas.movies import MovieDetails, MovieForm, MovieResponse


def _details(movie: Movie, genre_name: Optional[str]) -> MovieDetails:
    return MovieDetails.model_validate({**movie.model_dump(), "genre_name": genre_name})


def _poster_size(poster: UploadFile) -> int:
    if poster.size is not None:
        return poster.size
    poster.file.seek(0, os.SEEK_END)
    size = poster.file.tell()
    poster.file.seek(0)
    return size


def _validate_poster(poster: UploadFile) -> None:
    # 확장자는 대소문자 그대로 비교 (.JPG 거부)
    ext = os.path.splitext(poster.filename or "")[1]
    if ext not in settings.POSTER_ALLOWED_EXTENSIONS:
        raise bad_request("Only .Png and .Jpg images are allowed!", extension=ext)
    size = _poster_size(poster)
    if size > settings.POSTER_MAX_SIZE:
        raise bad_request(
            "Max allowed size for Poster is 1MB!",
            size=size,
            maxSize=settings.POSTER_MAX_SIZE,
        )


def _read_poster(poster: UploadFile) -> bytes:
    poster.file.seek(0)
    return poster.file.read()


def _get_or_404(db: Session, movie_id: int) -> Movie:
    movie = movies_repo.get_movie(db, movie_id)
    if not movie:
        raise not_found(f"No movie was found with ID: {movie_id}", movieId=movie_id)
    return movie


def list_all(db: Session) -> List[MovieDetails]:
    return [_details(m, name) for m, name in movies_repo.list_movies(db)]


def list_by_genre(db: Session, genre_id: int) -> List[MovieDetails]:
    return [_details(m, name) for m, name in movies_repo.list_movies(db, genre_id=genre_id)]


def get_by_id(db: Session, movie_id: int) -> MovieDetails:
    row = movies_repo.get_movie_details(db, movie_id)
    if not row:
        raise not_found(f"No movie was found with ID: {movie_id}", movieId=movie_id)
    movie, genre_name = row
    return _details(movie, genre_name)


def create(db: Session, form: MovieForm, poster: Optional[UploadFile]) -> MovieResponse:
    if poster is None:
        raise bad_request("Poster is Required")
    _validate_poster(poster)

    if not genres_repo.genre_exists(db, form.genre_id):
        raise bad_request("Invalid genre ID!", genreId=form.genre_id)

    movie = Movie(**form.model_dump(), poster=_read_poster(poster))
    movie = movies_repo.save_movie(db, movie)
    logger.info("movie created id=%s title=%r", movie.id, movie.title)
    return MovieResponse.model_validate(movie)


def update(
    db: Session,
    movie_id: int,
    form: MovieForm,
    poster: Optional[UploadFile] = None,
) -> MovieResponse:
    movie = _get_or_404(db, movie_id)

    is_valid_genre = genres_repo.genre_exists(db, form.genre_id)
    if not is_valid_genre:
        if settings.ENFORCE_GENRE_ON_UPDATE:
            raise bad_request("Invalid genre ID!", genreId=form.genre_id)
        logger.warning(
            "movie %s updated with unknown genre id=%s", movie_id, form.genre_id
        )

    if poster is not None:
        _validate_poster(poster)
        movie.poster = _read_poster(poster)

    for field, value in form.model_dump().items():
        setattr(movie, field, value)

    movie = movies_repo.save_movie(db, movie)
    logger.info("movie updated id=%s", movie.id)
    return MovieResponse.model_validate(movie)


def delete(db: Session, movie_id: int) -> MovieResponse:
    movie = _get_or_404(db, movie_id)
    deleted = MovieResponse.model_validate(movie)
    movies_repo.delete_movie(db, movie)
    logger.info("movie deleted id=%s", movie_id)
    return deleted
