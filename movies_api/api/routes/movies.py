from typing import Annotated, Optional

from fastapi import APIRouter, Depends, File, Path, Query, Request, UploadFile
from sqlmodel import Session

from movies_api.core.docs import success_example, error_examples
from movies_api.core.errors import ErrorCode, success_response, STANDARD_ERROR_RESPONSES
from movies_api.db.models import GENRE_ID_MAX, MOVIE_ID_MAX
from movies_api.deps.db import get_db
from movies_api.deps.forms import movie_form
from movies_api.services import movies as movies_svc
from movies_api.schemas.movies import (
    MovieDetails,
    MovieForm,
    MovieListResponse,
    MovieResponse,
)

router = APIRouter(
    prefix="/api/movies",
    tags=["movies"],
    responses=STANDARD_ERROR_RESPONSES,
)

_NOT_FOUND = (404, ErrorCode.RESOURCE_NOT_FOUND, "No movie was found with ID: 1")
_BAD_POSTER = (400, ErrorCode.BAD_REQUEST, "Only .Png and .Jpg images are allowed!")

MovieId = Annotated[int, Path(ge=0, le=MOVIE_ID_MAX)]


# 1. 목록 조회 (GET /api/movies) - 평점 내림차순
@router.get(
    "",
    response_model=MovieListResponse,
    responses=success_example(MovieDetails, "Movies retrieved", many=True),
)
def list_movies(request: Request, db: Session = Depends(get_db)):
    payload = MovieListResponse(items=movies_svc.list_all(db))
    return success_response(
        request,
        message="Movies retrieved",
        data=payload.model_dump(mode="json"),
    )


# 2. 장르별 조회 (GET /api/movies/GetByGenreId?genreId=)
# /{movie_id} 보다 먼저 등록해야 함
@router.get(
    "/GetByGenreId",
    response_model=MovieListResponse,
    responses=success_example(MovieDetails, "Movies retrieved", many=True),
)
def list_movies_by_genre(
    request: Request,
    genre_id: int = Query(..., alias="genreId", ge=0, le=GENRE_ID_MAX),
    db: Session = Depends(get_db),
):
    payload = MovieListResponse(items=movies_svc.list_by_genre(db, genre_id))
    return success_response(
        request,
        message="Movies retrieved",
        data=payload.model_dump(mode="json"),
    )


# 3. 상세 조회 (GET /api/movies/{movie_id})
@router.get(
    "/{movie_id}",
    response_model=MovieDetails,
    responses={
        **success_example(MovieDetails, "Movie retrieved"),
        **error_examples(_NOT_FOUND),
    },
)
def get_movie(request: Request, movie_id: MovieId, db: Session = Depends(get_db)):
    movie = movies_svc.get_by_id(db, movie_id)
    return success_response(
        request,
        message="Movie retrieved",
        data=movie.model_dump(mode="json"),
    )


# 4. 생성 (POST /api/movies) - multipart, Poster 필수
@router.post(
    "",
    response_model=MovieResponse,
    responses={
        **success_example(MovieResponse, "Movie created"),
        **error_examples(_BAD_POSTER),
    },
)
def create_movie(
    request: Request,
    form: MovieForm = Depends(movie_form),
    poster: Optional[UploadFile] = File(None, alias="Poster"),
    db: Session = Depends(get_db),
):
    movie = movies_svc.create(db, form, poster)
    return success_response(
        request,
        message="Movie created",
        data=movie.model_dump(mode="json"),
    )


# 5. 수정 (PUT /api/movies/{movie_id}) - Poster 생략 시 기존 포스터 유지
@router.put(
    "/{movie_id}",
    response_model=MovieResponse,
    responses={
        **success_example(MovieResponse, "Movie updated"),
        **error_examples(_BAD_POSTER, _NOT_FOUND),
    },
)
def update_movie(
    request: Request,
    movie_id: MovieId,
    form: MovieForm = Depends(movie_form),
    poster: Optional[UploadFile] = File(None, alias="Poster"),
    db: Session = Depends(get_db),
):
    movie = movies_svc.update(db, movie_id, form, poster)
    return success_response(
        request,
        message="Movie updated",
        data=movie.model_dump(mode="json"),
    )


# 6. 삭제 (DELETE /api/movies/{movie_id})
@router.delete(
    "/{movie_id}",
    response_model=MovieResponse,
    responses={
        **success_example(MovieResponse, "Movie deleted"),
        **error_examples(_NOT_FOUND),
    },
)
def delete_movie(request: Request, movie_id: MovieId, db: Session = Depends(get_db)):
    movie = movies_svc.delete(db, movie_id)
    return success_response(
        request,
        message="Movie deleted",
        data=movie.model_dump(mode="json"),
    )
