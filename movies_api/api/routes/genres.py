from typing import Annotated

from fastapi import APIRouter, Depends, Path, Request
from sqlmodel import Session

from movies_api.core.docs import success_example, error_examples
from movies_api.core.errors import ErrorCode, success_response, STANDARD_ERROR_RESPONSES
from movies_api.db.models import GENRE_ID_MAX
from movies_api.deps.db import get_db
from movies_api.services import genres as genres_svc
from movies_api.schemas.genres import (
    GenreListResponse,
    GenreResponse,
    GenreCreate,
    GenreUpdate,
)

router = APIRouter(
    prefix="/api/genres",
    tags=["genres"],
    responses=STANDARD_ERROR_RESPONSES,
)

_NOT_FOUND = (404, ErrorCode.RESOURCE_NOT_FOUND, "No genre was found with ID: 1")

GenreId = Annotated[int, Path(ge=0, le=GENRE_ID_MAX)]

# 1. 목록 조회 (GET /api/genres) - 이름 오름차순
@router.get(
    "",
    response_model=GenreListResponse,
    responses=success_example(GenreResponse, "Genres retrieved", many=True),
)
def list_genres(request: Request, db: Session = Depends(get_db)):
    payload = GenreListResponse(items=genres_svc.list_all(db))
    return success_response(
        request,
        message="Genres retrieved",
        data=payload.model_dump(),
    )

# 2. 단건 조회 (GET /api/genres/{genre_id})
@router.get(
    "/{genre_id}",
    response_model=GenreResponse,
    responses={
        **success_example(GenreResponse, "Genre retrieved"),
        **error_examples(_NOT_FOUND),
    },
)
def get_genre(request: Request, genre_id: GenreId, db: Session = Depends(get_db)):
    genre = genres_svc.get(db, genre_id)
    return success_response(
        request,
        message="Genre retrieved",
        data=genre.model_dump(),
    )

# 3. 생성 (POST /api/genres) - ID 범위 소진 시 409
@router.post(
    "",
    response_model=GenreResponse,
    responses={
        **success_example(GenreResponse, "Genre created"),
        **error_examples(
            (409, ErrorCode.STATE_CONFLICT, f"Genre IDs are exhausted (max {GENRE_ID_MAX})"),
        ),
    },
)
def create_genre(
    request: Request,
    body: GenreCreate,
    db: Session = Depends(get_db)
):
    genre = genres_svc.create(db, body.name)
    return success_response(
        request,
        message="Genre created",
        data=genre.model_dump(),
    )

# 4. 수정 (PUT /api/genres/{genre_id})
@router.put(
    "/{genre_id}",
    response_model=GenreResponse,
    responses={
        **success_example(GenreResponse, "Genre updated"),
        **error_examples(_NOT_FOUND),
    },
)
def update_genre(
    request: Request,
    body: GenreUpdate,
    genre_id: GenreId,
    db: Session = Depends(get_db)
):
    genre = genres_svc.update(db, genre_id, body.name)
    return success_response(
        request,
        message="Genre updated",
        data=genre.model_dump(),
    )

# 5. 삭제 (DELETE /api/genres/{genre_id}) - 영화가 참조 중이면 409
@router.delete(
    "/{genre_id}",
    response_model=GenreResponse,
    responses={
        **success_example(GenreResponse, "Genre deleted"),
        **error_examples(
            _NOT_FOUND,
            (409, ErrorCode.STATE_CONFLICT, "Genre is used by 3 movie(s)"),
        ),
    },
)
def delete_genre(
    request: Request,
    genre_id: GenreId,
    db: Session = Depends(get_db)
):
    genre = genres_svc.delete(db, genre_id)
    return success_response(
        request,
        message="Genre deleted",
        data=genre.model_dump(),
    )
