from fastapi import Form
from fastapi.exceptions import RequestValidationError
from pydantic import ValidationError

from movies_api.schemas.movies import MovieForm


def movie_form(
    title: str = Form(..., alias="Title"),
    year: int = Form(..., alias="Year"),
    storeline: str = Form(..., alias="Storeline"),
    rate: float = Form(..., alias="Rate"),
    genre_id: int = Form(..., alias="GenreId"),
) -> MovieForm:
    """
    FastAPI Dependency:
    multipart 폼의 스칼라 필드(Title, Year, ...)를 MovieForm으로 묶습니다.
    값 제약은 MovieForm에만 선언하고, 실패하면 400 VALIDATION_FAILED로 변환합니다.
    Poster 파일은 라우터에서 따로 받습니다.
    """
    try:
        return MovieForm(
            Title=title,
            Year=year,
            Storeline=storeline,
            Rate=rate,
            GenreId=genre_id,
        )
    except ValidationError as exc:
        raise RequestValidationError(
            [{**err, "loc": ("body", *err["loc"])} for err in exc.errors()]
        )
