import base64
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_serializer

from movies_api.db.models import GENRE_ID_MAX


class MovieForm(BaseModel):
    """Scalar fields of the multipart create/update form.

    Aliases are the multipart field names sent by clients.
    """

    title: str = Field(min_length=1, max_length=250, alias="Title")
    year: int = Field(ge=0, le=9999, alias="Year")
    # nan/inf는 DB에 저장되지 않고 JSON으로도 직렬화되지 않음
    rate: float = Field(allow_inf_nan=False, alias="Rate")
    storeline: str = Field(min_length=1, max_length=2500, alias="Storeline")
    genre_id: int = Field(ge=0, le=GENRE_ID_MAX, alias="GenreId")

    model_config = ConfigDict(populate_by_name=True)


class MovieResponse(BaseModel):
    id: int
    title: str
    year: int
    rate: float
    storeline: str
    poster: Optional[bytes] = None
    genre_id: int

    model_config = ConfigDict(
        from_attributes=True,
        json_schema_extra={
            "example": {
                "id": 1,
                "title": "Inception",
                "year": 2010,
                "rate": 8.8,
                "storeline": "A thief steals secrets by entering people's dreams.",
                "poster": "iVBORw0KGgo=",
                "genre_id": 1,
            }
        },
    )

    # JSON 응답에서는 표준 base64 문자열 (data: URI, atob 호환)
    @field_serializer("poster", when_used="json")
    def serialize_poster(self, poster: Optional[bytes]) -> Optional[str]:
        if poster is None:
            return None
        return base64.b64encode(poster).decode("ascii")


class MovieDetails(MovieResponse):
    genre_name: Optional[str] = None

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                **MovieResponse.model_config["json_schema_extra"]["example"],
                "genre_name": "Science Fiction",
            }
        },
    )


class MovieListResponse(BaseModel):
    items: List[MovieDetails]
