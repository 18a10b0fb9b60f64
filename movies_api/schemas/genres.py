from typing import List

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

class GenreBase(BaseModel):
    # 기존 클라이언트는 {"Name": ...} 형태로 전송
    name: str = Field(
        min_length=1,
        max_length=100,
        validation_alias=AliasChoices("name", "Name"),
    )

# 생성 요청 (POST)
class GenreCreate(GenreBase):
    pass

# 수정 요청 (PUT) - 이름 전체 교체
class GenreUpdate(GenreBase):
    pass

# 응답
class GenreResponse(BaseModel):
    id: int
    name: str

    model_config = ConfigDict(
        from_attributes=True,
        json_schema_extra={"example": {"id": 1, "name": "Action"}},
    )


class GenreListResponse(BaseModel):
    items: List[GenreResponse]
