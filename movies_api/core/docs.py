from typing import Any, Dict, Tuple, Type

from pydantic import BaseModel

from movies_api.core.errors import ErrorCode

EXAMPLE_TIMESTAMP = "2026-01-01T12:34:56Z"


def _envelope(status_code: int, code: ErrorCode, message: str, **body: Any) -> Dict[str, Any]:
    return {
        "description": message,
        "content": {
            "application/json": {
                "example": {
                    "timestamp": EXAMPLE_TIMESTAMP,
                    "path": "/api/...",
                    "status": status_code,
                    "code": code.value,
                    "message": message,
                    **body,
                }
            }
        },
    }


def model_example(model: Type[BaseModel]) -> Dict[str, Any]:
    """Return the ``example`` a schema declares in ``json_schema_extra``."""
    return model.model_json_schema().get("example") or {}


def success_example(
    model: Type[BaseModel] | None = None,
    message: str = "OK",
    *,
    many: bool = False,
) -> Dict[int, Any]:
    """
    Swagger 200 응답 예시.
    many=True면 data를 {"items": [...]} 목록 형태로 감쌉니다.
    """
    data: Any = model_example(model) if model else None
    if many:
        data = {"items": [data] if data else []}
    return {200: _envelope(200, ErrorCode.SUCCESS, message, data=data)}


def error_examples(*errors: Tuple[int, ErrorCode, str]) -> Dict[int, Any]:
    """
    (status, code, message) 튜플들로 4xx 응답 예시를 만듭니다.
    """
    return {
        status_code: _envelope(status_code, code, message, details={})
        for status_code, code, message in errors
    }
