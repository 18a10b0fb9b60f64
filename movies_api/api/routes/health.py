import time

from fastapi import APIRouter, Depends, Request
from sqlmodel import Session

from movies_api.core.config import settings
from movies_api.core.errors import success_response
from movies_api.deps.db import get_db
from movies_api.repositories import genres as genres_repo
from movies_api.repositories import movies as movies_repo

router = APIRouter(tags=["system"])

START_TIME = time.time()


@router.get("/health")
def health_check(request: Request, db: Session = Depends(get_db)):
    """Liveness plus catalogue size; the count queries double as the DB check."""
    return success_response(
        request,
        message="System is healthy",
        data={
            "status": "ok",
            "version": settings.APP_VERSION,
            "build_time": settings.BUILD_TIME,
            "uptime_seconds": int(time.time() - START_TIME),
            "genres": genres_repo.count_genres(db),
            "movies": movies_repo.count_movies(db),
        },
    )
