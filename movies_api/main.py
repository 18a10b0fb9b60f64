from fastapi import FastAPI, HTTPException
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from slowapi import Limiter
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware
from slowapi.util import get_remote_address

from movies_api.core.config import settings
from movies_api.api.routes import all_routers
from movies_api.core.logging import setup_logging
from movies_api.middlewares.logging import logging_middleware
from movies_api.core.errors import (
    http_exception_handler,
    unhandled_exception_handler,
    validation_exception_handler,
    rate_limit_handler,
)

# 1. Rate Limiter 설정 (IP 기준)
limiter = Limiter(
    key_func=get_remote_address,
    default_limits=[settings.RATE_LIMIT],
    enabled=settings.RATE_LIMIT_ENABLED,
)

app = FastAPI(title="Movies API", version=settings.APP_VERSION)
# 2. State에 limiter 저장 (SlowAPIMiddleware가 참조)
app.state.limiter = limiter
app.add_middleware(SlowAPIMiddleware)

@app.on_event("startup")
def on_startup():
    setup_logging(settings.LOG_LEVEL)

# 3. CORS 설정
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.middleware("http")(logging_middleware)

app.add_exception_handler(HTTPException, http_exception_handler)
app.add_exception_handler(Exception, unhandled_exception_handler)
app.add_exception_handler(RequestValidationError, validation_exception_handler)
app.add_exception_handler(RateLimitExceeded, rate_limit_handler)

for r in all_routers:
    app.include_router(r)
