from movies_api.api.routes.health import router as health_router
from movies_api.api.routes.genres import router as genres_router
from movies_api.api.routes.movies import router as movies_router

all_routers = [health_router, genres_router, movies_router]
