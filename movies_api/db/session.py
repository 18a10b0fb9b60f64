from sqlmodel import SQLModel, create_engine
from movies_api.core.config import settings

# sqlite는 스레드 간 연결 공유 허용 필요
connect_args = (
    {"check_same_thread": False}
    if settings.DATABASE_URL.startswith("sqlite")
    else {}
)

engine = create_engine(
    settings.DATABASE_URL,
    echo=settings.DB_ECHO,
    pool_pre_ping=True,
    connect_args=connect_args,
)

def init_db():
    SQLModel.metadata.create_all(engine)
