# rental_api/db/db_connection.py
from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker

from rental_api.core.settings import settings


def _enable_sqlite_foreign_keys(dbapi_conn, conn_record):
    # SQLite는 기본적으로 FK 제약을 끈 상태로 연결됨
    cur = dbapi_conn.cursor()
    try:
        cur.execute("PRAGMA foreign_keys=ON")
    finally:
        cur.close()


def build_engine(url: str, **kwargs) -> Engine:
    is_sqlite = url.startswith("sqlite")
    if is_sqlite:
        # 요청 스레드풀에서 같은 커넥션을 공유할 수 있게
        kwargs.setdefault("connect_args", {"check_same_thread": False})
    engine = create_engine(
        url,
        echo=settings.SQL_ECHO,
        future=True,
        pool_pre_ping=True,
        **kwargs,
    )
    if is_sqlite:
        event.listen(engine, "connect", _enable_sqlite_foreign_keys)
    return engine


def build_sessionmaker(engine: Engine) -> sessionmaker:
    return sessionmaker(bind=engine, autocommit=False, autoflush=False)


sync_engine = build_engine(settings.DATABASE_URL)
SessionLocal = build_sessionmaker(sync_engine)

def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
