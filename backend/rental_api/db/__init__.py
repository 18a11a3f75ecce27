# rental_api/db/__init__.py
from .db_connection import SessionLocal, get_db, sync_engine
from .orm_registry import Base, import_all_models

def init_db() -> None:
    # 로컬(SQLite) 실행용: 마이그레이션 없이 테이블 생성
    import_all_models()
    Base.metadata.create_all(bind=sync_engine)

def close_db() -> None:
    # 서버 종료 시 커넥션 풀 정리
    sync_engine.dispose()

__all__ = ["SessionLocal", "get_db", "init_db", "close_db", "Base"]
