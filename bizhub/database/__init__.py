from bizhub.database.base import Base
from bizhub.database.engine import build_engine, engine
from bizhub.database.session import SessionLocal, commit_or_rollback, get_db

__all__ = ["Base", "SessionLocal", "build_engine", "commit_or_rollback", "engine", "get_db"]
