from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import sessionmaker

from bizhub.database.engine import engine

SessionLocal = sessionmaker(
    autocommit=False,
    autoflush=False,
    expire_on_commit=False,
    bind=engine,
)


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def commit_or_rollback(db):
    try:
        db.commit()
    except SQLAlchemyError:
        db.rollback()
        raise
