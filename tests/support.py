from sqlalchemy.orm import sessionmaker

from bizhub.database.base import Base
from bizhub.database.engine import build_engine
from bizhub.models import import_all_models


def make_session():
    engine = build_engine("sqlite:///:memory:")
    import_all_models()
    Base.metadata.create_all(bind=engine)
    Session = sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)
    return engine, Session()
