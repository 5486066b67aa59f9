"""
Point the app at a throwaway SQLite database before anything imports
liftlog.db, then build the schema once for the whole run.
"""
import os
import tempfile
from pathlib import Path

_tmp = Path(tempfile.mkdtemp(prefix="liftlog-tests-"))
os.environ["DB_URL"] = f"sqlite:///{_tmp / 'test.db'}"
os.environ["SECRET_KEY"] = "test-secret"
os.environ["TIMEZONE"] = "UTC"

import pytest

from liftlog import models  # noqa: F401
from liftlog.db import Base, engine


@pytest.fixture(scope="session", autouse=True)
def schema():
    Base.metadata.create_all(engine)
    yield
    Base.metadata.drop_all(engine)
    engine.dispose()
