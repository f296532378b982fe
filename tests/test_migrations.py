"""The alembic revision builds the same dogs table as the ORM model."""

from __future__ import annotations

import importlib.util
from pathlib import Path
from types import ModuleType

import pytest
from alembic.migration import MigrationContext
from alembic.operations import Operations
from sqlalchemy import create_engine, inspect

from kennel.shared.models import Dog


VERSIONS_DIR = Path(__file__).resolve().parents[1] / "kennel" / "shared" / "migrations" / "versions"


def _load_revision(filename: str) -> ModuleType:
    module_spec = importlib.util.spec_from_file_location(filename.removesuffix(".py"), VERSIONS_DIR / filename)
    assert module_spec is not None and module_spec.loader is not None
    module = importlib.util.module_from_spec(module_spec)
    module_spec.loader.exec_module(module)
    return module


@pytest.mark.unit
class TestCreateDogsRevision:
    def test_upgrade_and_downgrade(self) -> None:
        revision = _load_revision("20261019_000000_001_create_dogs.py")
        engine = create_engine("sqlite://")

        with engine.begin() as conn:
            with Operations.context(MigrationContext.configure(conn)):
                revision.upgrade()

            columns = {column["name"] for column in inspect(conn).get_columns("dogs")}
            assert columns == set(Dog.__table__.columns.keys())

            with Operations.context(MigrationContext.configure(conn)):
                revision.downgrade()
            assert "dogs" not in inspect(conn).get_table_names()

        engine.dispose()

    def test_is_the_first_revision(self) -> None:
        revision = _load_revision("20261019_000000_001_create_dogs.py")
        assert revision.revision == "001"
        assert revision.down_revision is None
