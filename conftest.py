import pytest

from sea.core.switch import SwitchBoard, switchboard_scope
from sea.settings.base import LIVE


@pytest.fixture
def switchboard():
    """Isolated switch board for the test; signals start live."""
    with switchboard_scope(SwitchBoard(default_state=LIVE)) as board:
        yield board


@pytest.fixture
def database(tmp_path):
    from invoicing_app.infrastructure.database import configure_engine, ensure_schema

    engine = configure_engine(f"sqlite:///{tmp_path / 'invoicing.db'}")
    ensure_schema()
    yield engine
    engine.dispose()
