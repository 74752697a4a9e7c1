# tests/conftest.py
import sys, pathlib
import pytest

# Add ./src (package) and the repo root (scripts) to sys.path
ROOT = pathlib.Path(__file__).resolve().parents[1]
SRC  = ROOT / "src"
for p in (SRC, ROOT):
    if str(p) not in sys.path:
        sys.path.insert(0, str(p))

@pytest.fixture(scope="session")
def app():
    from sungka.api.app import create_app
    app = create_app({"HARD_DEPTH": 3})
    app.config.update(TESTING=True)
    return app

@pytest.fixture(scope="session")
def client(app):
    return app.test_client()

@pytest.fixture
def board():
    """Builds a state from two rows, stores and the player to move."""
    def _make(row0, row1, stores=(0, 0), player=0):
        return {"pits": [list(row0), list(row1)], "stores": list(stores), "current_player": player}
    return _make
