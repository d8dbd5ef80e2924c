import pytest

SUDOKU_ENV_VARS = ("SUDOKU_GRID_SIZE", "SUDOKU_LEVEL", "SUDOKU_SEED", "SUDOKU_LOG_LEVEL")


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in SUDOKU_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
