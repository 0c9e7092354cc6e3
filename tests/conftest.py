import sys
from pathlib import Path

import pytest


# Make `config`, `playlist` and `scripts` importable without an install.
ROOT = Path(__file__).resolve().parents[1]
ROOT_STR = str(ROOT)
if ROOT_STR not in sys.path:
    sys.path.insert(0, ROOT_STR)


@pytest.fixture(autouse=True)
def _clear_plsparse_env(monkeypatch):
    for name in ("PLSPARSE_HTTP_TIMEOUT", "PLSPARSE_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
