"""
Pytest configuration for formfrag tests.

Why: Rendering defaults can be changed through the environment. Clearing
those variables per test keeps expectations independent of the shell the
suite runs in.
"""
import sys
from pathlib import Path

import pytest

# Ensure the package is importable without an editable install
REPO_ROOT = Path(__file__).resolve().parents[2]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))


@pytest.fixture(autouse=True)
def _clear_render_env(monkeypatch: pytest.MonkeyPatch):
    """Start every test from the built-in rendering defaults."""
    monkeypatch.delenv("FORMFRAG_DEFAULT_DECIMALS", raising=False)
    yield
