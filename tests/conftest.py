"""
Pytest configuration for formbind tests.

Why: Force AnyIO to use the asyncio backend for the SSR round-trip tests and
make the package importable when the suite runs from a plain checkout.
"""
import sys
from pathlib import Path
from types import SimpleNamespace

import pytest

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from formbind import ComponentFactory, ModelState  # noqa: E402


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture(autouse=True)
def _clear_formbind_env(monkeypatch: pytest.MonkeyPatch):
    """Keep settings tests independent of the developer's shell."""
    for var in (
        "FORMBIND_CULTURE",
        "FORMBIND_INPUT_CLASS",
        "FORMBIND_INVALID_CLASS",
        "FORMBIND_VALIDATION_MARKER",
        "FORMBIND_LABEL_FOR_PLACEHOLDER",
        "FORMBIND_ARIA_LABEL",
    ):
        monkeypatch.delenv(var, raising=False)
    yield


@pytest.fixture
def model_state() -> ModelState:
    return ModelState()


@pytest.fixture
def factory(model_state: ModelState) -> ComponentFactory:
    return ComponentFactory(error_provider=model_state, culture="en-GB")


@pytest.fixture
def person() -> SimpleNamespace:
    return SimpleNamespace(
        first_name="Ada",
        age=36,
        email="ada@example.test",
        subscribed=True,
        roles=["admin", "editor"],
        address=SimpleNamespace(city="London", post_code="N1 9GU"),
    )
