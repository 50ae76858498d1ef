import sys
from pathlib import Path

import pytest

# Ensure local source package (src/restbind) is importable before tests collect
_PROJECT_ROOT: Path = Path(__file__).resolve().parents[1]
_SRC_PATH: Path = _PROJECT_ROOT / "src"
if _SRC_PATH.exists():
    sys.path.insert(0, str(_SRC_PATH))

from restbind import Service  # noqa: E402


@pytest.fixture
def base_url() -> str:
    return "http://example.com"


@pytest.fixture
def args() -> dict[str, list[str]]:
    return {"filter": ["1"], "price": ["200"]}


@pytest.fixture
def service(base_url: str) -> Service:
    return Service(base_url)
