from pathlib import Path
import random

import pytest

from whatdo.dolist import DoList
from whatdo.store import ListStore


@pytest.fixture()
def rng() -> random.Random:
    return random.Random(1234)


@pytest.fixture()
def dolist(rng: random.Random) -> DoList:
    return DoList(rng=rng)


@pytest.fixture()
def abc(dolist: DoList) -> DoList:
    for task in ("A", "B", "C"):
        dolist.add(task)
    return dolist


@pytest.fixture()
def list_path(tmp_path: Path) -> Path:
    return tmp_path / "whatdo" / "list.toml"


@pytest.fixture()
def store(list_path: Path) -> ListStore:
    return ListStore(list_path)


@pytest.fixture()
def isolated_env(monkeypatch: pytest.MonkeyPatch, list_path: Path) -> Path:
    """Point the CLI at a temp list file and drop any user overrides."""
    monkeypatch.setenv("WHATDO_LIST_PATH", str(list_path))
    monkeypatch.delenv("WHATDO_LOG_LEVEL", raising=False)
    return list_path
