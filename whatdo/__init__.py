"""
WHATDO - Fair Random Task Picker
================================

A de-duplicated list of tasks drawn in shuffled cycles: every task comes
up exactly once before any task repeats.

Usage:
    from whatdo import DoList, ListStore

    store = ListStore("list.toml")
    dolist = store.load()
    dolist.add("read")
    print(dolist.pick())
    store.save(dolist)
"""

__version__ = "1.0.0"

from .errors import (
    WhatdoError,
    DuplicateTaskError,
    TaskNotFoundError,
    NotFoundError,
    StoreError
)
from .dolist import DoList, DrawState
from .schema import DoListDocument
from .store import ListStore
from .config import Settings, default_list_path

__all__ = [
    "DoList",
    "DrawState",
    "DoListDocument",
    "ListStore",
    "Settings",
    "default_list_path",
    "WhatdoError",
    "DuplicateTaskError",
    "TaskNotFoundError",
    "NotFoundError",
    "StoreError"
]
