"""
WHATDO - List Store
===================
Loads a DoList from its TOML file at startup and writes it back on exit.
The file is the only persistent state; each invocation loads once, mutates
in memory and saves once.
"""

import contextlib
import logging
import os
import tomllib
from pathlib import Path
from typing import Union

import tomli_w
from pydantic import ValidationError

from .dolist import DoList
from .errors import StoreError
from .schema import DoListDocument

logger = logging.getLogger("whatdo.store")


class ListStore:
    """TOML-file persistence for a single DoList"""

    def __init__(self, path: Union[str, Path]):
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def exists(self) -> bool:
        return self._path.exists()

    def load(self) -> DoList:
        """Load the saved list, or an empty one if there is no file yet"""
        if not self._path.exists():
            logger.info(f"No list file at {self._path}, starting a new list")
            return DoList()

        try:
            with open(self._path, "rb") as f:
                data = tomllib.load(f)
        except (tomllib.TOMLDecodeError, UnicodeDecodeError) as e:
            raise StoreError(f"list file {self._path} is not valid TOML: {e}") from e
        except OSError as e:
            raise StoreError(f"unable to read list file {self._path}: {e}") from e

        try:
            document = DoListDocument.model_validate(data)
        except ValidationError as e:
            raise StoreError(f"list file {self._path} has an invalid layout: {e}") from e

        dolist = document.to_dolist()
        logger.info(f"Loaded list: {self._path} ({len(dolist)} tasks, {len(dolist.queue)} queued)")
        return dolist

    def save(self, dolist: DoList) -> None:
        """Write the list atomically, creating parent directories"""
        data = DoListDocument.from_dolist(dolist).to_toml_dict()
        tmp = self._path.with_name(self._path.name + ".tmp")

        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            with open(tmp, "wb") as f:
                tomli_w.dump(data, f)
            os.replace(tmp, self._path)
        except (OSError, TypeError, ValueError) as e:
            with contextlib.suppress(OSError):
                tmp.unlink(missing_ok=True)
            raise StoreError(f"unable to write list file {self._path}: {e}") from e

        logger.info(f"Saved list: {self._path} ({len(dolist)} tasks)")
