"""
WHATDO - List File Schema
=========================
On-disk shape of a saved DoList:

    version = 1
    list = ["read", "run", "write"]
    queue = ["write", "read"]

`list` is the membership in insertion order, `queue` is what is left to
draw in the current cycle.
"""

from typing import List

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .dolist import DoList

SCHEMA_VERSION = 1


class DoListDocument(BaseModel):
    """Persisted (membership, queue) pair"""
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    version: int = SCHEMA_VERSION
    tasks: List[str] = Field(default_factory=lambda: [], alias="list")
    queue: List[str] = Field(default_factory=lambda: [])

    @field_validator("version")
    @classmethod
    def check_version(cls, value: int) -> int:
        if value > SCHEMA_VERSION:
            raise ValueError(
                f"list file version {value} is newer than supported version {SCHEMA_VERSION}"
            )
        return value

    @classmethod
    def from_dolist(cls, dolist: DoList) -> "DoListDocument":
        tasks, queue = dolist.snapshot()
        return cls(tasks=tasks, queue=queue)

    def to_dolist(self) -> DoList:
        return DoList.from_snapshot(self.tasks, self.queue)

    def to_toml_dict(self) -> dict:
        return self.model_dump(mode="json", by_alias=True)
