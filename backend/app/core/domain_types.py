"""Domain Types — keys and identity types for the hierarchical site store.

Invariants:
    - A SiteKey with id None is incomplete: the store assigns the id on put
    - Every SiteKey has a ParentKey; all keys of one list share it
    - Keys are immutable values (frozen dataclasses)

Design Decisions:
    - NewType for SiteId: zero runtime cost, full type-checker support
    - Parent scope is data (ParentKey), not a constant inside key derivation,
      so another site list is a settings change, not a code change
"""

from dataclasses import dataclass
from enum import Enum
from typing import NewType


SiteId = NewType("SiteId", int)
CategoryTag = NewType("CategoryTag", str)


class EntityKind(str, Enum):
    """Entity kinds in the key space."""
    SITE_LIST = "SiteList"
    SITE = "Site"


@dataclass(frozen=True)
class ParentKey:
    """Ancestor scope that every Site is stored and queried under."""
    kind: str
    name: str


@dataclass(frozen=True)
class SiteKey:
    """Key of one Site under its ancestor scope."""
    parent: ParentKey
    id: SiteId | None = None
    kind: str = EntityKind.SITE.value

    @property
    def incomplete(self) -> bool:
        return self.id is None


def default_site_list(name: str = "default") -> ParentKey:
    """The singleton site list all records belong to."""
    return ParentKey(kind=EntityKind.SITE_LIST.value, name=name)
