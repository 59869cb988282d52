"""Site Schema — the JSON document exchanged on the sites endpoint.

Invariants:
    - Wire names: id, name, url, categoryid, created
    - id, name, url, categoryid are type-strict: "1" is not an id, 1 is not a name
    - id fits a signed 64-bit integer; created is an RFC 3339 string, never an epoch
    - created serializes as ISO 8601 in UTC; None until the first save

Design Decisions:
    - One model for request and response: POST echoes the saved document
    - Key matching is case-insensitive and null means "zero value", so
      clients written against the JSON-tag contract keep working
"""

import re
from datetime import datetime, timezone
from typing import Annotated

from pydantic import (
    BaseModel, ConfigDict, Field, StrictInt, StrictStr,
    field_serializer, field_validator,
)

_WIRE_KEYS = ("id", "name", "url", "categoryid", "created")
_RFC3339 = re.compile(
    r"\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}(\.\d+)?(Z|[+-]\d{2}:\d{2})",
    re.IGNORECASE,
)

SiteIdInt = Annotated[StrictInt, Field(ge=-(2 ** 63), le=2 ** 63 - 1)]


class Site(BaseModel):
    """A site record as seen by clients."""
    model_config = ConfigDict(populate_by_name=True)

    id: SiteIdInt = 0
    name: StrictStr = ""
    url: StrictStr = ""
    category_id: list[StrictStr] = Field(default_factory=list, alias="categoryid")
    created: datetime | None = None

    @field_validator("created", mode="before")
    @classmethod
    def _require_rfc3339(cls, value):
        """Timestamps arrive as RFC 3339 strings; numbers are not epochs."""
        if value is None or isinstance(value, datetime):
            return value
        if not isinstance(value, str) or not _RFC3339.fullmatch(value):
            raise ValueError("created must be an RFC 3339 timestamp")
        return value

    @classmethod
    def from_document(cls, doc: dict) -> "Site":
        """Validate a decoded JSON object into a Site."""
        return cls.model_validate(normalize_keys(doc))

    def to_document(self) -> dict:
        return self.model_dump(mode="json", by_alias=True)

    @field_serializer("created")
    def _serialize_created(self, created: datetime | None) -> str | None:
        if created is None:
            return None
        if created.tzinfo is None:
            created = created.replace(tzinfo=timezone.utc)
        return created.astimezone(timezone.utc).isoformat().replace("+00:00", "Z")


def normalize_keys(doc: dict) -> dict:
    """Fold keys onto wire names case-insensitively; drop nulls and unknown keys.

    Later keys win over earlier ones, so {"name": "a", "Name": "b"} gives "b".
    """
    out: dict = {}
    for key, value in doc.items():
        wire = key.lower() if isinstance(key, str) else None
        if wire in _WIRE_KEYS and value is not None:
            out[wire] = value
    return out
