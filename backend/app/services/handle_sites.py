"""Sites Handler — map an HTTP request on the sites path to a store operation.

Invariants:
    - POST decodes exactly one Site and saves it (create when id == 0, else overwrite)
    - GET lists by category when ``cat`` is an integer, otherwise lists all
    - Any other method raises MethodNotImplementedError before touching the store
    - Decoding failures of any kind raise DecodeError
"""

import json
import logging

from pydantic import ValidationError
from starlette.requests import ClientDisconnect, Request

from app.core.errors import DecodeError, MethodNotImplementedError
from app.core.parse_category import parse_category
from app.core.repository_protocols import SiteRepository
from app.schemas.site import Site

logger = logging.getLogger(__name__)
_DECODER = json.JSONDecoder()


async def handle_sites(
    request: Request, store: SiteRepository,
) -> Site | list[Site]:
    """Run the store operation for ``request`` and return its result."""
    if request.method == "POST":
        site = decode_site(await read_body(request))
        return await store.save(site)
    if request.method == "GET":
        tag = parse_category(request.query_params.get("cat"))
        if tag is not None:
            return await store.list_by_category(tag)
        return await store.list_all()
    raise MethodNotImplementedError(request.method)


async def read_body(request: Request) -> bytes:
    try:
        return await request.body()
    except ClientDisconnect as e:
        raise DecodeError("request body could not be read: client disconnected") from e


def decode_site(raw: bytes) -> Site:
    """Decode a request body into a Site.

    Only the first JSON value is read; anything after it is ignored.
    ``null`` decodes to an empty Site; any other non-object document,
    malformed JSON, or a wrongly typed field is a DecodeError.
    """
    try:
        doc, _ = _DECODER.raw_decode(raw.decode("utf-8").lstrip())
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise DecodeError(f"invalid JSON: {e}") from e
    if doc is None:
        return Site()
    if not isinstance(doc, dict):
        raise DecodeError(
            f"cannot decode JSON {type(doc).__name__} into a Site object",
        )
    try:
        return Site.from_document(doc)
    except ValidationError as e:
        raise DecodeError(_summarize(e)) from e


def _summarize(exc: ValidationError) -> str:
    return "; ".join(
        f"{'.'.join(str(loc) for loc in err['loc'])}: {err['msg']}"
        for err in exc.errors()
    )
