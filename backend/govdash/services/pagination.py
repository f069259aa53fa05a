from collections.abc import Callable
from typing import Any

from govdash.client import BackendClient
from govdash.schemas.common import PaginatedResponse


async def paginate(
    backend: BackendClient,
    path: str,
    adapt: Callable[[Any], Any],
    page: int,
    page_size: int,
    params: dict | None = None,
) -> PaginatedResponse:
    """Fetch one page of a persistence collection and adapt each record.

    The total comes from the response ``meta`` block when the endpoint
    paginates, else it is the number of records returned.
    """
    query = {**(params or {}), "page": page, "per_page": page_size}
    records, meta = await backend.get_page(path, query)
    return PaginatedResponse(
        items=[adapt(r) for r in records],
        total=meta.get("total", len(records)),
        page=meta.get("page", page),
        page_size=meta.get("per_page", page_size),
    )
