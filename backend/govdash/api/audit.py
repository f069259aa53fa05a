from fastapi import APIRouter, Depends, Query

from govdash.adapters.codec import decode
from govdash.adapters.monitoring import adapt_audit_log
from govdash.client import BackendClient, get_backend
from govdash.schemas.common import PaginatedResponse
from govdash.schemas.monitoring import AuditLog
from govdash.services.pagination import paginate

router = APIRouter()


@router.get("", response_model=PaginatedResponse[AuditLog])
async def list_audit_logs(
    page: int = Query(1, ge=1),
    page_size: int = Query(50, ge=1, le=200),
    entity_type: str | None = None,
    entity_id: str | None = None,
    user_id: str | None = None,
    action: str | None = None,
    start_date: str | None = None,
    end_date: str | None = None,
    backend: BackendClient = Depends(get_backend),
):
    params = {
        "entity_type": entity_type,
        "entity_id": entity_id,
        "user_id": user_id,
        # Display actions are upper case, persistence stores them lower case
        "action": action.lower() if action else None,
        "start_date": start_date,
        "end_date": end_date,
    }
    return await paginate(backend, "/audit-logs", adapt_audit_log, page, page_size, params)


@router.get("/{entity_type}/{entity_id}", response_model=list[AuditLog])
async def entity_trail(entity_type: str, entity_id: str, backend: BackendClient = Depends(get_backend)):
    """Audit history of one record, addressed by its display id."""
    params = {"entity_type": entity_type, "entity_id": decode(entity_id)}
    records, _ = await backend.get_page("/users/audit-logs", params)
    return [adapt_audit_log(r) for r in records]
