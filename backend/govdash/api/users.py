from fastapi import APIRouter, Depends, HTTPException, Query, Response
from pydantic import BaseModel

from govdash.adapters.codec import decode
from govdash.adapters.user import adapt_user, adapt_user_create, adapt_user_update
from govdash.client import BackendClient, get_backend
from govdash.schemas.common import PaginatedResponse
from govdash.schemas.user import User, UserCreate, UserUpdate
from govdash.services.pagination import paginate

router = APIRouter()


class RolePermissionsUpdate(BaseModel):
    permission_ids: list[int]


@router.get("", response_model=PaginatedResponse[User])
async def list_users(
    page: int = Query(1, ge=1),
    page_size: int = Query(50, ge=1, le=200),
    search: str | None = None,
    is_active: bool | None = None,
    backend: BackendClient = Depends(get_backend),
):
    params = {"search": search, "is_active": is_active}
    return await paginate(backend, "/users", adapt_user, page, page_size, params)


# Role and permission records pass through untouched

@router.get("/roles")
async def list_roles(backend: BackendClient = Depends(get_backend)):
    return await backend.get("/users/roles") or []


@router.get("/permissions")
async def list_permissions(backend: BackendClient = Depends(get_backend)):
    return await backend.get("/users/permissions") or []


@router.put("/roles/{role_id}/permissions")
async def update_role_permissions(
    role_id: int,
    body: RolePermissionsUpdate,
    backend: BackendClient = Depends(get_backend),
):
    return await backend.put(f"/users/roles/{role_id}/permissions", body.model_dump())


@router.get("/{user_id}", response_model=User)
async def get_user(user_id: str, backend: BackendClient = Depends(get_backend)):
    user = await backend.get(f"/users/{decode(user_id)}")
    if not user:
        raise HTTPException(status_code=404, detail="User not found")
    return adapt_user(user)


@router.post("", response_model=User, status_code=201)
async def create_user(body: UserCreate, backend: BackendClient = Depends(get_backend)):
    return adapt_user(await backend.post("/users", adapt_user_create(body)))


@router.put("/{user_id}", response_model=User)
async def update_user(user_id: str, body: UserUpdate, backend: BackendClient = Depends(get_backend)):
    return adapt_user(await backend.put(f"/users/{decode(user_id)}", adapt_user_update(body)))


@router.delete("/{user_id}", status_code=204)
async def delete_user(user_id: str, backend: BackendClient = Depends(get_backend)):
    await backend.delete(f"/users/{decode(user_id)}")
    return Response(status_code=204)
