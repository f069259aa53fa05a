from pydantic import Field

from govdash.schemas.common import DisplayModel


class User(DisplayModel):
    id: str
    backend_id: int | None = Field(default=None, alias="_backendId")
    email: str = ""
    name: str = ""
    role: str
    avatar: str | None = None
    permissions: list[str] = []


class UserCreate(DisplayModel):
    email: str
    full_name: str
    password: str
    phone: str | None = None
    department: str | None = None
    job_title: str | None = None
    role_id: int | None = None
    is_active: bool = True


class UserUpdate(DisplayModel):
    email: str | None = None
    full_name: str | None = None
    phone: str | None = None
    department: str | None = None
    job_title: str | None = None
    role_id: int | None = None
    is_active: bool | None = None
