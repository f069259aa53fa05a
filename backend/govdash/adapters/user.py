"""User adapters.

The persistence ``role`` field arrives either as a bare role code or as a
nested role object carrying its own code and permission list. It is parsed
once into one of two variants, ``CodeOnly`` or ``CodeWithPermissions``, and
everything downstream works on the variant.
"""
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Union

from govdash.adapters.fields import (
    as_mapping, optional_int, optional_text, text, without_nulls,
)
from govdash.adapters.translators import ROLE
from govdash.schemas.user import User, UserCreate, UserUpdate

ADMIN_ROLE_CODE = "super_admin"
DEFAULT_ROLE_CODE = "viewer"

# Arabic "mudir" (administrator / manager) as it appears in localized role names
ADMIN_NAME_TOKEN = "مدير"


@dataclass(frozen=True)
class CodeOnly:
    code: str


@dataclass(frozen=True)
class CodeWithPermissions:
    code: str
    permissions: tuple[str, ...]


RoleField = Union[CodeOnly, CodeWithPermissions]


def parse_role(raw: Any) -> RoleField:
    if isinstance(raw, Mapping):
        code = raw.get("code")
        if not code:
            return CodeOnly(DEFAULT_ROLE_CODE)
        permissions = raw.get("permissions")
        if isinstance(permissions, list):
            codes = tuple(
                text(p.get("code")) for p in permissions
                if isinstance(p, Mapping) and p.get("code")
            )
            return CodeWithPermissions(text(code), codes)
        return CodeOnly(text(code))
    if isinstance(raw, str) and raw:
        return CodeOnly(raw)
    return CodeOnly(DEFAULT_ROLE_CODE)


def names_admin(role_name: str) -> bool:
    """Whether a free-text role name designates an administrator."""
    return ADMIN_NAME_TOKEN in role_name or "admin" in role_name.lower()


def resolve_role(user: Mapping) -> tuple[str, list[str]]:
    """Return (persistence role code, permission codes) for a user record."""
    role = parse_role(user.get("role"))
    if isinstance(role, CodeWithPermissions):
        code, permissions = role.code, list(role.permissions)
    else:
        code, permissions = role.code, []

    # role_name wins over the role field when it names an administrator
    if names_admin(text(user.get("role_name"))):
        code = ADMIN_ROLE_CODE
    return code, permissions


def adapt_user(user: Any) -> User:
    user = as_mapping(user)
    code, permissions = resolve_role(user)
    backend_id = optional_int(user.get("id"))
    return User(
        id=text(user.get("id")),
        backend_id=backend_id,
        email=text(user.get("email")),
        name=text(user.get("full_name")),
        role=ROLE.to_display(code),
        avatar=optional_text(user.get("avatar_url")),
        permissions=permissions,
    )


def adapt_user_create(data: UserCreate) -> dict:
    return without_nulls({
        "email": data.email,
        "full_name": data.full_name,
        "password": data.password,
        "phone": data.phone,
        "department": data.department,
        "job_title": data.job_title,
        "role_id": data.role_id,
        "is_active": data.is_active,
    })


def adapt_user_update(data: UserUpdate) -> dict:
    patch: dict = {}
    for field in ("email", "full_name", "phone", "department", "job_title", "role_id"):
        value = getattr(data, field)
        if value:
            patch[field] = value
    if data.is_active is not None:
        patch["is_active"] = data.is_active
    return patch
