"""Read the signed-in user's details from the JWT claims stored on a request."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from adminkit.claims import MapClaims
from adminkit.context import RequestContext
from adminkit.convert import current_time_str

_log = logging.getLogger(__name__)

JWT_PAYLOAD_KEY = "JWT_PAYLOAD"

_CONVERSION_ERRORS = (LookupError, TypeError, ValueError)


def _warn(ctx: RequestContext, what: str) -> None:
    _log.warning("%s [WARNING] %s %s %s", current_time_str(), ctx.method, ctx.path, what)


def extract_claims(ctx: RequestContext) -> MapClaims:
    """Return the claims stored on the request, or empty claims when there are none."""
    claims = ctx.get(JWT_PAYLOAD_KEY)
    if claims is None:
        return MapClaims()
    if isinstance(claims, MapClaims):
        return claims
    if isinstance(claims, Mapping):
        return MapClaims(claims)
    raise TypeError(f"claims of type {type(claims).__name__} are not a mapping")


def get(ctx: RequestContext, key: str) -> Any:
    """Return a raw claim, or None (with a warning) when it is missing."""
    value = extract_claims(ctx).get(key)
    if value is not None:
        return value
    _warn(ctx, f"Get missing {key}")
    return None


def get_user_id(ctx: RequestContext) -> int:
    """Return the 'identity' claim as an integer, or 0 when it is missing or invalid."""
    try:
        return extract_claims(ctx).identity()
    except _CONVERSION_ERRORS as exc:
        _warn(ctx, f"GetUserId missing identity error: {exc}")
        return 0


def get_user_id_str(ctx: RequestContext) -> str:
    return extract_claims(ctx).as_string("identity")


def get_user_name(ctx: RequestContext) -> str:
    return extract_claims(ctx).as_string("nice")


def get_role_name(ctx: RequestContext) -> str:
    return extract_claims(ctx).as_string("rolekey")


def get_role_id(ctx: RequestContext) -> int:
    """Return the 'roleid' claim, or 0 when it is missing or invalid."""
    try:
        return extract_claims(ctx).as_int("roleid")
    except _CONVERSION_ERRORS as exc:
        _warn(ctx, f"GetRoleId missing roleid error: {exc}")
        return 0


def get_dept_id(ctx: RequestContext) -> int:
    """Return the 'deptid' claim, or 0 when it is missing or invalid."""
    try:
        return extract_claims(ctx).as_int("deptid")
    except _CONVERSION_ERRORS as exc:
        _warn(ctx, f"GetDeptId missing deptid error: {exc}")
        return 0


def get_dept_name(ctx: RequestContext) -> str:
    return extract_claims(ctx).as_string("deptkey")