from __future__ import annotations

from typing import Optional

from fastapi import HTTPException, status
from fastapi.security import APIKeyHeader
from starlette.requests import Request

from ...admin.settings import DEFAULT_COOKIE_NAME, DEFAULT_HEADER_NAME

# Expose this so apps can plug it into dependencies if they want OpenAPI security
license_key_scheme = APIKeyHeader(name=DEFAULT_HEADER_NAME, auto_error=False)

AUTHORIZATION_SCHEME = "License "


def extract_license_key_from_request(
    request: Request,
    header_value: Optional[str] = None,
    header_name: str = DEFAULT_HEADER_NAME,
    cookie_name: str = DEFAULT_COOKIE_NAME,
) -> str:
    """
    Extract a license key from either:

      1. The license header (e.g. 'X-License-Key')
      2. `Authorization: License <key>`
      3. A cookie (e.g. 'license_key')

    Raises HTTPException(401) if no key is found.
    """
    # 1) Value resolved by the APIKeyHeader scheme, then the configured header
    for candidate in (header_value, request.headers.get(header_name)):
        key = (candidate or "").strip()
        if key:
            return key

    # 2) Authorization header
    auth_header = request.headers.get("Authorization")
    if auth_header and auth_header.startswith(AUTHORIZATION_SCHEME):
        key = auth_header.removeprefix(AUTHORIZATION_SCHEME).strip()
        if key:
            return key

    # 3) Cookie
    cookie_key = (request.cookies.get(cookie_name) or "").strip()
    if cookie_key:
        return cookie_key

    raise HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="License key required",
    )
