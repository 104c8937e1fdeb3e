from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from fastapi import Depends, HTTPException, Request, status

from .security import extract_license_key_from_request, license_key_scheme
from ..common.license_factory import LicenseValidator
from ...admin.settings import DEFAULT_COOKIE_NAME, DEFAULT_HEADER_NAME
from ...domain.constants import LicenseErrorKind
from ...domain.entities import LicenseInfo
from ...domain.exceptions import LicenseError

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class FastAPILicensing:
    """
    FastAPI integration for alvan_lic.

    Wraps a LicenseValidator in dependencies that gate routes behind a
    valid, unexpired license key:

        licensing = create_fastapi_licensing(secret_key=settings.LICENSE_SECRET)

        @app.get("/export")
        async def export(info: LicenseInfo = Depends(licensing.get_license)):
            ...
    """

    validator: LicenseValidator
    header_name: str = DEFAULT_HEADER_NAME
    cookie_name: str = DEFAULT_COOKIE_NAME

    def _extract(self, request: Request, header_value: Optional[str]) -> str:
        return extract_license_key_from_request(
            request,
            header_value,
            header_name=self.header_name,
            cookie_name=self.cookie_name,
        )

    # ------------------------------------------------------------------ #
    # Dependencies
    # ------------------------------------------------------------------ #

    async def get_license(
            self,
            request: Request,
            header_value: Optional[str] = Depends(license_key_scheme),
    ) -> LicenseInfo:
        """Dependency: require a valid license key."""
        license_key = self._extract(request, header_value)
        try:
            return self.validator.validate_key(license_key)
        except LicenseError as exc:
            logger.info("Rejected license key on %s: %s", request.url.path, exc.kind.value)
            detail = "License expired" if exc.kind is LicenseErrorKind.EXPIRED else str(exc)
            raise HTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED,
                detail=detail,
            ) from exc

    async def get_optional_license(
            self,
            request: Request,
            header_value: Optional[str] = Depends(license_key_scheme),
    ) -> LicenseInfo | None:
        """Dependency: license key if present and valid, otherwise None."""
        try:
            license_key = self._extract(request, header_value)
        except HTTPException:
            # no key anywhere -> unlicensed
            return None

        try:
            return self.validator.validate_key(license_key)
        except LicenseError:
            return None
