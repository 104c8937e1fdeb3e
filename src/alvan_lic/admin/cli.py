# src/alvan_lic/admin/cli.py

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Any, Sequence

from .env import settings_from_env
from .formatting import format_duration
from ..domain.constants import DEFAULT_SECRET_KEY, VERSION, LicenseDuration, LicenseErrorKind
from ..domain.exceptions import LicenseError
from ..integrations.common.license_factory import LicenseGenerator, LicenseValidator
from ..utils.time import format_instant, parse_instant, utc_now

PRESETS = {
    "hour": LicenseDuration.ONE_HOUR,
    "day": LicenseDuration.ONE_DAY,
    "week": LicenseDuration.ONE_WEEK,
    "month": LicenseDuration.ONE_MONTH,
    "year": LicenseDuration.ONE_YEAR,
}

REASONS = {
    LicenseErrorKind.EXPIRED: "License has expired",
    LicenseErrorKind.INVALID_SIGNATURE: "Invalid signature (wrong secret key or tampered key)",
    LicenseErrorKind.INVALID_FORMAT: "Invalid license key format",
    LicenseErrorKind.INVALID_DATA: "Invalid license data",
    LicenseErrorKind.DECODE_ERROR: "Base64 decoding error",
    LicenseErrorKind.TIME_PARSE_ERROR: "Time parsing error",
}


def _parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="alvan-cli",
        description="Generate and validate offline alvan license keys",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {VERSION}")
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Log debug output to stderr.",
    )

    commands = parser.add_subparsers(dest="command", required=True)

    generate = commands.add_parser("generate", help="Generate a new license key")
    generate.add_argument(
        "--secret",
        "-s",
        help="Secret key for signing (default: ALVAN_LIC_SECRET_KEY, then the testing secret).",
    )
    duration = generate.add_mutually_exclusive_group()
    duration.add_argument(
        "--hours",
        "-H",
        type=float,
        help="Duration in hours (default: ALVAN_LIC_DEFAULT_HOURS or 24).",
    )
    duration.add_argument(
        "--preset",
        "-p",
        choices=list(PRESETS),
        help="Named duration instead of --hours.",
    )
    generate.add_argument(
        "--issued-at",
        type=parse_instant,
        help="ISO-8601 issuance time (default: now).",
    )

    validate = commands.add_parser("validate", help="Validate an existing license key")
    validate.add_argument(
        "--secret",
        "-s",
        help="Secret key used when the key was generated.",
    )
    validate.add_argument(
        "--key",
        "-k",
        help="License key to validate (prompted for when omitted).",
    )
    validate.add_argument(
        "--at",
        type=parse_instant,
        help="ISO-8601 time to validate against (default: now).",
    )

    return parser.parse_args(args=argv)


def _emit(document: dict[str, Any]) -> None:
    json.dump(document, sys.stdout, indent=2)
    sys.stdout.write("\n")


def _fail(document: dict[str, Any]) -> None:
    _emit({"ok": False, **document})
    raise SystemExit(1)


def _generate(args: argparse.Namespace) -> dict[str, Any]:
    settings = settings_from_env()
    secret = args.secret or settings.secret_key

    if args.hours is not None:
        hours = args.hours
    elif args.preset:
        hours = PRESETS[args.preset].value
    else:
        hours = settings.default_hours

    issued_at = args.issued_at or utc_now()
    license_key = LicenseGenerator(secret).generate_key_with_timestamp(hours, issued_at)
    # Read back the floored timestamps that were actually signed.
    info = LicenseValidator(secret).validate_key_at_time(license_key, issued_at)

    return {
        "license_key": license_key,
        "issued_at": format_instant(info.issued_at),
        "expires_at": format_instant(info.expires_at),
        "hours": hours,
        "valid_for": format_duration(hours),
        "secret": "default" if secret == DEFAULT_SECRET_KEY else "custom",
    }


def _validate(args: argparse.Namespace) -> dict[str, Any]:
    secret = args.secret or settings_from_env().secret_key

    license_key = args.key
    if not license_key:
        try:
            license_key = input("Enter the license key to validate: ")
        except EOFError:
            license_key = ""
    license_key = license_key.strip()
    if not license_key:
        _fail({"error": "License key cannot be empty"})

    validator = LicenseValidator(secret)
    if args.at is not None:
        info = validator.validate_key_at_time(license_key, args.at)
    else:
        info = validator.validate_key(license_key)

    return {
        "status": "active",
        "issued_at": format_instant(info.issued_at),
        "expires_at": format_instant(info.expires_at),
        "hours_remaining": round(info.hours_remaining, 2),
        "remaining": format_duration(info.hours_remaining),
    }


def main(argv: Sequence[str] | None = None) -> None:
    args = _parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        if args.command == "generate":
            summary = _generate(args)
        else:
            summary = _validate(args)
    except LicenseError as exc:
        _fail({"error_kind": exc.kind.value, "reason": REASONS[exc.kind], "error": str(exc)})
    except (ValueError, TypeError) as exc:
        _fail({"error": str(exc)})

    _emit({"ok": True, **summary})


if __name__ == "__main__":
    main()
