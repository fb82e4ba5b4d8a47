"""Manual fee check for a day of passings.

Run from the repository root with:
  PYTHONPATH=src python scripts/toll_fee_check.py --vehicle car \
    2013-02-07T06:23:27 2013-02-07T07:15:00 2013-02-07T15:47:00

Optional environment variables:
  POLICY_ID
  LICENSE_PLATE

Debug helpers:
  --debug enables debug logging and prints per-passing fees.
  --sanitize-output masks the license plate in printed output.
"""

from __future__ import annotations

import argparse
import logging
import os
import sys

from pytollcalculator import TollCalculator, get_policy, get_vehicle_class, list_policies
from pytollcalculator.exceptions import PolicyError, ValidationError
from pytollcalculator.policy.loader import DEFAULT_POLICY_ID
from pytollcalculator.util import mask_license_plate, normalize_passings

_LOGGER = logging.getLogger(__name__)


def _format_action(label: str, value: str) -> str:
    return f"{label}: {value}"


def _parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Compute the toll fee for one day of passings.")
    parser.add_argument("passings", nargs="*", help="ISO 8601 passing timestamps.")
    parser.add_argument("--vehicle", default="car", help="Vehicle type (default: car).")
    parser.add_argument("--policy", dest="policy_id", help="Policy id.")
    parser.add_argument("--plate", dest="license_plate", help="License plate.")
    parser.add_argument("--list-policies", action="store_true", help="List bundled policies.")
    parser.add_argument("--log-level", default="INFO", help="Logging level (default: INFO).")
    parser.add_argument("--debug", action="store_true", help="Enable debug output.")
    parser.add_argument(
        "--sanitize-output",
        action="store_true",
        help="Mask the license plate in printed output.",
    )
    return parser.parse_args()


def main() -> int:
    args = _parse_args()
    log_level = args.log_level.upper()
    if args.debug and log_level == "INFO":
        log_level = "DEBUG"
    logging.basicConfig(level=log_level)

    if args.list_policies:
        for info in list_policies():
            print(f"- {info.id} | {info.name} | {info.year}")
        return 0

    policy_id = args.policy_id or os.getenv("POLICY_ID") or DEFAULT_POLICY_ID
    license_plate = args.license_plate or os.getenv("LICENSE_PLATE")
    try:
        vehicle = get_vehicle_class(args.vehicle)(license_plate=license_plate)
        calculator = TollCalculator(get_policy(policy_id))
        passings = normalize_passings(args.passings)
        fee = calculator.calculate_total_toll_fee(vehicle, passings)
    except (PolicyError, ValidationError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 2

    _LOGGER.info("Computed fee under policy %s", policy_id)
    plate_value = vehicle.license_plate or "-"
    if args.sanitize_output and vehicle.license_plate:
        plate_value = mask_license_plate(vehicle.license_plate)
    print(_format_action("Policy", f"{calculator.policy.name} ({calculator.policy.id})"))
    print(_format_action("Vehicle", f"{vehicle.vehicle_type} | {plate_value}"))
    if args.debug:
        for passing in passings:
            print(f"- {passing.isoformat()} | {calculator.get_toll_fee(passing)}")
    print(_format_action("Fee", str(fee)))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
