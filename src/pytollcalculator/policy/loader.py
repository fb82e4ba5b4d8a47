"""Policy discovery and loading."""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable
from datetime import date
from importlib import resources
from importlib.resources.abc import Traversable

import jsonschema

from ..exceptions import PolicyError
from ..models import ExemptionCalendar, FeeBand, PolicyInfo, TollPolicy

_LOGGER = logging.getLogger(__name__)

POLICY_FILENAME = "policy.json"
SCHEMA_FILENAME = "policy.schema.json"
DEFAULT_POLICY_ID = "gothenburg_2013"
WEEKDAYS = ("monday", "tuesday", "wednesday", "thursday", "friday", "saturday", "sunday")
_POLICY_CACHE: tuple[TollPolicy, ...] | None = None


def _policy_root() -> Traversable:
    return resources.files("pytollcalculator.policy")


def load_policy_schema() -> dict:
    schema_path = _policy_root() / SCHEMA_FILENAME
    return json.loads(schema_path.read_text(encoding="utf-8"))


def _build_fee_band(data: dict) -> FeeBand:
    start_hour, end_hour = data["hours"]
    start_minute, end_minute = data["minutes"]
    if start_hour > end_hour or start_minute > end_minute:
        raise PolicyError("Fee band ranges must be ordered from low to high.")
    return FeeBand(
        start_hour=start_hour,
        end_hour=end_hour,
        start_minute=start_minute,
        end_minute=end_minute,
        fee=data["fee"],
    )


def _build_holidays(values: list[str], year: int) -> frozenset[date]:
    holidays: set[date] = set()
    for value in values:
        try:
            holiday = date.fromisoformat(value)
        except ValueError as exc:
            raise PolicyError(f"Policy holiday {value} is not a valid date.") from exc
        if holiday.year != year:
            raise PolicyError(f"Policy holiday {value} is outside the policy year.")
        holidays.add(holiday)
    return frozenset(holidays)


def _build_policy(data: dict, folder_name: str, schema: dict) -> TollPolicy:
    try:
        jsonschema.validate(instance=data, schema=schema)
    except jsonschema.ValidationError as exc:
        raise PolicyError(
            f"Policy {folder_name} does not match the policy schema.",
            detail=exc.message,
        ) from exc
    if data["id"] != folder_name:
        raise PolicyError("Policy id must match its folder name.")
    year = data["year"]
    calendar = ExemptionCalendar(
        year=year,
        holidays=_build_holidays(data["holidays"], year),
        exempt_months=frozenset(data["exempt_months"]),
        weekend_days=frozenset(WEEKDAYS.index(day) for day in data["weekend_days"]),
    )
    return TollPolicy(
        id=data["id"],
        name=data["name"],
        fee_bands=tuple(_build_fee_band(band) for band in data["fee_bands"]),
        calendar=calendar,
        daily_cap=data["daily_cap"],
        window_minutes=data["window_minutes"],
    )


def iter_policy_files() -> Iterable[tuple[str, Traversable]]:
    root = _policy_root()
    for entry in root.iterdir():
        if not entry.is_dir():
            continue
        policy_path = entry / POLICY_FILENAME
        if policy_path.is_file():
            yield entry.name, policy_path


def load_policies() -> list[TollPolicy]:
    global _POLICY_CACHE
    if _POLICY_CACHE is not None:
        return list(_POLICY_CACHE)
    policies: list[TollPolicy] = []
    try:
        schema = load_policy_schema()
        for folder_name, policy_path in iter_policy_files():
            try:
                data = json.loads(policy_path.read_text(encoding="utf-8"))
            except json.JSONDecodeError as exc:
                raise PolicyError("Policy file is not valid JSON.") from exc
            policies.append(_build_policy(data, folder_name, schema))
    except (FileNotFoundError, ModuleNotFoundError) as exc:
        _POLICY_CACHE = None
        raise PolicyError("Policy package was not found.") from exc
    _LOGGER.debug("Loaded %d toll policies", len(policies))
    _POLICY_CACHE = tuple(policies)
    return list(_POLICY_CACHE)


def clear_policy_cache() -> None:
    """Clear cached policies (used in tests)."""
    global _POLICY_CACHE
    _POLICY_CACHE = None


def list_policies() -> list[PolicyInfo]:
    return [policy.info for policy in load_policies()]


def get_policy(policy_id: str = DEFAULT_POLICY_ID) -> TollPolicy:
    if not policy_id:
        raise PolicyError("Policy id is required.")
    for policy in load_policies():
        if policy.id == policy_id:
            return policy
    raise PolicyError("Policy not found.")
