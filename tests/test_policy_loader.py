import json
from datetime import date

import pytest

from pytollcalculator.exceptions import PolicyError
from pytollcalculator.policy import loader as loader_module


@pytest.fixture
def policy_data() -> dict:
    root = loader_module._policy_root()
    return json.loads((root / "gothenburg_2013" / "policy.json").read_text(encoding="utf-8"))


def test_list_policies_includes_default() -> None:
    policies = loader_module.list_policies()
    assert loader_module.DEFAULT_POLICY_ID in {policy.id for policy in policies}


def test_get_policy_default() -> None:
    policy = loader_module.get_policy()
    assert policy.id == "gothenburg_2013"
    assert policy.daily_cap == 60
    assert policy.window_minutes == 60
    assert policy.calendar.year == 2013
    assert policy.calendar.exempt_months == frozenset({7})
    assert policy.calendar.weekend_days == frozenset({5, 6})
    assert date(2013, 12, 31) in policy.calendar.holidays
    assert len(policy.calendar.holidays) == 16
    assert len(policy.fee_bands) == 10
    assert policy.info.year == 2013


def test_get_policy_missing() -> None:
    with pytest.raises(PolicyError):
        loader_module.get_policy("missing")


def test_get_policy_requires_id() -> None:
    with pytest.raises(PolicyError):
        loader_module.get_policy("")


def test_build_policy_rejects_folder_mismatch(policy_data: dict) -> None:
    schema = loader_module.load_policy_schema()
    with pytest.raises(PolicyError):
        loader_module._build_policy(policy_data, "other_folder", schema)


def test_build_policy_rejects_schema_violation(policy_data: dict) -> None:
    schema = loader_module.load_policy_schema()
    policy_data["daily_cap"] = -1
    with pytest.raises(PolicyError) as excinfo:
        loader_module._build_policy(policy_data, "gothenburg_2013", schema)
    assert excinfo.value.detail


def test_build_policy_rejects_holiday_outside_year(policy_data: dict) -> None:
    schema = loader_module.load_policy_schema()
    policy_data["holidays"] = ["2014-01-01"]
    with pytest.raises(PolicyError):
        loader_module._build_policy(policy_data, "gothenburg_2013", schema)


def test_build_policy_rejects_reversed_band(policy_data: dict) -> None:
    schema = loader_module.load_policy_schema()
    policy_data["fee_bands"] = [{"hours": [14, 8], "minutes": [30, 59], "fee": 8}]
    with pytest.raises(PolicyError):
        loader_module._build_policy(policy_data, "gothenburg_2013", schema)


def test_load_policies_uses_cache(monkeypatch: pytest.MonkeyPatch) -> None:
    loader_module.clear_policy_cache()
    calls = {"count": 0}
    original = loader_module.iter_policy_files

    def wrapped():
        calls["count"] += 1
        return original()

    monkeypatch.setattr(loader_module, "iter_policy_files", wrapped)

    first = loader_module.load_policies()
    second = loader_module.load_policies()

    assert calls["count"] == 1
    assert first == second


def test_clear_policy_cache_forces_reload(monkeypatch: pytest.MonkeyPatch) -> None:
    loader_module.clear_policy_cache()
    calls = {"count": 0}
    original = loader_module.iter_policy_files

    def wrapped():
        calls["count"] += 1
        return original()

    monkeypatch.setattr(loader_module, "iter_policy_files", wrapped)

    loader_module.load_policies()
    loader_module.clear_policy_cache()
    loader_module.load_policies()

    assert calls["count"] == 2
