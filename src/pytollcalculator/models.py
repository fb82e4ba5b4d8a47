"""Public data models."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True, slots=True)
class PolicyInfo:
    id: str
    name: str
    year: int


@dataclass(frozen=True, slots=True)
class FeeBand:
    """Inclusive hour and minute ranges charged at a fixed fee."""

    start_hour: int
    end_hour: int
    start_minute: int
    end_minute: int
    fee: int


@dataclass(frozen=True, slots=True)
class ExemptionCalendar:
    year: int
    holidays: frozenset[date]
    exempt_months: frozenset[int]
    weekend_days: frozenset[int]


@dataclass(frozen=True, slots=True)
class TollPolicy:
    id: str
    name: str
    fee_bands: tuple[FeeBand, ...]
    calendar: ExemptionCalendar
    daily_cap: int
    window_minutes: int

    @property
    def info(self) -> PolicyInfo:
        return PolicyInfo(id=self.id, name=self.name, year=self.calendar.year)
