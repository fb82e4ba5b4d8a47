"""Daily toll fee calculation."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from datetime import datetime

from .models import TollPolicy
from .policy.loader import DEFAULT_POLICY_ID, get_policy
from .util import Passing, ensure_datetime, mask_license_plate, minutes_between, normalize_passings
from .vehicle import Vehicle

_LOGGER = logging.getLogger(__name__)


class TollCalculator:
    """Compute toll fees for one vehicle and one day under a fixed policy."""

    def __init__(self, policy: TollPolicy | None = None) -> None:
        self._policy = policy if policy is not None else get_policy(DEFAULT_POLICY_ID)

    @property
    def policy(self) -> TollPolicy:
        return self._policy

    def calculate_total_toll_fee(
        self,
        vehicle: Vehicle | None,
        passings: Iterable[Passing],
    ) -> int:
        """Return the total toll fee for one day of passings.

        Exempt vehicles and empty passing lists cost nothing. Passings are
        sorted before charging and must all fall on the same calendar day.
        """
        plate = mask_license_plate(vehicle.license_plate if vehicle is not None else None)
        _LOGGER.debug("Policy %s fee calculation started for %s", self._policy.id, plate)
        if self.is_toll_exempt_vehicle(vehicle):
            _LOGGER.debug("Vehicle %s is toll exempt", plate)
            return 0
        dates = normalize_passings(passings)
        if not dates:
            return 0
        total = self._get_total_fee(dates)
        _LOGGER.debug(
            "Policy %s fee calculation completed for %s: %d",
            self._policy.id,
            plate,
            total,
        )
        return total

    def _get_total_fee(self, dates: list[datetime]) -> int:
        # window_start stays fixed until a passing lands outside its window.
        window_start = dates[0]
        total = 0
        for passing in dates:
            next_fee = self.get_toll_fee(passing)
            start_fee = self.get_toll_fee(window_start)
            if minutes_between(window_start, passing) <= self._policy.window_minutes:
                if total > 0:
                    total -= start_fee
                total += max(next_fee, start_fee)
            else:
                total += next_fee
                window_start = passing
        return min(total, self._policy.daily_cap)

    def get_toll_fee(self, timestamp: Passing) -> int:
        """Return the fee for a single passing, ignoring other passings."""
        moment = ensure_datetime(timestamp)
        if self.is_toll_exempt_date(moment):
            return 0
        hour = moment.hour
        minute = moment.minute
        for band in self._policy.fee_bands:
            if (
                band.start_hour <= hour <= band.end_hour
                and band.start_minute <= minute <= band.end_minute
            ):
                return band.fee
        return 0

    def is_toll_exempt_vehicle(self, vehicle: Vehicle | None) -> bool:
        if vehicle is None:
            return False
        return vehicle.is_toll_exempt()

    def is_toll_exempt_date(self, timestamp: Passing) -> bool:
        day = ensure_datetime(timestamp).date()
        calendar = self._policy.calendar
        if day.weekday() in calendar.weekend_days:
            return True
        if day.year != calendar.year:
            return False
        return day in calendar.holidays or day.month in calendar.exempt_months
