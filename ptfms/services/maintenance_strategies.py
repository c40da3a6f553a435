"""Maintenance scheduling strategies.

Each strategy turns a vehicle and its last service record into a maintenance
interval (days), a next-maintenance timestamp and a due flag. Strategies are
stateless; ``now`` can be passed explicitly to pin the wall clock.
"""
import enum
import logging
from abc import ABC, abstractmethod
from datetime import date, datetime, time, timedelta, timezone
from typing import Iterable

from ptfms.models.maintenance import MaintenanceRecord, MaintenanceStatus
from ptfms.models.vehicle import Vehicle

logger = logging.getLogger(__name__)

MIN_PREDICTIVE_INTERVAL_DAYS = 14


class StrategyType(str, enum.Enum):
    TIME = "time"
    USAGE = "usage"
    PREDICTIVE = "predictive"


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def _as_utc_datetime(value: date | datetime) -> datetime:
    if isinstance(value, datetime):
        return value if value.tzinfo else value.replace(tzinfo=timezone.utc)
    return datetime.combine(value, time.min, tzinfo=timezone.utc)


def _normalized(value: str | None) -> str:
    return (value or "").strip().lower()


class MaintenanceStrategy(ABC):
    strategy_type: str

    @abstractmethod
    def get_maintenance_interval(self, vehicle: Vehicle, now: datetime | None = None) -> int:
        """Days between two services for ``vehicle``."""

    @abstractmethod
    def due_buffer_days(self, vehicle: Vehicle, now: datetime) -> int:
        """How many days ahead of the next date the vehicle already counts as due."""

    def calculate_next_maintenance_date(
        self,
        vehicle: Vehicle,
        last_maintenance: MaintenanceRecord | None,
        now: datetime | None = None,
    ) -> datetime:
        now = now or _utc_now()
        interval = timedelta(days=self.get_maintenance_interval(vehicle, now))
        if last_maintenance is not None and last_maintenance.service_date is not None:
            return _as_utc_datetime(last_maintenance.service_date) + interval
        return _as_utc_datetime(now) + interval

    def is_maintenance_due(
        self,
        vehicle: Vehicle,
        last_maintenance: MaintenanceRecord | None,
        now: datetime | None = None,
    ) -> bool:
        now = _as_utc_datetime(now or _utc_now())
        next_date = self.calculate_next_maintenance_date(vehicle, last_maintenance, now)
        buffer = timedelta(days=self.due_buffer_days(vehicle, now))
        return now >= next_date - buffer


class TimeBasedMaintenanceStrategy(MaintenanceStrategy):
    """Fixed calendar intervals by vehicle type."""

    strategy_type = "Time-Based"

    DEFAULT_INTERVAL_DAYS = 90
    INTERVALS_BY_TYPE = {"bus": 60, "van": 90, "truck": 45}
    DUE_BUFFER_DAYS = 7

    def get_maintenance_interval(self, vehicle: Vehicle, now: datetime | None = None) -> int:
        return self.INTERVALS_BY_TYPE.get(_normalized(vehicle.vehicle_type), self.DEFAULT_INTERVAL_DAYS)

    def due_buffer_days(self, vehicle: Vehicle, now: datetime) -> int:
        return self.DUE_BUFFER_DAYS


class UsageBasedMaintenanceStrategy(MaintenanceStrategy):
    """Intervals driven by how hard the vehicle is currently worked (its status)."""

    strategy_type = "Usage-Based"

    DEFAULT_INTERVAL_DAYS = 120
    INTERVALS_BY_STATUS = {"active": 30, "in-service": 30, "maintenance": 180, "available": 90}
    IN_SERVICE_STATUSES = {"active", "in-service"}

    def get_maintenance_interval(self, vehicle: Vehicle, now: datetime | None = None) -> int:
        return self.INTERVALS_BY_STATUS.get(_normalized(vehicle.status), self.DEFAULT_INTERVAL_DAYS)

    def due_buffer_days(self, vehicle: Vehicle, now: datetime) -> int:
        return 3 if _normalized(vehicle.status) in self.IN_SERVICE_STATUSES else 7


class PredictiveMaintenanceStrategy(MaintenanceStrategy):
    """Age- and type-aware intervals, flagged earlier the older the vehicle gets.

    A vehicle without a recorded year is treated as belonging to the oldest
    age band.
    """

    strategy_type = "Predictive"

    # percentage of the age-based interval kept for each type
    TYPE_FACTORS = {"bus": 80, "truck": 70, "van": 90}

    @staticmethod
    def vehicle_age(vehicle: Vehicle, now: datetime) -> int | None:
        if vehicle.year is None:
            return None
        return now.year - vehicle.year

    def get_maintenance_interval(self, vehicle: Vehicle, now: datetime | None = None) -> int:
        age = self.vehicle_age(vehicle, now or _utc_now())
        if age is None or age > 10:
            interval = 30
        elif age > 5:
            interval = 45
        elif age > 2:
            interval = 60
        else:
            interval = 90

        factor = self.TYPE_FACTORS.get(_normalized(vehicle.vehicle_type))
        if factor is not None:
            interval = interval * factor // 100

        return max(interval, MIN_PREDICTIVE_INTERVAL_DAYS)

    def due_buffer_days(self, vehicle: Vehicle, now: datetime) -> int:
        age = self.vehicle_age(vehicle, now)
        if age is None or age > 10:
            return 14
        if age > 5:
            return 10
        return 5


_STRATEGY_CLASSES: dict[StrategyType, type[MaintenanceStrategy]] = {
    StrategyType.TIME: TimeBasedMaintenanceStrategy,
    StrategyType.USAGE: UsageBasedMaintenanceStrategy,
    StrategyType.PREDICTIVE: PredictiveMaintenanceStrategy,
}


def parse_strategy_type(name: str | None) -> StrategyType | None:
    try:
        return StrategyType(_normalized(name))
    except ValueError:
        return None


class StrategyRegistry:
    """One instance of every strategy plus the one currently in use."""

    def __init__(self, default: str | StrategyType = StrategyType.TIME):
        self._strategies = {kind: cls() for kind, cls in _STRATEGY_CLASSES.items()}
        selected = parse_strategy_type(default)
        if selected is None:
            logger.warning("Unknown maintenance strategy '%s', falling back to time-based", default)
            selected = StrategyType.TIME
        self._current = selected

    @property
    def current_type(self) -> StrategyType:
        return self._current

    @property
    def current(self) -> MaintenanceStrategy:
        return self._strategies[self._current]

    def get(self, kind: StrategyType) -> MaintenanceStrategy:
        return self._strategies[kind]

    def select(self, name: str | StrategyType) -> bool:
        kind = parse_strategy_type(name)
        if kind is None:
            return False
        self._current = kind
        logger.info("Maintenance strategy set to %s", self.current.strategy_type)
        return True

    def available(self) -> dict[str, str]:
        return {kind.value: strategy.strategy_type for kind, strategy in self._strategies.items()}


def latest_service_record(records: Iterable[MaintenanceRecord]) -> MaintenanceRecord | None:
    """The completed record with the most recent service date, if any."""
    completed = [
        r for r in records
        if r.service_date is not None and r.status == MaintenanceStatus.COMPLETED.value
    ]
    if not completed:
        return None
    return max(completed, key=lambda r: (r.service_date, r.id or 0))
