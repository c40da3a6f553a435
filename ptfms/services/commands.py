"""Reversible persistence commands.

A command wraps one insert and its inverse delete. Results are tri-state so a
caller can tell "nothing to undo" apart from a failed delete; the enum is
truthy only for ``SUCCEEDED`` so it still reads like the plain boolean.
"""
import enum
import logging
from abc import ABC, abstractmethod
from collections import deque

from ptfms.config import settings
from ptfms.dao import BaseDAO, FuelLogDAO, MaintenanceDAO, VehicleDAO
from ptfms.models.fuel_log import FuelLog
from ptfms.models.maintenance import MaintenanceRecord
from ptfms.models.vehicle import Vehicle

logger = logging.getLogger(__name__)


class CommandResult(str, enum.Enum):
    SUCCEEDED = "succeeded"
    FAILED = "failed"
    NOT_EXECUTED = "not_executed"

    def __bool__(self) -> bool:
        return self is CommandResult.SUCCEEDED


class Command(ABC):
    @abstractmethod
    async def execute(self) -> CommandResult:
        ...

    @abstractmethod
    async def undo(self) -> CommandResult:
        ...

    @property
    @abstractmethod
    def description(self) -> str:
        ...


class _AddRecordCommand(Command):
    """Insert through ``dao.add``; undo deletes the captured id."""

    label = "record"

    def __init__(self, dao: BaseDAO, record):
        self._dao = dao
        self.record = record
        self.record_id: int | None = None

    async def execute(self) -> CommandResult:
        if not await self._dao.add(self.record):
            return CommandResult.FAILED
        self.record_id = self.record.id
        logger.info("Added %s id=%s", self.label, self.record_id)
        return CommandResult.SUCCEEDED

    async def undo(self) -> CommandResult:
        if not self.record_id or self.record_id <= 0:
            return CommandResult.NOT_EXECUTED
        if not await self._dao.delete(self.record_id):
            if await self._dao.get(self.record_id) is None:
                # removed by some other path (direct delete, cascade)
                logger.info("Nothing to undo: %s id=%s no longer exists", self.label, self.record_id)
                self.record_id = None
                return CommandResult.NOT_EXECUTED
            logger.warning("Undo failed: could not delete %s id=%s", self.label, self.record_id)
            return CommandResult.FAILED
        logger.info("Undid %s id=%s", self.label, self.record_id)
        self.record_id = None
        return CommandResult.SUCCEEDED

    @property
    def description(self) -> str:
        return f"add {self.label} {self.record_id}" if self.record_id else f"add {self.label}"


class AddVehicleCommand(_AddRecordCommand):
    label = "vehicle"

    def __init__(self, vehicle: Vehicle, dao: VehicleDAO | None = None):
        super().__init__(dao or VehicleDAO(), vehicle)


class ScheduleMaintenanceCommand(_AddRecordCommand):
    label = "maintenance"

    def __init__(self, maintenance: MaintenanceRecord, dao: MaintenanceDAO | None = None):
        super().__init__(dao or MaintenanceDAO(), maintenance)


class AddFuelLogCommand(_AddRecordCommand):
    label = "fuel log"

    def __init__(self, fuel_log: FuelLog, dao: FuelLogDAO | None = None):
        super().__init__(dao or FuelLogDAO(), fuel_log)


class CommandHistory:
    """In-memory stack of executed commands, newest last. Not persisted.

    Only the newest ``max_size`` commands are kept; older ones fall off and
    can no longer be undone.
    """

    def __init__(self, max_size: int | None = None):
        self._done: deque[Command] = deque(maxlen=max_size or settings.command_history_size)

    async def run(self, command: Command) -> CommandResult:
        result = await command.execute()
        if result:
            self._done.append(command)
        return result

    async def undo_last(self) -> CommandResult:
        if not self._done:
            return CommandResult.NOT_EXECUTED
        command = self._done[-1]
        result = await command.undo()
        if result is not CommandResult.FAILED:
            self._done.pop()
        return result

    def __len__(self) -> int:
        return len(self._done)

    def descriptions(self) -> list[str]:
        return [c.description for c in reversed(self._done)]
