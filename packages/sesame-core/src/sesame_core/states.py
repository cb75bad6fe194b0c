from enum import Enum, IntEnum


class LockState(str, Enum):
    """Enumeration of lock states reported by the device.

    Values the server adds later are kept as UNKNOWN members that still
    carry the raw string.
    """
    LOCKED = "locked"
    UNLOCKED = "unlocked"
    MOVED = "moved"

    @classmethod
    def _missing_(cls, value):
        if not isinstance(value, str):
            return None
        member = str.__new__(cls, value)
        member._name_ = "UNKNOWN"
        member._value_ = value
        return member

    @property
    def is_known(self) -> bool:
        return self._name_ != "UNKNOWN"

    def __str__(self) -> str:
        return self.value


class HistoryType(IntEnum):
    """Enumeration of history event types logged by the device.

    Integers outside the known set are kept as UNKNOWN members that still
    carry the raw value.
    """
    NONE = 0
    BLE_LOCK = 1
    BLE_UNLOCK = 2
    TIME_CHANGED = 3
    AUTOLOCK_UPDATED = 4
    MECH_SETTING_UPDATED = 5
    AUTOLOCK = 6
    MANUAL_LOCKED = 7
    MANUAL_UNLOCKED = 8
    MANUAL_ELSE = 9
    DRIVE_LOCKED = 10
    DRIVE_UNLOCKED = 11
    DRIVE_FAILED = 12
    BLE_ADV_PARAMETER_UPDATED = 13

    @classmethod
    def _missing_(cls, value):
        # bool is an int subclass but never a valid event type
        if not isinstance(value, int) or isinstance(value, bool):
            return None
        member = int.__new__(cls, value)
        member._name_ = "UNKNOWN"
        member._value_ = value
        return member

    @property
    def is_known(self) -> bool:
        return self._name_ != "UNKNOWN"

    def __str__(self) -> str:
        return self._name_ if self.is_known else f"UNKNOWN({self._value_})"
