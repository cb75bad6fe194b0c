from datetime import datetime
from typing import Annotated, Any

from pydantic import BaseModel, ConfigDict, Field, PlainValidator, StrictFloat, StrictInt, ValidationError

from sesame_core.errors import DecodeError
from sesame_core.states import LockState


def _lock_state(value: Any) -> LockState:
    if not isinstance(value, str):
        raise ValueError(f"lock state must be a string, got {type(value).__name__}")
    return LockState(value)


class StatusSnapshot(BaseModel):
    """Point-in-time status of a device as returned by the status API."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    battery_percentage: StrictInt = Field(alias="batteryPercentage")
    battery_voltage: StrictFloat = Field(alias="batteryVoltage")
    position: StrictInt
    lock_state: Annotated[LockState, PlainValidator(_lock_state)] = Field(alias="CHSesame2Status")
    # lax: ISO 8601 strings and epoch numbers
    timestamp: datetime

    @classmethod
    def from_api_response(cls, response_data: Any) -> 'StatusSnapshot':
        """Create a StatusSnapshot from the decoded JSON body."""
        try:
            return cls.model_validate(response_data)
        except ValidationError as e:
            raise DecodeError(f"decoding status response: {e}") from e

    def __str__(self) -> str:
        return (f"{str(self.lock_state)} (battery {self.battery_percentage}% / {self.battery_voltage}V, "
                f"position {self.position}, at {self.timestamp.isoformat()})")
