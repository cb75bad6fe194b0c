from datetime import datetime
from typing import Annotated, Any, List

from pydantic import BaseModel, ConfigDict, Field, PlainValidator, StrictInt, StrictStr, TypeAdapter, ValidationError

from sesame_core.errors import DecodeError
from sesame_core.states import HistoryType


def _history_type(value: Any) -> HistoryType:
    if not isinstance(value, int) or isinstance(value, bool):
        raise ValueError(f"history type must be an integer, got {type(value).__name__}")
    return HistoryType(value)


class HistoryRecord(BaseModel):
    """One logged event of a device."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    record_id: StrictInt = Field(alias="recordID")
    event_type: Annotated[HistoryType, PlainValidator(_history_type)] = Field(alias="type")
    tag: StrictStr = Field(alias="historyTag")
    device_public_key: StrictStr = Field(alias="devicePk")
    timestamp: datetime

    def __str__(self) -> str:
        return f"#{self.record_id} {self.timestamp.isoformat()} {str(self.event_type)} tag={self.tag!r}"


_RECORDS = TypeAdapter(List[HistoryRecord])

# Keys the record list may be wrapped in
_WRAPPER_KEYS = ("Pages", "pages")


class HistoryPage:
    """
    One page of history records, in the order the server returned them.

    The history API answers either with a bare JSON array of records or with an
    object holding that array under "Pages"; both decode the same way.
    """

    def __init__(self, records: List[HistoryRecord]):
        self.records = records

    @classmethod
    def from_api_response(cls, response_data: Any) -> 'HistoryPage':
        if isinstance(response_data, dict):
            for key in _WRAPPER_KEYS:
                if key in response_data:
                    response_data = response_data[key]
                    break
            else:
                raise DecodeError(f"decoding history response: expected a list or an object with 'Pages', "
                                  f"got keys {sorted(response_data)}")
        if not isinstance(response_data, list):
            raise DecodeError(f"decoding history response: expected a list, got {type(response_data).__name__}")

        try:
            return cls(_RECORDS.validate_python(response_data))
        except ValidationError as e:
            raise DecodeError(f"decoding history response: {e}") from e

    def __len__(self) -> int:
        return len(self.records)
