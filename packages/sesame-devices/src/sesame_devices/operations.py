import logging
from typing import List, Optional

from sesame_core import SesameClient
from sesame_core.const import PARAM_PAGE, PARAM_PAGE_SIZE
from sesame_core.context import RequestContext
from sesame_core.errors import RequestConstructionError
from .device_history import HistoryPage, HistoryRecord
from .device_status import StatusSnapshot

logger = logging.getLogger(__name__)


def _require_int(name: str, value) -> int:
    if not isinstance(value, int) or isinstance(value, bool):
        raise RequestConstructionError(f"{name} must be an integer, got {value!r}")
    return value


class SesameOperations:
    """
    Read operations of the Sesame cloud API.

    Every call is a single GET with no retries; errors from the client
    (see sesame_core.errors) propagate unchanged. Device IDs are passed
    through as given and must be upper case, otherwise the server answers
    with an error status.
    """

    def __init__(self, client: SesameClient):
        self.client = client

    def get_status(self, device_id: str, context: Optional[RequestContext] = None) -> StatusSnapshot:
        """Get the current status of a device."""
        path = self.client.device_path(device_id)
        response = self.client.get_json(path, context=context)
        status = StatusSnapshot.from_api_response(response)
        logger.debug(f"Status for device {device_id}: {status}")
        return status

    def get_history(self, device_id: str, page: int = 0, page_size: int = 50,
                    context: Optional[RequestContext] = None) -> List[HistoryRecord]:
        """
        Get one page of the event history of a device.

        Args:
            device_id: Upper case device ID
            page: Page index, starting at 0
            page_size: Maximum number of records in the page

        Returns:
            List[HistoryRecord]: Records in the order the server returned them
        """
        path = self.client.device_path(device_id)
        # Bounds are left to the server
        params = {
            PARAM_PAGE: _require_int("page", page),
            PARAM_PAGE_SIZE: _require_int("page_size", page_size),
        }
        response = self.client.get_json(path, params=params, context=context)
        history = HistoryPage.from_api_response(response)
        logger.debug(f"History page {page} for device {device_id}: {len(history)} records")
        return history.records
