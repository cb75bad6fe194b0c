import logging
import os
import sys

from pydantic import ValidationError

from sesame_core import ClientConfig, SesameClient, SesameError
from sesame_devices import SesameOperations

logger = logging.getLogger(__name__)

USAGE = """Usage:
  sesame status <DEVICE_ID>
  sesame history <DEVICE_ID> [PAGE] [PAGE_SIZE]

The API key is read from SESAME_API_KEY (get one at https://dash.candyhouse.co).
Set SESAME_ENDPOINT to use another endpoint and SESAME_DEBUG=1 for debug logs.
Device IDs must be upper case."""


def _print_status(operations: SesameOperations, device_id: str) -> None:
    status = operations.get_status(device_id)
    print(f"Status for device {device_id}:")
    print(f"{'lock_state':20}: {str(status.lock_state)}")
    print(f"{'battery_percentage':20}: {status.battery_percentage}")
    print(f"{'battery_voltage':20}: {status.battery_voltage}")
    print(f"{'position':20}: {status.position}")
    print(f"{'timestamp':20}: {status.timestamp.isoformat()}")


def _print_history(operations: SesameOperations, device_id: str, page: int, page_size: int) -> None:
    records = operations.get_history(device_id, page, page_size)
    print(f"History for device {device_id} (page {page}, {len(records)} records):")
    for record in records:
        print(record)


def main(argv=None) -> int:
    args = sys.argv[1:] if argv is None else argv
    max_args = {"status": 2, "history": 4}
    if not args or args[0] not in max_args or not 2 <= len(args) <= max_args[args[0]]:
        print(USAGE)
        return 1

    command, device_id = args[0], args[1]
    try:
        page = int(args[2]) if len(args) > 2 else 0
        page_size = int(args[3]) if len(args) > 3 else 50
    except ValueError:
        print("Error: PAGE and PAGE_SIZE must be integers", file=sys.stderr)
        return 1

    try:
        config = ClientConfig()
    except ValidationError as e:
        print(f"Error: invalid configuration, is SESAME_API_KEY set?\n{e}", file=sys.stderr)
        return 1

    with SesameClient(config) as client:
        operations = SesameOperations(client)
        try:
            if command == "status":
                _print_status(operations, device_id)
            else:
                _print_history(operations, device_id, page, page_size)
        except SesameError as e:
            logger.debug("Request failed", exc_info=True)
            print(f"Error: {e}", file=sys.stderr)
            return 1

    return 0


def run() -> None:
    logging.basicConfig(
        level=logging.DEBUG if os.environ.get("SESAME_DEBUG") == "1" else logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )
    sys.exit(main())


if __name__ == "__main__":
    run()
