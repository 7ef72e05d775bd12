from __future__ import annotations

import argparse
from typing import Sequence

from stockroom.application.services.warehouse_service import WarehouseManager
from stockroom.domain.entities import ElectronicItem
from stockroom.domain.errors import DuplicateIdentityError, InvalidValueError, NotFoundError
from stockroom.domain.value_objects.ids import ItemId


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Warehouse inventory walkthrough")
    p.add_argument(
        "--increase",
        nargs=2,
        type=int,
        metavar=("ID", "QTY"),
        help="Increase stock of an electronic item before printing",
    )
    p.add_argument(
        "--remove", type=int, metavar="ID", help="Remove an electronic item before printing"
    )
    return p


def _run_error_checks(manager: WarehouseManager) -> None:
    try:
        manager.electronics.add(
            ElectronicItem(id=ItemId(1), name="Tablet", quantity=5, brand="Apple", warranty_months=18)
        )
    except DuplicateIdentityError as exc:
        print(f"Duplicate Error: {exc}")

    try:
        manager.groceries.remove(99)
    except NotFoundError as exc:
        print(f"Not Found Error: {exc}")

    try:
        manager.groceries.update_quantity(1, -10)
    except InvalidValueError as exc:
        print(f"Quantity Error: {exc}")


def _configure_logging() -> None:
    from stockroom.config.settings import settings
    from stockroom.logging_config import get_logger

    get_logger(settings.log_file, settings.log_level)


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    _configure_logging()

    manager = WarehouseManager()
    manager.seed_data()

    if args.increase:
        item_id, qty = args.increase
        manager.increase_stock(manager.electronics, item_id, qty)
    if args.remove is not None:
        manager.remove_item_by_id(manager.electronics, args.remove)

    print("=== Grocery Items ===")
    manager.print_all_items(manager.groceries)

    print("=== Electronic Items ===")
    manager.print_all_items(manager.electronics)

    print("=== Exception Tests ===")
    _run_error_checks(manager)
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
