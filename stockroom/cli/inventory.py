from __future__ import annotations

import argparse
from datetime import datetime
from typing import Sequence

from pydantic import ValidationError

from stockroom.application.services.inventory_app import InventoryApp
from stockroom.domain.entities import InventoryItem
from stockroom.domain.errors import StoreError
from stockroom.domain.value_objects.enums import PersistenceStatus
from stockroom.domain.value_objects.ids import ItemId

EXIT_OK = 0
EXIT_STORE_ERROR = 1
EXIT_PERSISTENCE_ERROR = 2


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Inventory log kept in a JSON file")
    p.add_argument(
        "--file",
        metavar="PATH",
        help="JSON file holding the inventory (defaults to STOCKROOM_DATA_FILE)",
    )
    sub = p.add_subparsers(dest="command", required=True)

    sub.add_parser("seed", help="Write the sample inventory to the file")
    sub.add_parser("list", help="Print every item in the file")

    add = sub.add_parser("add", help="Add a new item")
    add.add_argument("--id", type=int, required=True)
    add.add_argument("--name", required=True)
    add.add_argument("--quantity", type=int, required=True)

    rm = sub.add_parser("remove", help="Remove an item by id")
    rm.add_argument("id", type=int)

    setq = sub.add_parser("set-qty", help="Overwrite the quantity of an item")
    setq.add_argument("id", type=int)
    setq.add_argument("quantity", type=int)

    adj = sub.add_parser("adjust", help="Add a (possibly negative) delta to an item's quantity")
    adj.add_argument("id", type=int)
    adj.add_argument("delta", type=int)
    return p


def _apply(app: InventoryApp, args: argparse.Namespace) -> None:
    store = app.store
    if args.command == "add":
        store.add(
            InventoryItem(
                id=ItemId(args.id),
                name=args.name,
                quantity=args.quantity,
                date_added=datetime.now(),
            )
        )
    elif args.command == "remove":
        store.remove(args.id)
    elif args.command == "set-qty":
        store.update_quantity(args.id, args.quantity)
    elif args.command == "adjust":
        store.adjust_quantity(args.id, args.delta)


def _configure_logging() -> None:
    from stockroom.config.settings import settings
    from stockroom.logging_config import get_logger

    get_logger(settings.log_file, settings.log_level)


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    _configure_logging()

    app = InventoryApp(args.file)

    if args.command == "seed":
        app.seed_sample_data()
        return EXIT_OK if app.save_data().ok else EXIT_PERSISTENCE_ERROR

    loaded = app.load_data()
    if not loaded.ok:
        return EXIT_PERSISTENCE_ERROR

    if args.command == "list":
        if loaded.status is PersistenceStatus.ABSENT or not len(app.store):
            print("No items.")
        else:
            app.print_all_items()
        return EXIT_OK

    try:
        _apply(app, args)
    except (StoreError, ValidationError) as exc:
        print(f"Error: {exc}")
        return EXIT_STORE_ERROR

    return EXIT_OK if app.save_data().ok else EXIT_PERSISTENCE_ERROR


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
