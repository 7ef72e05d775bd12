from __future__ import annotations

import argparse
import os
import sys
from pathlib import Path


def ensure_import_path() -> None:
    project_root = Path(__file__).resolve().parents[1]
    if str(project_root) not in sys.path:
        sys.path.insert(0, str(project_root))


def run_sessions(path: Path) -> int:
    from stockroom.application.services.inventory_app import InventoryApp

    app = InventoryApp(path)
    app.seed_sample_data()
    if not app.save_data().ok:
        return 1

    print("\n--- New Session ---\n")
    new_session = InventoryApp(path)
    if not new_session.load_data().ok:
        return 1
    new_session.print_all_items()
    return 0


def main(argv: list[str] | None = None) -> int:
    ensure_import_path()

    parser = argparse.ArgumentParser(
        description="Save the sample inventory, then reload it in a fresh session"
    )
    parser.add_argument(
        "--file",
        default=os.path.join("data", "inventory.json"),
        help="Path to the inventory JSON file",
    )
    args = parser.parse_args(argv)

    return run_sessions(Path(os.path.abspath(args.file)))


if __name__ == "__main__":
    raise SystemExit(main())
