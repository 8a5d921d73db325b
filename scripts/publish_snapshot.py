"""Script to republish the current data as the shipped snapshot."""
import argparse
import sys
import os

# Add parent directory to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from inventory_catalog.database import SessionLocal, engine, Base
from inventory_catalog.services.backup import render_publishable
from inventory_catalog.services.store import SlotStore
from inventory_catalog.services.workspace import Workspace

DEFAULT_TARGET = os.path.join(
    os.path.dirname(os.path.dirname(os.path.abspath(__file__))),
    "inventory_catalog",
    "published_data.py",
)


def publish_snapshot(target: str):
    """Write the stored items, quick-entry lists, settings and logo to target."""
    Base.metadata.create_all(bind=engine)

    workspace = Workspace(SlotStore(SessionLocal))
    workspace.load()
    source = render_publishable(workspace.snapshot())

    with open(target, "w", encoding="utf-8") as f:
        f.write(source)
    print(f"Published {len(workspace.items)} items to {target}")
    print("Rebuild and redeploy for guests to see the new data.")


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--output", default=DEFAULT_TARGET, help="file to write")
    args = parser.parse_args()
    publish_snapshot(args.output)
