import argparse
import sys
from pathlib import Path

CURRENT_DIR = Path(__file__).resolve().parent
BACKEND_DIR = CURRENT_DIR.parent
if str(BACKEND_DIR) not in sys.path:
    sys.path.insert(0, str(BACKEND_DIR))

import collabmate.models  # noqa: E402,F401 - register tables on Base.metadata
from collabmate.db import Base, engine, get_db_path  # noqa: E402
from collabmate.demo_seed import seed_demo_data  # noqa: E402


def reset_database(seed: bool = True) -> None:
    """Drop and recreate every table, then optionally seed demo users and requests."""
    db_path = get_db_path()
    if db_path and Path(db_path).exists():
        engine.dispose()
        print(f"[reset_db] Removing sqlite file: {db_path}")
        Path(db_path).unlink()
    else:
        print(f"[reset_db] Dropping tables on {engine.url.render_as_string(hide_password=True)}")
        Base.metadata.drop_all(bind=engine)

    Base.metadata.create_all(bind=engine)

    if seed:
        print("[reset_db] Seeding demo data...")
        seed_demo_data()
    print("[reset_db] Done.")


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Reset local development database.")
    parser.add_argument("--no-seed", action="store_true", help="Reset schema without demo data.")
    args = parser.parse_args()
    reset_database(seed=not args.no_seed)
