"""
Create the job board tables that are missing, leaving existing ones and their data alone.
Usage: python -m jobboard.scripts.ensure_tables [--dry-run]
"""
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parents[2]))

from jobboard.database import ensure_tables_exist, missing_tables


def main():
    if "--dry-run" in sys.argv[1:]:
        pending = missing_tables()
        print(f"Missing tables: {', '.join(pending)}" if pending else "No missing tables.")
        return
    created = ensure_tables_exist()
    print(f"Created tables: {', '.join(created)}" if created else "No missing tables; nothing created.")


if __name__ == "__main__":
    main()
