"""Generate shifts from weekly schedules without going through HTTP.

Usage: python scripts/generate_shifts.py 2026-01-05 2026-01-11
"""

from __future__ import annotations

import argparse
import importlib
import logging

from config import get_settings_module

from safemeds.common.datetime_utils import parse_iso_date
from safemeds.container import build_container


def main() -> None:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("start_date", type=parse_iso_date)
    parser.add_argument("end_date", type=parse_iso_date)
    args = parser.parse_args()

    logging.basicConfig(level=logging.INFO)
    settings = importlib.import_module(get_settings_module())
    container = build_container(db_config=settings.DB_CONFIG)

    shifts = container.shift_generator.generate(args.start_date, args.end_date)
    for sh in shifts:
        print(f"{sh.shift_date} staff={sh.staff_id} {sh.start_time:%H:%M}-{sh.end_time:%H:%M}")
    print(f"OK: {len(shifts)} shifts created")


if __name__ == "__main__":
    main()
