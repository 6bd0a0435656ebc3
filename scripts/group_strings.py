from __future__ import annotations

import argparse

from tm_suggest import storage
from tm_suggest.normalize import group
from tm_suggest.utils import field_getter


def main() -> None:
    parser = argparse.ArgumentParser(description="Group items whose English strings differ only in math/graphies/widgets.")
    parser.add_argument("--items", required=True, help="Items JSON or CSV")
    parser.add_argument("--out", required=True, help="Output groups.json")
    parser.add_argument("--field", default="englishStr", help="Field holding the English string (default: englishStr)")
    parser.add_argument("--summary-csv", default="", help="Optional CSV with one row per group")
    args = parser.parse_args()

    items = storage.read_items(args.items)
    groups = group(items, field_getter(args.field))

    storage.write_json(args.out, groups)
    if args.summary_csv:
        rows = [{"normalized": key, "count": len(members)} for key, members in groups.items()]
        storage.write_rows_csv(args.summary_csv, rows)

    print(f"Wrote {len(groups)} groups for {len(items)} items to {args.out}")


if __name__ == "__main__":
    main()
