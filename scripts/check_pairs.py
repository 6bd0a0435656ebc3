from __future__ import annotations

import argparse

from tm_suggest import storage
from tm_suggest.qa import check_reference_pairs


def main() -> None:
    parser = argparse.ArgumentParser(description="Check that reference translations keep their math, graphies and widgets.")
    parser.add_argument("--pairs", required=True, help="Reference pairs JSON or CSV")
    parser.add_argument("--out", required=True, help="Output report JSON")
    parser.add_argument("--lang", default="", help="Locale of the translations (e.g. pt)")
    args = parser.parse_args()

    pairs = storage.read_reference_pairs(args.pairs)
    rows = check_reference_pairs(pairs, args.lang)
    storage.write_json(args.out, rows)

    failing = sum(1 for row in rows if not row["ok"])
    print(f"Checked {len(rows)} pairs, {failing} unusable. Report: {args.out}")


if __name__ == "__main__":
    main()
