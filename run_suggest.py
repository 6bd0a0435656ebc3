from __future__ import annotations

import argparse
import os
from typing import Any, Dict, List, Optional, Sequence, Tuple

from dotenv import load_dotenv

from tm_suggest import storage
from tm_suggest.errors import MappingMismatchError
from tm_suggest.normalize import group
from tm_suggest.qa import check_reference_pairs
from tm_suggest.suggest import AuditTrail, suggest
from tm_suggest.utils import field_getter, setup_logger


def load_inputs(
    cfg: Dict[str, Any],
    paths: Dict[str, Any],
    logger,
) -> Tuple[List[Any], List[Tuple[Optional[str], Optional[str]]]]:
    items = storage.read_items(paths["items"])
    pairs_cfg = cfg.get("reference_pairs", {})
    pairs = storage.read_reference_pairs(
        paths["reference_pairs"],
        english_col=pairs_cfg.get("english_col", "english"),
        translated_col=pairs_cfg.get("translated_col", "translated"),
    )
    logger.info(f"   Loaded {len(items)} items and {len(pairs)} reference pairs.")
    return items, pairs


def write_groups(items: Sequence[Any], get_english_str, paths: Dict[str, Any], audit: AuditTrail, logger) -> None:
    groups = group(items, get_english_str)
    groups_path = paths.get("groups_json")
    if groups_path:
        storage.write_json(groups_path, groups)
    audit.record("grouping", {"groups": len(groups), "items": len(items)})
    logger.info(f"   {len(groups)} normalized group(s).")


def run_qa(
    pairs: Sequence[Tuple[Optional[str], Optional[str]]],
    lang: str,
    paths: Dict[str, Any],
    audit: AuditTrail,
    logger,
) -> None:
    rows = check_reference_pairs(pairs, lang)
    failing = [row for row in rows if not row["ok"]]
    storage.write_json(paths.get("qa_report", "logs/qa_report.json"), rows)
    audit.record("qa", {"checked": len(rows), "failing": len(failing)})
    for row in failing:
        logger.warning("   Reference pair %s unusable: %s", row["index"], row["error"])


def export_suggestions(
    pairs: List[Tuple[Any, Optional[str]]],
    get_english_str,
    paths: Dict[str, Any],
    logger,
) -> None:
    rows = []
    for item, suggestion in pairs:
        row = dict(item) if isinstance(item, dict) else {"englishStr": get_english_str(item)}
        row["suggestion"] = suggestion
        rows.append(row)
    storage.write_json(paths.get("suggestions_json", "data/suggestions.json"), rows)
    if paths.get("suggestions_csv"):
        storage.write_rows_csv(paths["suggestions_csv"], rows)
    filled = sum(1 for _, s in pairs if s is not None)
    logger.info(f"   {filled}/{len(pairs)} item(s) received a suggestion.")


def main() -> None:
    parser = argparse.ArgumentParser(description="Suggest translations from a reference English/translated pair.")
    parser.add_argument("--config", type=str, default="config.json", help="Path to config.json")
    parser.add_argument("--lang", type=str, default="", help="Locale of the reference translations (e.g. pt)")
    args = parser.parse_args()

    load_dotenv()

    cfg = storage.read_json(args.config)
    paths = cfg["paths"]
    lang = args.lang or cfg.get("lang") or os.getenv("TM_SUGGEST_LANG", "")
    get_english_str = field_getter(cfg.get("items", {}).get("english_field", "englishStr"))

    logger = setup_logger(paths.get("logs_dir", "logs"))
    audit = AuditTrail()
    audit.record("config", {"lang": lang})
    audit_path = paths.get("audit_report", "logs/audit.json")

    try:
        logger.info("1) Loading items and reference pairs…")
        items, pairs = load_inputs(cfg, paths, logger)
    except Exception:
        logger.exception("Loading inputs failed.")
        raise SystemExit(1)

    try:
        logger.info("2) Grouping…")
        write_groups(items, get_english_str, paths, audit, logger)
    except Exception:
        logger.exception("Grouping failed.")
        raise SystemExit(1)

    if cfg.get("qa", {}).get("enabled", True):
        try:
            logger.info("3) Checking reference pairs…")
            run_qa(pairs, lang, paths, audit, logger)
        except Exception:
            logger.exception("Reference pair checks failed.")
            raise SystemExit(1)
    else:
        logger.info("3) Reference pair checks skipped (qa.enabled=false).")

    try:
        logger.info("4) Suggesting…")
        suggestions = suggest(pairs, items, lang, get_english_str, logger=logger, audit=audit)
    except MappingMismatchError as exc:
        logger.error("Reference pair does not match its English string: %s", exc)
        storage.write_json(audit_path, audit.as_list())
        raise SystemExit(1)
    except Exception:
        logger.exception("Suggestion failed.")
        storage.write_json(audit_path, audit.as_list())
        raise SystemExit(1)

    try:
        logger.info("5) Export…")
        export_suggestions(suggestions, get_english_str, paths, logger)
    except Exception:
        logger.exception("Export failed.")
        raise SystemExit(1)

    storage.write_json(audit_path, audit.as_list())
    logger.info(f"   Audit trail saved to: {audit_path}")


if __name__ == "__main__":
    main()
