import json
import sys

import pytest

import run_suggest


def _write_config(tmp_path, pairs, items=None):
    if items is None:
        items = [{"id": 1, "englishStr": "simplify $3/12$\n\nhint: the denominator is $4$"}]
    data = tmp_path / "data"
    data.mkdir()
    (data / "items.json").write_text(json.dumps(items), encoding="utf-8")
    (data / "pairs.json").write_text(json.dumps(pairs, ensure_ascii=False), encoding="utf-8")
    cfg = {
        "lang": "pt",
        "paths": {
            "items": str(data / "items.json"),
            "reference_pairs": str(data / "pairs.json"),
            "groups_json": str(data / "groups.json"),
            "suggestions_json": str(data / "suggestions.json"),
            "suggestions_csv": str(data / "suggestions.csv"),
            "qa_report": str(tmp_path / "logs" / "qa.json"),
            "audit_report": str(tmp_path / "logs" / "audit.json"),
            "logs_dir": str(tmp_path / "logs"),
        },
    }
    cfg_path = tmp_path / "config.json"
    cfg_path.write_text(json.dumps(cfg), encoding="utf-8")
    return cfg_path, data


def test_main_writes_suggestions(tmp_path, monkeypatch):
    pairs = [["simplify $2/4$\n\nhint: the denominator is $2$", "simplifique $2/4$\n\npista: o denominador é $2$"]]
    cfg_path, data = _write_config(tmp_path, pairs)
    monkeypatch.setattr(sys, "argv", ["run_suggest.py", "--config", str(cfg_path)])

    run_suggest.main()

    rows = json.loads((data / "suggestions.json").read_text(encoding="utf-8"))
    assert rows == [
        {
            "id": 1,
            "englishStr": "simplify $3/12$\n\nhint: the denominator is $4$",
            "suggestion": "simplifique $3/12$\n\npista: o denominador é $4$",
        }
    ]
    assert (data / "suggestions.csv").exists()
    audit = json.loads((tmp_path / "logs" / "audit.json").read_text(encoding="utf-8"))
    assert [rec["kind"] for rec in audit] == ["config", "grouping", "qa", "template"]


def test_main_exits_on_mismatched_reference(tmp_path, monkeypatch):
    pairs = [["simplify $2/4$\n\nhint: the denominator is $2$", "simplifique $9/9$"]]
    cfg_path, _ = _write_config(tmp_path, pairs)
    monkeypatch.setattr(sys, "argv", ["run_suggest.py", "--config", str(cfg_path)])

    with pytest.raises(SystemExit) as exc_info:
        run_suggest.main()
    assert exc_info.value.code == 1


def test_main_exits_when_reference_shape_differs_from_items(tmp_path, monkeypatch):
    pairs = [["add $1$ and $2$", "some $1$ e $2$"]]
    cfg_path, _ = _write_config(tmp_path, pairs, items=["what is $x$?"])
    monkeypatch.setattr(sys, "argv", ["run_suggest.py", "--config", str(cfg_path)])

    with pytest.raises(SystemExit) as exc_info:
        run_suggest.main()
    assert exc_info.value.code == 1
    audit = json.loads((tmp_path / "logs" / "audit.json").read_text(encoding="utf-8"))
    assert audit[-1]["kind"] == "template"
