import json

import pytest

from tm_suggest import storage
from tm_suggest.utils import field_getter


def test_read_items_from_json_and_csv(tmp_path):
    json_path = tmp_path / "items.json"
    json_path.write_text(json.dumps(["$1$ apple", "$2$ apple"]), encoding="utf-8")
    assert storage.read_items(json_path) == ["$1$ apple", "$2$ apple"]

    csv_path = tmp_path / "items.csv"
    csv_path.write_text("id,englishStr\n1,$1$ apple\n2,\n", encoding="utf-8")
    rows = storage.read_items(csv_path)
    assert rows == [{"id": "1", "englishStr": "$1$ apple"}, {"id": "2", "englishStr": None}]


def test_read_reference_pairs_accepts_lists_and_objects(tmp_path):
    path = tmp_path / "pairs.json"
    path.write_text(
        json.dumps([[None, None], {"english": "$x$", "translated": "$x$"}], ensure_ascii=False),
        encoding="utf-8",
    )
    assert storage.read_reference_pairs(path) == [(None, None), ("$x$", "$x$")]


def test_read_reference_pairs_rejects_malformed_rows(tmp_path):
    path = tmp_path / "pairs.json"
    path.write_text(json.dumps([["only one"]]), encoding="utf-8")
    with pytest.raises(ValueError):
        storage.read_reference_pairs(path)


def test_read_json_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        storage.read_json(tmp_path / "missing.json")


def test_field_getter():
    get = field_getter("englishStr")
    assert get("plain") == "plain"
    assert get({"englishStr": "$x$"}) == "$x$"
    assert get({"englishStr": None}) == ""
    assert get({"other": "y"}) == ""
