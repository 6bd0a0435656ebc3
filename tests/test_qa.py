from tm_suggest.qa import check_reference_pairs, special_substrings_check


def test_special_substrings_check_passes_when_preserved():
    assert special_substrings_check("find $x$ in [[☃ expression 1]]", "encontre $x$ em [[☃ expression 1]]") == []


def test_special_substrings_check_counts_portuguese_sen_as_sin():
    assert special_substrings_check(r"$\sin(x)$", r"$\operatorname{sen}(x)$", "pt") == []
    assert special_substrings_check(r"$\sin(x)$", r"$\operatorname{sen}(x)$", "es") != []


def test_special_substrings_check_flags_dropped_graphie():
    warnings = special_substrings_check("see ![](web+graphie://a) $1$", "veja $1$")
    assert len(warnings) == 1
    assert warnings[0].startswith("Graphie changed")


def test_check_reference_pairs_reports_each_usable_pair():
    pairs = [
        [None, None],
        ["simplify $2/4$", "simplifique $2/4$"],
        ["see ![](web+graphie://a)", "veja ![](web+graphie://b)"],
    ]
    rows = check_reference_pairs(pairs, "pt")

    assert [row["index"] for row in rows] == [1, 2]
    assert rows[0]["ok"] is True
    assert rows[0]["error"] is None
    assert rows[1]["ok"] is False
    assert rows[1]["error"] == "graphies don't match"
    assert rows[1]["warnings"]
