from sentsplitter.config import deep_merge_dicts


def test_deep_merge_nested() -> None:
    a = {"mode": "corrected", "lexicon": {"include_defaults": True, "abbreviations": []}}
    b = {"lexicon": {"abbreviations": ["cf."]}}
    merged = deep_merge_dicts(a, b)
    assert merged == {
        "mode": "corrected",
        "lexicon": {"include_defaults": True, "abbreviations": ["cf."]},
    }
    assert a["lexicon"]["abbreviations"] == []
