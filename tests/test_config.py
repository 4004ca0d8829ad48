"""Tests for the dict/YAML config loader."""

import sys, os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

import pytest

from censoring import InvalidArgument, UnknownFilter, create_censor, load_config, load_from_yaml


README_CONFIG = {
    "censoring": {
        "filters": ["phone_number", "email_address", "words"],
        "words": ["internet"],
    },
}


def test_load_config_defaults():
    cfg = load_config({})
    assert cfg == {
        "enabled": True,
        "filters": [],
        "words": [],
        "replacement": "***",
        "highlight_color": "F2B8B8",
        "max_length": None,
        "custom_filters": {},
    }


def test_load_config_nested_and_flat_agree():
    assert load_config(README_CONFIG) == load_config(README_CONFIG["censoring"])


def test_create_censor_readme():
    scan = create_censor(README_CONFIG)
    assert scan.enabled_filters == ["phone_number", "email_address", "words"]
    scan.prepare(
        "The 1nt3r.n.e.t will not be censored! "
        "Call me on 555-123456, or send an email to me[at]example(dot)com."
    )
    assert scan.replace() == (
        "The *** will not be censored! Call me on ***, or send an email to ***."
    )


def test_create_censor_settings():
    scan = create_censor({"replacement": "[x]", "highlight_color": "#00FF00"})
    assert scan.get_replacement_string() == "[x]"
    assert scan.get_highlight_color() == "00FF00"


def test_custom_filters():
    scan = create_censor({
        "custom_filters": {
            "ticket": "TICKET-[0-9]+",
            "swears": ["darn", "heck"],
        },
    })
    assert scan.enabled_filters == ["ticket", "swears"]
    assert scan.filter_string("see ticket-42") == "see ***"
    assert scan.filter_string("darn it, heck") == "*** it, ***"


def test_custom_filter_invalid_regex():
    with pytest.raises(InvalidArgument):
        create_censor({"custom_filters": {"broken": "("}})


def test_custom_filter_invalid_type():
    with pytest.raises(InvalidArgument):
        create_censor({"custom_filters": {"broken": 42}})


def test_unknown_filter_in_config():
    with pytest.raises(UnknownFilter):
        create_censor({"filters": ["nope"]})


def test_disabled_config_passes_through():
    scan = create_censor({
        "enabled": False,
        "filters": ["phone_number"],
        "custom_filters": {"ticket": "TICKET-[0-9]+"},
    })
    assert scan.enabled_filters == []
    assert scan.filter_string("ticket-1 555-123456, ok") == "ticket-1 555-123456, ok"


@pytest.mark.parametrize("key, value", [
    ("words", "internet"),
    ("filters", "phone_number"),
])
def test_bare_string_list_rejected(key, value):
    with pytest.raises(InvalidArgument):
        load_config({key: value})
    with pytest.raises(InvalidArgument):
        create_censor({"filters": ["words"], key: value})


def test_quoted_max_length_rejected():
    with pytest.raises(InvalidArgument):
        create_censor({"max_length": "100"})


def test_bare_string_words_in_yaml(tmp_path):
    path = tmp_path / "censoring.yaml"
    path.write_text("censoring:\n  filters: [words]\n  words: internet\n")
    with pytest.raises(InvalidArgument):
        load_from_yaml(path)


def test_load_from_yaml(tmp_path):
    path = tmp_path / "censoring.yaml"
    path.write_text(
        "censoring:\n"
        "  filters: [email_address, words]\n"
        "  words: [internet]\n"
        "  replacement: '#'\n"
        "  max_length: 1000\n"
    )
    cfg = load_from_yaml(path)
    assert cfg["filters"] == ["email_address", "words"]
    assert cfg["max_length"] == 1000

    scan = create_censor(cfg)
    assert scan.filter_string("mail me@example.com about the 1nt3rn3t") == (
        "mail # about the #"
    )


def test_load_from_empty_yaml(tmp_path):
    path = tmp_path / "empty.yaml"
    path.write_text("")
    assert load_from_yaml(path)["filters"] == []


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
