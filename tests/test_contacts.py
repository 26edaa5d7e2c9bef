import json

import pytest

from patternkit.contacts import SAMPLE_JSON, Contact, Info, info_to_json, main, parse_info


def test_parse_sample():
    info = parse_info(SAMPLE_JSON)
    assert info.name == "Gopher"
    assert info.title == "programmer"
    assert info.contact == Contact(home="[phone]", cell="[phone]")


def test_str_of_sample():
    assert str(parse_info(SAMPLE_JSON)) == "{Gopher programmer {[phone] [phone]}}"


def test_missing_fields_stay_empty():
    assert parse_info('{"name": "x"}') == Info(name="x")


def test_null_document_is_empty_info():
    assert parse_info("null") == Info()


def test_keys_match_regardless_of_case():
    assert parse_info('{"NAME": "x", "Contact": {"CELL": "y"}}') == Info(
        name="x", contact=Contact(cell="y")
    )


def test_wrong_type_is_an_error():
    with pytest.raises(ValueError):
        parse_info('{"name": 1}')


def test_non_object_is_an_error():
    with pytest.raises(ValueError):
        parse_info("[]")


def test_invalid_json_is_an_error():
    with pytest.raises(ValueError):
        parse_info("{not json")


def test_round_trip():
    info = Info(name="Ann", title="boss", contact=Contact(home="h", cell="c"))
    assert parse_info(info_to_json(info, "", "  ")) == info


def test_exact_layout():
    info = Info(name="a", title="b", contact=Contact(home="c", cell="d"))
    expected = (
        '{\n  "name": "a",\n  "title": "b",\n  "contact": {\n'
        '    "home": "c",\n    "cell": "d"\n  }\n}'
    )
    assert info_to_json(info, "", "  ") == expected


def test_prefix_starts_every_following_line():
    text = info_to_json(parse_info(SAMPLE_JSON), "-", "    ")
    first, *rest = text.split("\n")
    assert first == "{"
    assert rest
    assert all(line.startswith("-") for line in rest)


def test_mapping_keys_are_sorted():
    text = info_to_json({"title": "t", "name": "n", "contact": {"home": "h", "cell": "c"}})
    assert text.index('"contact"') < text.index('"name"') < text.index('"title"')
    assert text.index('"cell"') < text.index('"home"')
    assert json.loads(text)["name"] == "n"


def test_html_characters_are_escaped():
    text = info_to_json(Info(name="<a&b>"), "", "")
    assert "<" not in text and "&" not in text
    assert parse_info(text).name == "<a&b>"


def test_main_prints_sample(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "Name: Gopher" in out
    assert "Title: programmer" in out