"""Tests for the flat-object JSON decoder."""

import pytest

from predict_server.codec import decode, encode
from predict_server.errors import MalformedJsonError


def test_decode_mixed_scalars_in_order():
    data = decode('{"a":1,"b":2.5,"c":"x","d":true,"e":null}')
    assert list(data) == ["a", "b", "c", "d", "e"]
    assert data["a"] == 1 and type(data["a"]) is int
    assert data["b"] == 2.5 and type(data["b"]) is float
    assert data["c"] == "x"
    assert data["d"] is True
    assert data["e"] is None


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("1", 1),
        ("-42", -42),
        ("+7", 7),
        ("1.0", 1.0),
        ("-0.25", -0.25),
        (".5", 0.5),
        ("1e3", 1000.0),
        ("false", False),
    ],
)
def test_numeric_and_literal_classification(raw, expected):
    value = decode('{"v":%s}' % raw)["v"]
    assert value == expected
    assert type(value) is type(expected)


@pytest.mark.parametrize("raw", ["abc", "1.2.3", "NaN", "Infinity", "1_000", "TRUE"])
def test_unparseable_value_kept_as_raw_string(raw):
    assert decode('{"v":%s}' % raw)["v"] == raw


def test_integer_beyond_64_bits_falls_back_to_float():
    value = decode('{"v":99999999999999999999}')["v"]
    assert type(value) is float
    assert value == 1e20


def test_empty_value_text_is_empty_string():
    assert decode('{"v":}')["v"] == ""


def test_string_escapes():
    data = decode(r'{"s":"a\"b\\c"}')
    assert data["s"] == 'a"b\\c'
    assert encode(data["s"]) == r'"a\"b\\c"'


def test_unrecognized_escape_is_kept_verbatim():
    assert decode(r'{"s":"x\ny"}')["s"] == "x\\ny"


def test_escaped_quote_in_key():
    assert list(decode(r'{"k\"ey":1}')) == ['k"ey']


def test_commas_and_colons_inside_strings_do_not_split():
    data = decode('{"a:b":"x, y: z","c":"}"}')
    assert data == {"a:b": "x, y: z", "c": "}"}


def test_whitespace_is_ignored():
    data = decode('  {\n  "a" : 1 ,\t"b" :  "two"  }  ')
    assert data == {"a": 1, "b": "two"}


@pytest.mark.parametrize("text", ["{}", "{   }", " {\n} "])
def test_empty_object(text):
    assert decode(text) == {}


def test_trailing_comma_is_tolerated():
    assert decode('{"a":1,}') == {"a": 1}


def test_duplicate_key_keeps_first_position_and_last_value():
    data = decode('{"a":1,"b":2,"a":3}')
    assert list(data) == ["a", "b"]
    assert data["a"] == 3


@pytest.mark.parametrize("text", ["", "   ", "[1,2]", '"x"', "42", "{", '{"a":1'])
def test_non_object_is_rejected(text):
    with pytest.raises(MalformedJsonError, match="must be an object"):
        decode(text)


@pytest.mark.parametrize("text", ['{"a" 1}', '{"a":1,,"b":2}'])
def test_field_without_colon_is_rejected(text):
    with pytest.raises(MalformedJsonError, match="key:value"):
        decode(text)


def test_unquoted_key_is_rejected():
    with pytest.raises(MalformedJsonError, match="quoted string"):
        decode("{a:1}")


@pytest.mark.parametrize("text", ['{"a":{"b":1,"c":2}}', '{"a":[1,2]}', '{"a":[]}'])
def test_nested_values_are_rejected(text):
    with pytest.raises(MalformedJsonError, match="Nested"):
        decode(text)


def test_unterminated_string_is_rejected():
    with pytest.raises(MalformedJsonError, match="Unterminated"):
        decode('{"a":"b}')


def test_round_trip_preserves_keys_values_and_order():
    text = '{"z":1,"y":2.5,"x":"a\\"q","w":false,"v":null}'
    assert encode(decode(text)) == text
    spaced = '{ "b" : -3 , "a" : "hi" }'
    assert decode(encode(decode(spaced))) == decode(spaced)
    assert encode(decode(spaced)) == '{"b":-3,"a":"hi"}'
