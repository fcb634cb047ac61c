"""Tests for the structural JSON encoder."""

from collections import OrderedDict

import numpy as np
import pytest

from predict_server.codec import encode


@pytest.mark.parametrize(
    "value, expected",
    [
        (None, "null"),
        (True, "true"),
        (False, "false"),
        (0, "0"),
        (-12, "-12"),
        (0.3, "0.3"),
        (1.0, "1.0"),
        ("plain", '"plain"'),
        ("", '""'),
    ],
)
def test_scalars(value, expected):
    assert encode(value) == expected


def test_only_quote_and_backslash_are_escaped():
    assert encode('say "hi" \\ bye') == r'"say \"hi\" \\ bye"'
    # Control characters pass through unescaped.
    assert encode("line1\nline2\t") == '"line1\nline2\t"'


def test_non_finite_floats_render_as_null():
    assert encode(float("nan")) == "null"
    assert encode([float("inf"), 1.5]) == "[null,1.5]"


def test_object_preserves_insertion_order():
    doc = {"zeta": 1, "alpha": {"inner": [1, 2.5, "x"]}, "mid": None}
    assert encode(doc) == '{"zeta":1,"alpha":{"inner":[1,2.5,"x"]},"mid":null}'


def test_sequences_and_mappings_of_any_type():
    assert encode((0.1, 0.9)) == "[0.1,0.9]"
    assert encode([]) == "[]"
    assert encode({}) == "{}"
    assert encode(OrderedDict([("b", True), ("a", False)])) == '{"b":true,"a":false}'


def test_non_string_keys_are_stringified():
    assert encode({1: "one", "k\"": 2}) == '{"1":"one","k\\"":2}'


def test_numpy_scalars():
    assert encode(np.float64(0.5)) == "0.5"
    assert encode(np.int64(3)) == "3"


def test_unknown_objects_fall_back_to_string():
    class Opaque:
        def __str__(self):
            return 'opaque "thing"'

    assert encode(Opaque()) == r'"opaque \"thing\""'
