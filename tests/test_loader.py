from pytest import mark, raises

from lagrangezero.exceptions import (
    DigitOutOfRange,
    DuplicateAbscissa,
    InsufficientPoints,
    InvalidDigit,
    InvalidInput,
    InvalidThreshold,
    UnsupportedBase,
)
from lagrangezero.loader import (
    load_file,
    load_points,
    parse_points,
    parse_threshold,
    recover_secret,
    solve,
)
from lagrangezero.points import Point, PointCollection
from lagrangezero.rational import BigRational

SAMPLE = {
    "keys": {"n": 4, "k": 3},
    "1": {"base": "10", "value": "4"},
    "2": {"base": "2", "value": "111"},
    "3": {"base": "10", "value": "12"},
    "6": {"base": "4", "value": "213"},
}


def test_sample_document():
    # f(x) = x^2 + 3, points (1, 4), (2, 7), (3, 12), (6, 39)
    collection = load_points(SAMPLE)
    assert collection.k == 3
    assert sorted(collection) == [Point(1, 4), Point(2, 7), Point(3, 12), Point(6, 39)]
    assert solve(SAMPLE) == "3"


def test_line_through_three_points(input_document):
    data = input_document(3, [(1, 3), (2, 5), (3, 7)])
    assert solve(data) == "1"


def test_line_through_two_points(input_document):
    data = input_document(2, [(1, 4), (2, 7)])
    assert solve(data) == "1"


def test_binary_value_is_decoded_before_interpolation():
    # f(x) = x + 1; the point at x=4 is given as "101" in base 2
    data = {
        "keys": {"n": 3, "k": 3},
        "2": {"base": 10, "value": "3"},
        "4": {"base": 2, "value": "101"},
        "3": {"base": 16, "value": "4"},
    }
    assert Point(4, 5) in list(load_points(data))
    assert recover_secret(data) == 1


def test_large_secret_in_mixed_bases(rng, polynomial_points, input_document):
    coeffs = [rng.getrandbits(256) for _ in range(4)]
    points = polynomial_points(coeffs, [1, 2, 3, 5, 8, 13])
    for base in (3, 7, 16, 36):
        assert solve(input_document(4, points, base)) == str(coeffs[0])


def test_recover_from_point_collection():
    collection = PointCollection([(1, 4), (2, 7)], 2)
    assert recover_secret(collection) == 1


def test_fraction_result():
    data = {
        "keys": {"k": 2},
        "1": {"base": 10, "value": "1"},
        "3": {"base": 10, "value": "2"},
    }
    assert recover_secret(data) == BigRational(1, 2)
    assert solve(data) == "1/2"


def test_smallest_x_are_used():
    # x=10 is off the line y = 2x + 1 and is not among the 3 smallest x
    data = {
        "keys": {"k": 3},
        "10": {"base": 10, "value": "0"},
        "2": {"base": 10, "value": "5"},
        "1": {"base": 10, "value": "3"},
        "3": {"base": 10, "value": "7"},
    }
    assert solve(data) == "1"


@mark.parametrize("k", [3, 3.0, "3", " 3 "])
def test_threshold_forms(k):
    assert parse_threshold({"keys": {"k": k}}) == 3


@mark.parametrize(
    "data",
    [
        {},
        {"keys": {"n": 3}},
        {"keys": 3},
        {"keys": {"k": 1}},
        {"keys": {"k": 2.5}},
        {"keys": {"k": "two"}},
        {"keys": {"k": None}},
        {"keys": {"k": True}},
    ],
)
def test_invalid_threshold(data):
    with raises(InvalidThreshold):
        parse_threshold(data)


def test_incomplete_entries_are_skipped():
    data = {
        "keys": {"k": 2},
        "1": {"base": 10, "value": "4"},
        "2": {"base": 10},
        "3": {"value": "10"},
        "4": "not an entry",
        "5": {"base": 10, "value": "16"},
    }
    assert parse_points(data) == [Point(1, 4), Point(5, 16)]


def test_insufficient_points():
    data = {
        "keys": {"k": 3},
        "1": {"base": 10, "value": "4"},
        "2": {"base": 10},
    }
    with raises(InsufficientPoints):
        solve(data)


def test_signed_x():
    data = {
        "keys": {"k": 2},
        "-1": {"base": 10, "value": "1"},
        "1": {"base": 10, "value": "5"},
    }
    assert solve(data) == "3"


def test_duplicate_x_after_parsing():
    data = {
        "keys": {"k": 2},
        "1": {"base": 10, "value": "4"},
        "01": {"base": 10, "value": "4"},
    }
    with raises(DuplicateAbscissa):
        solve(data)


@mark.parametrize("base", [1, 37, "sixteen", None, 2.5])
def test_unsupported_base(base):
    data = {"keys": {"k": 2}, "7": {"base": base, "value": "1"}}
    with raises(UnsupportedBase) as excinfo:
        parse_points(data)
    assert "x=7" in str(excinfo.value)


def test_decoder_errors_propagate():
    with raises(DigitOutOfRange):
        parse_points({"1": {"base": 10, "value": "f"}})
    with raises(InvalidDigit):
        parse_points({"1": {"base": 10, "value": "-1"}})


def test_invalid_entries():
    with raises(InvalidInput):
        parse_points({"x": {"base": 10, "value": "1"}})
    with raises(InvalidInput):
        parse_points({"1": {"base": 10, "value": 1}})
    with raises(InvalidInput):
        load_points([1, 2, 3])


def test_load_file(input_file):
    path = input_file(SAMPLE)
    collection = load_file(path)
    assert collection.k == 3
    assert len(collection) == 4
    assert solve(collection) == "3"


def test_load_file_invalid_json(tmp_path):
    path = tmp_path / "broken.json"
    path.write_text("{ not json")
    with raises(InvalidInput):
        load_file(path)


def test_load_file_missing(tmp_path):
    with raises(FileNotFoundError):
        load_file(tmp_path / "missing.json")


def test_load_file_not_utf8(tmp_path):
    path = tmp_path / "binary.json"
    path.write_bytes(b"\xff\xfe{}")
    with raises(InvalidInput):
        load_file(path)


def test_very_long_x_keys():
    # f(x) = 7 at two x values with 5001 digits each
    big = "1" + "0" * 5000
    data = {
        "keys": {"k": 2},
        big: {"base": 10, "value": "7"},
        "1" + "0" * 4999 + "1": {"base": 10, "value": "7"},
    }
    points = sorted(load_points(data))
    assert points[0].x == 10 ** 5000
    assert points[1].x == 10 ** 5000 + 1
    assert solve(data) == "7"


def test_very_long_duplicate_x_keys():
    big = "1" + "0" * 5000
    data = {
        "keys": {"k": 2},
        big: {"base": 10, "value": "7"},
        "+" + big: {"base": 10, "value": "7"},
    }
    with raises(DuplicateAbscissa) as excinfo:
        solve(data)
    assert big in str(excinfo.value)
