import pytest

from kata_toolkit.core.errors import KataValidationError
from kata_toolkit.core.katas.compass import CompassPoint, create_compass_points
from kata_toolkit.core.katas.dominoes import can_dominoes_make_row
from kata_toolkit.core.katas.ranges import extract_ranges
from kata_toolkit.core.katas.zigzag import get_zigzag_matrix


def test_compass_points():
    points = create_compass_points()
    assert len(points) == 32
    assert points[0] == CompassPoint("N", 0.0)
    assert points[1] == CompassPoint("NbE", 11.25)
    assert points[2] == CompassPoint("NNE", 22.5)
    assert points[-1] == CompassPoint("NbW", 348.75)

    names = [p.abbreviation for p in points]
    assert names[8:16] == ["E", "EbS", "ESE", "SEbE", "SE", "SEbS", "SSE", "SbE"]
    assert names[24:32] == ["W", "WbN", "WNW", "NWbW", "NW", "NWbN", "NNW", "NbW"]
    assert len(set(names)) == 32


def test_zigzag_matrix():
    assert get_zigzag_matrix(1) == [[0]]
    assert get_zigzag_matrix(2) == [[0, 1], [2, 3]]
    assert get_zigzag_matrix(3) == [[0, 1, 5], [2, 4, 6], [3, 7, 8]]
    assert get_zigzag_matrix(4) == [
        [0, 1, 5, 6],
        [2, 4, 7, 12],
        [3, 8, 11, 13],
        [9, 10, 14, 15],
    ]


def test_zigzag_matrix_rejects_bad_size():
    with pytest.raises(KataValidationError) as exc:
        get_zigzag_matrix(0)
    assert exc.value.code == "E_INVALID_SIZE"


def test_dominoes():
    assert can_dominoes_make_row([[0, 1], [1, 1]]) is True
    assert can_dominoes_make_row([[1, 1], [2, 2], [1, 5], [5, 6], [6, 3]]) is False
    assert can_dominoes_make_row([[1, 3], [2, 3], [1, 4], [2, 4], [1, 5], [2, 5]]) is True
    assert (
        can_dominoes_make_row(
            [[0, 0], [0, 1], [1, 1], [0, 2], [1, 2], [2, 2], [0, 3], [1, 3], [2, 3], [3, 3]]
        )
        is False
    )
    assert can_dominoes_make_row([[1, 1], [1, 2], [2, 2]]) is True
    assert can_dominoes_make_row([]) is True


def test_extract_ranges():
    assert extract_ranges([0, 1, 2, 3, 4, 5]) == "0-5"
    assert extract_ranges([1, 4, 5]) == "1,4,5"
    assert extract_ranges([0, 1, 2, 5, 7, 8, 9]) == "0-2,5,7-9"
    assert extract_ranges([1, 2, 4, 5]) == "1,2,4,5"
    assert extract_ranges([-3, -2, -1, 3]) == "-3--1,3"
    assert extract_ranges([]) == ""
