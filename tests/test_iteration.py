from hypothesis import given
from hypothesis import strategies as st

from typedrills.iteration import RowMajorIterator, flatten, print_flattened

TWO_D = [[2, 5, 9], [0, 4, 2], [6, 8, 3]]
ROW_MAJOR = [2, 5, 9, 0, 4, 2, 6, 8, 3]

grids = st.lists(st.lists(st.integers()))


def test_flatten_is_row_major():
    assert list(flatten(TWO_D)) == ROW_MAJOR


def test_iterator_is_row_major():
    assert list(RowMajorIterator(TWO_D)) == ROW_MAJOR


def test_empty_rows_are_skipped_without_losing_elements():
    rows = [[], [1], [], [], [1, 2], []]
    assert list(flatten(rows)) == [1, 1, 2]
    assert list(RowMajorIterator(rows)) == [1, 1, 2]


def test_flatten_is_lazy():
    def rows():
        yield [1, 2]
        raise AssertionError("second row must not be read yet")

    values = flatten(rows())
    assert next(values) == 1
    assert next(values) == 2


@given(grids)
def test_flatten_matches_nested_loop(rows):
    expected = [value for row in rows for value in row]
    assert list(flatten(rows)) == expected
    assert list(RowMajorIterator(rows)) == expected


def test_print_flattened(capsys):
    print_flattened(TWO_D)
    assert capsys.readouterr().out.split() == [str(v) for v in ROW_MAJOR]
