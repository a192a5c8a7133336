import io
import random

import pytest

from classalgos.sortable import IntArray, Order, benchmark, main, random_array


SAMPLES = [
    [],
    [5],
    [3, 1, 2],
    [9, 8, 7, 6, 5, 4, 3, 2, 1, 0],
    [4, 4, 1, 4, 1, 0, 7, 7],
    [-3, 10, 0, -3, 22, 5],
]


@pytest.mark.parametrize("values", SAMPLES)
def test_shell_sort_matches_sorted(values):
    arr = IntArray(values)
    arr.shell_sort()
    assert list(arr) == sorted(values)
    assert arr.is_sorted()


@pytest.mark.parametrize("values", SAMPLES)
def test_hoare_sort_matches_sorted(values):
    arr = IntArray(values)
    arr.hoare_sort()
    assert list(arr) == sorted(values)


def test_sorts_keep_elements():
    rng = random.Random(7)
    arr = random_array(300, Order.UNORDERED, 50, rng)
    shell = arr.copy()
    hoare = arr.copy()
    shell.shell_sort()
    hoare.hoare_sort()
    assert shell == arr
    assert hoare == arr
    assert list(shell) == list(hoare)


def test_equality_ignores_order():
    assert IntArray([1, 2, 2]) == IntArray([2, 1, 2])
    assert not IntArray([1, 2, 2]) == IntArray([1, 1, 2])
    assert not IntArray([1, 2]) == IntArray([1, 2, 2])


def test_is_sorted():
    assert IntArray([1, 1, 2]).is_sorted()
    assert not IntArray([2, 1]).is_sorted()
    assert IntArray([]).is_sorted()


def test_out_of_range_index_returns_first():
    arr = IntArray([10, 20, 30])
    assert arr[1] == 20
    assert arr[5] == 10
    assert arr[-1] == 10
    arr[7] = 99
    assert list(arr) == [99, 20, 30]


def test_index_into_empty_raises():
    with pytest.raises(IndexError):
        IntArray([])[0]


def test_copy_is_independent():
    arr = IntArray([3, 2, 1])
    dup = arr.copy()
    dup.shell_sort()
    assert list(arr) == [3, 2, 1]
    assert list(dup) == [1, 2, 3]


def test_str_joins_values():
    assert str(IntArray([3, 1, 2])) == "3 1 2"


def test_random_ascending_is_sorted():
    arr = random_array(50, Order.ASCENDING, 10, random.Random(1))
    assert len(arr) == 50
    assert arr.is_sorted()


def test_random_descending_is_reverse_sorted():
    values = list(random_array(50, 3, 10, random.Random(2)))
    assert values == sorted(values, reverse=True)


def test_random_unordered_within_spread():
    values = list(random_array(200, Order.UNORDERED, 5, random.Random(3)))
    assert all(0 <= v < 5 for v in values)


def test_random_is_reproducible():
    a = random_array(30, Order.UNORDERED, 100, random.Random(42))
    b = random_array(30, Order.UNORDERED, 100, random.Random(42))
    assert list(a) == list(b)


def test_random_rejects_unknown_order():
    with pytest.raises(ValueError):
        random_array(5, 4)


def test_random_rejects_bad_spread():
    with pytest.raises(ValueError):
        random_array(5, Order.UNORDERED, 0)


def test_benchmark_reports_both_sorts():
    timings = benchmark(IntArray([5, 4, 3, 2, 1]))
    assert set(timings) == {"shell_sort", "hoare_sort"}
    assert all(t >= 0 for t in timings.values())


def test_main_sorted_input(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("3\n1 2 3\n"))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "test result: true" in out
    assert "sort result" not in out


@pytest.mark.parametrize("choice", ["1", "2"])
def test_main_sorts(monkeypatch, capsys, choice):
    monkeypatch.setattr("sys.stdin", io.StringIO(f"4\n4 3 1 2\n{choice}\n"))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "test result: false" in out
    assert "sort result: 1 2 3 4" in out
    assert "ms by Shell_sort" in out


def test_main_unknown_sort(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("2\n2 1\n9\n"))
    assert main([]) == 0
    assert "there is no such sorting" in capsys.readouterr().out


def test_main_truncated_input(monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("3\n1\n"))
    assert main([]) == 1