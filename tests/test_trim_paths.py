import math

from pcbpaths.trim_paths import trim_paths


def total_length(paths):
    return sum(math.dist(a, b) for ls, _ in paths for a, b in zip(ls, ls[1:]))


def test_empty():
    assert trim_paths([], []) == []


def test_empty_path_kept_without_backtracks():
    assert trim_paths([([], True)], []) == [([], True)]


def test_empty_path_dropped_with_backtracks():
    assert trim_paths([([], True)], [([(1, 2), (3, 4)], True)]) == []


def test_trim_start():
    paths = [([(1, 2), (3, 4), (5, 6), (7, 8)], True)]
    backtracks = [([(1, 2), (3, 4)], True)]
    assert trim_paths(paths, backtracks) == [([(3, 4), (5, 6), (7, 8)], True)]


def test_trim_end():
    paths = [([(1, 2), (3, 4), (5, 6), (7, 8)], True)]
    backtracks = [([(3, 4), (5, 6)], True), ([(5, 6), (7, 8)], True)]
    assert trim_paths(paths, backtracks) == [([(1, 2), (3, 4)], True)]


def test_trim_both():
    paths = [([(1, 2), (3, 4), (5, 6), (7, 8)], True)]
    backtracks = [([(1, 2), (3, 4)], True), ([(5, 6), (7, 8)], True)]
    assert trim_paths(paths, backtracks) == [([(3, 4), (5, 6)], True)]


def test_trim_repeated():
    paths = [([(1, 2), (3, 4), (1, 2), (3, 4), (5, 6), (7, 8)], True)]
    backtracks = [([(1, 2), (3, 4)], True)] * 3
    assert trim_paths(paths, backtracks) == [([(3, 4), (5, 6), (7, 8)], True)]


def test_do_not_trim_non_repeated():
    paths = [([(1, 2), (3, 4), (1, 2), (3, 4), (5, 6), (7, 8)], True)]
    backtracks = [([(1, 2), (3, 4)], True)] * 2
    assert trim_paths(paths, backtracks) == [([(1, 2), (3, 4), (5, 6), (7, 8)], True)]


def test_trim_prefer_directed():
    paths = [([(1, 2), (3, 4), (1, 2), (3, 4), (5, 6), (7, 8)], True)]
    backtracks = [([(1, 2), (3, 4)], False), ([(1, 2), (3, 4)], True)]
    assert trim_paths(paths, backtracks) == [([(1, 2), (3, 4), (5, 6), (7, 8)], True)]


def test_trim_loop():
    paths = [([(1, 2), (3, 4), (1, 2), (3, 4), (5, 6), (7, 8), (1, 2)], True)]
    backtracks = [([(1, 2), (3, 4)], True), ([(3, 4), (5, 6)], True)]
    assert trim_paths(paths, backtracks) == [
        ([(5, 6), (7, 8), (1, 2), (3, 4), (1, 2)], True)
    ]


def test_trim_two_paths():
    paths = [
        ([(1, 2), (3, 4), (1, 2), (3, 4), (5, 6), (7, 8)], True),
        ([(1, 2), (3, 4), (1, 2), (3, 4), (5, 6), (7, 8)], True),
    ]
    backtracks = [([(1, 2), (3, 4)], True)]
    assert trim_paths(paths, backtracks) == [
        ([(3, 4), (1, 2), (3, 4), (5, 6), (7, 8)], True),
        ([(1, 2), (3, 4), (1, 2), (3, 4), (5, 6), (7, 8)], True),
    ]


def test_trim_reversible():
    paths = [
        ([(1, 2), (3, 4), (1, 2), (3, 4), (5, 6), (7, 8), (1, 2)], True),
        ([(1, 2), (3, 4), (1, 2), (3, 4), (5, 6), (7, 8), (1, 2)], True),
    ]
    backtracks = [([(5, 6), (3, 4)], False)] * 2
    assert trim_paths(paths, backtracks) == [
        ([(5, 6), (7, 8), (1, 2), (3, 4), (1, 2), (3, 4)], True),
        ([(5, 6), (7, 8), (1, 2), (3, 4), (1, 2), (3, 4)], True),
    ]


def test_directed_square_and_diagonal():
    paths = [
        ([(0, 0), (0, 5)], False),
        ([(0, 5), (5, 5)], False),
        ([(5, 5), (5, 0)], False),
        ([(5, 0), (0, 0)], False),
        ([(5, 5), (0, 0)], False),
        ([(0, 0), (0, 5)], False),
        ([(0, 5), (5, 5)], False),
    ]
    backtracks = [([(0, 0), (0, 5)], False), ([(0, 5), (5, 5)], False)]
    assert trim_paths(paths, backtracks) == [
        ([(5, 5), (5, 0)], False),
        ([(5, 0), (0, 0)], False),
        ([(5, 5), (0, 0)], False),
        ([(0, 0), (0, 5)], False),
        ([(0, 5), (5, 5)], False),
    ]


def test_trimming_never_lengthens():
    paths = [([(1, 2), (3, 4), (1, 2), (3, 4), (5, 6), (7, 8), (1, 2)], True)]
    backtracks = [([(1, 2), (3, 4)], True), ([(3, 4), (5, 6)], True)]
    assert total_length(trim_paths(paths, backtracks)) < total_length(paths)


def test_input_not_modified():
    paths = [([(1, 2), (3, 4), (5, 6)], True)]
    trim_paths(paths, [([(1, 2), (3, 4)], True)])
    assert paths == [([(1, 2), (3, 4), (5, 6)], True)]