import pytest

from dijkstrax import AlgorithmError, reconstruct_path


def test_walks_back_to_source():
    assert reconstruct_path([None, 1, 2, 3], 1, 4) == [1, 2, 3, 4]


def test_source_only():
    assert reconstruct_path([None, 1], 1, 1) == [1]


def test_unreached_target():
    assert reconstruct_path([None, 1, None], 1, 3) == []


def test_cycle_is_reported():
    with pytest.raises(AlgorithmError):
        reconstruct_path([None, 3, 2], 1, 2)
