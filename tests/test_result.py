# py
import pytest

from app.utils.result import Err, Ok


def test_ok():
    res = Ok(5)
    assert res.is_ok() and not res.is_err()
    assert res.unwrap() == 5
    assert res.unwrap_or(0) == 5


def test_err():
    res = Err(ValueError("boom"))
    assert res.is_err() and not res.is_ok()
    assert res.unwrap_or(0) == 0
    with pytest.raises(ValueError, match="boom"):
        res.unwrap()
