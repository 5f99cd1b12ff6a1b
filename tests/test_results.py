"""Test the `Result` return type"""

import math

import pytest

from lognormal import Result, ErrorKind, DistributionError


def test_Result_success():
    result = Result.success(2.5)
    assert result.ok
    assert result.value == 2.5
    assert result.error is None
    assert result.sentinel == 2.5
    assert result.value_or(0.0) == 2.5
    assert result.unwrap() == 2.5
    assert repr(result) == "Result.success(2.5)"


@pytest.mark.parametrize("kind, code", [
    (ErrorKind.INVALID_PARAMETER, -2),
    (ErrorKind.NON_CONVERGENCE, -9999),
])
def test_Result_failure(kind, code):
    result = Result.failure(kind)
    assert not result.ok
    assert result.error is kind
    assert math.isnan(result.value)
    assert result.sentinel == code
    assert result.value_or(1.0) == 1.0

    with pytest.raises(DistributionError) as info:
        result.unwrap()
    assert info.value.kind is kind
    assert isinstance(info.value, ValueError)


def test_Result_failure_ignores_value():
    result = Result(value=3.0, error=ErrorKind.INVALID_PARAMETER)
    assert math.isnan(result.value)


def test_Result_eq():
    assert Result.success(1.0) == Result.success(1.0)
    assert Result.success(1.0) != Result.success(2.0)
    assert Result.success(float('nan')) == Result.success(float('nan'))
    assert Result.failure(ErrorKind.INVALID_PARAMETER) == Result.failure(ErrorKind.INVALID_PARAMETER)
    assert Result.failure(ErrorKind.INVALID_PARAMETER) != Result.failure(ErrorKind.NON_CONVERGENCE)
    # a success carrying the failure code is not a failure
    assert Result.success(-2.0) != Result.failure(ErrorKind.INVALID_PARAMETER)
    assert Result.success(1.0) != 1.0
    assert len({Result.success(1.0), Result.success(1.0), Result.failure(ErrorKind.NON_CONVERGENCE)}) == 2
