from __future__ import annotations

import pytest

from basicstochastics.core.errors import EmptyInputError
from basicstochastics.core.names import (
    CONFIDENCE_TO_SIGMA,
    ONE_SIGMA,
    SIGMA_TO_CONFIDENCE,
    THREE_SIGMA,
    TWO_SIGMA,
)
from basicstochastics.stats.common.sigma import (
    SigmaEnvironment,
    confidence_to_sigma,
    matches_sigma_environment,
    sigma_environment,
    sigma_to_confidence,
)


def test_sigma_environment_membership(data: list[float]) -> None:
    assert matches_sigma_environment(data, ONE_SIGMA, 3.4) is True
    assert matches_sigma_environment(data, ONE_SIGMA, 1.4) is True
    assert matches_sigma_environment(data, ONE_SIGMA, 5.0) is False

    assert matches_sigma_environment(data, TWO_SIGMA, 3.4) is True
    assert matches_sigma_environment(data, TWO_SIGMA, 5.0) is False

    assert matches_sigma_environment(data, 2.576, 3.4) is True


def test_multiple_scales_the_deviation(data: list[float]) -> None:
    # 2.4 + 3 * 1.0198 ~ 5.459
    assert matches_sigma_environment(data, THREE_SIGMA, 5.0) is True
    assert matches_sigma_environment(data, TWO_SIGMA, 4.0) is True


def test_unscaled_ignores_multiple(data: list[float]) -> None:
    assert matches_sigma_environment(data, THREE_SIGMA, 5.0, scale_deviation=False) is False
    assert matches_sigma_environment(data, TWO_SIGMA, 4.0, scale_deviation=False) is False
    assert matches_sigma_environment(data, TWO_SIGMA, 3.4, scale_deviation=False) is True
    for k in (ONE_SIGMA, TWO_SIGMA, THREE_SIGMA, 0.1):
        assert matches_sigma_environment(
            data, k, 1.4, scale_deviation=False
        ) == matches_sigma_environment(data, ONE_SIGMA, 1.4)


def test_bounds_are_exclusive() -> None:
    # mean 2.0, deviation 1.0
    sample = [1.0, 3.0]
    assert matches_sigma_environment(sample, ONE_SIGMA, 1.0) is False
    assert matches_sigma_environment(sample, ONE_SIGMA, 3.0) is False
    assert matches_sigma_environment(sample, ONE_SIGMA, 2.999) is True
    assert matches_sigma_environment(sample, TWO_SIGMA, 4.0) is False
    assert matches_sigma_environment(sample, TWO_SIGMA, 3.999) is True


def test_zero_deviation_matches_nothing() -> None:
    assert matches_sigma_environment([2.0], THREE_SIGMA, 2.0) is False
    assert matches_sigma_environment([2.0, 2.0, 2.0], ONE_SIGMA, 2.0) is False


def test_negative_multiple_matches_nothing(data: list[float]) -> None:
    assert matches_sigma_environment(data, -1.0, 2.4) is False


def test_empty_sample_raises() -> None:
    with pytest.raises(EmptyInputError):
        matches_sigma_environment([], ONE_SIGMA, 0.0)
    with pytest.raises(EmptyInputError):
        sigma_environment([])


def test_sigma_environment_object(data: list[float]) -> None:
    env = sigma_environment(data, TWO_SIGMA)
    assert env.center == 2.4
    assert env.deviation == 1.019803902718557
    assert env.multiple == TWO_SIGMA
    assert env.lower == pytest.approx(0.3603921945628861)
    assert env.upper == pytest.approx(4.439607805437114)
    assert env.width == pytest.approx(4 * 1.019803902718557)


def test_sigma_environment_defaults_to_one_sigma(data: list[float]) -> None:
    env = sigma_environment(data)
    assert env.multiple == ONE_SIGMA
    assert env.lower == 2.4 - 1.019803902718557
    assert env.upper == 2.4 + 1.019803902718557


def test_sigma_environment_is_frozen() -> None:
    env = SigmaEnvironment(center=0.0, deviation=1.0)
    with pytest.raises(AttributeError):
        env.center = 1.0  # type: ignore[misc]


@pytest.mark.parametrize("sigma, confidence", sorted(SIGMA_TO_CONFIDENCE.items()))
def test_sigma_to_confidence_matches_table(sigma: float, confidence: float) -> None:
    assert sigma_to_confidence(sigma) == pytest.approx(confidence, abs=1e-4)


@pytest.mark.parametrize("confidence, sigma", sorted(CONFIDENCE_TO_SIGMA.items()))
def test_confidence_to_sigma_matches_table(confidence: float, sigma: float) -> None:
    assert confidence_to_sigma(confidence) == pytest.approx(sigma, abs=1e-3)


@pytest.mark.parametrize("confidence", [0.01, 0.5, 0.6827, 0.99, 0.999])
def test_conversions_are_inverse(confidence: float) -> None:
    assert sigma_to_confidence(confidence_to_sigma(confidence)) == pytest.approx(confidence)


def test_zero_sigma_covers_nothing() -> None:
    assert sigma_to_confidence(0.0) == 0.0


@pytest.mark.parametrize("confidence", [0.0, 1.0, -0.5, 1.5])
def test_confidence_out_of_range(confidence: float) -> None:
    with pytest.raises(ValueError, match="confidence must be in"):
        confidence_to_sigma(confidence)


def test_negative_sigma_has_no_confidence() -> None:
    with pytest.raises(ValueError, match="non-negative"):
        sigma_to_confidence(-1.0)


@pytest.mark.parametrize("scale_deviation", [True, False])
def test_sigma_functions_are_idempotent_and_pure(
    data: list[float], scale_deviation: bool
) -> None:
    snapshot = list(data)
    for value in (1.4, 3.4, 5.0):
        first = matches_sigma_environment(
            data, THREE_SIGMA, value, scale_deviation=scale_deviation
        )
        second = matches_sigma_environment(
            data, THREE_SIGMA, value, scale_deviation=scale_deviation
        )
        assert first == second
    assert sigma_environment(data, TWO_SIGMA) == sigma_environment(data, TWO_SIGMA)
    assert data == snapshot


def test_nan_sigma_has_no_confidence() -> None:
    with pytest.raises(ValueError, match="non-negative"):
        sigma_to_confidence(float("nan"))
