import math

import pytest

from squeezer.chebyshev import ChebyshevStage


def _run(stage, samples):
    return [stage.filter_sample(x) for x in samples]


def test_low_pass_passes_dc():
    stage = ChebyshevStage(0.1, False, 0.0, 2, 1)
    outputs = _run(stage, [1.0] * 2000)
    assert outputs[-1] == pytest.approx(1.0, abs=1e-6)


def test_high_pass_blocks_dc():
    stage = ChebyshevStage(0.1, True, 0.0, 2, 1)
    outputs = _run(stage, [1.0] * 2000)
    assert abs(outputs[-1]) < 1e-6


def test_high_pass_coefficients_sum_to_zero_at_dc():
    stage = ChebyshevStage(0.05, True, 0.5, 4, 2)
    c = stage.coefficients
    assert c.a0 + c.a1 + c.a2 == pytest.approx(0.0, abs=1e-12)


def test_low_pass_zero_ripple_has_unity_dc_gain():
    stage = ChebyshevStage(0.2, False, 0.0, 4, 1)
    c = stage.coefficients
    gain = (c.a0 + c.a1 + c.a2) / (1.0 - c.b1 - c.b2)
    assert gain == pytest.approx(1.0, rel=1e-9)


def test_reset_restores_initial_response():
    stage = ChebyshevStage(0.1, False, 0.5, 4, 1)
    signal = [math.sin(n * 0.3) for n in range(50)]
    first = _run(stage, signal)
    stage.reset()
    second = _run(stage, signal)
    assert first == second


def test_change_parameters_matches_fresh_stage():
    changed = ChebyshevStage(0.3, True, 0.0, 2, 1)
    changed.change_parameters(0.1, False, 0.5, 4, 2)
    fresh = ChebyshevStage(0.1, False, 0.5, 4, 2)
    assert changed.coefficients == fresh.coefficients
    signal = [1.0, -0.5, 0.25, 0.0, 0.75]
    assert _run(changed, signal) == _run(fresh, signal)


def test_silence_stays_nearly_silent():
    stage = ChebyshevStage(0.1, False, 0.5, 2, 1)
    outputs = _run(stage, [0.0] * 100)
    assert all(0.0 <= y < 1e-300 for y in outputs)


def test_ripple_changes_coefficients():
    flat = ChebyshevStage(0.1, False, 0.0, 4, 1)
    rippled = ChebyshevStage(0.1, False, 0.5, 4, 1)
    assert flat.coefficients.a0 != pytest.approx(rippled.coefficients.a0)