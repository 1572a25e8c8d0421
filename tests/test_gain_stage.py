import pytest

from squeezer.gain_stage import GainStage, GainStageFET, GainStageOptical


def test_fet_passes_gain_reduction_through():
    stage = GainStageFET(44100)
    assert stage.process(6.5, 3.0) == 6.5
    assert stage.process(2.0, 10.0) == 2.0


def test_base_stage_reset_sets_gain_reduction():
    stage = GainStage(48000)
    stage.reset(4.0)
    assert stage.gain_reduction == 4.0


def test_optical_has_74_coefficients():
    stage = GainStageOptical(44100)
    assert len(stage.attack_coefficients) == 74
    assert len(stage.release_coefficients) == 74


def test_optical_attack_reaches_73_percent_after_16_ms():
    # 0 dB: attack of 16 ms; at 1 kHz that is 16 samples
    stage = GainStageOptical(1000)
    result = 0.0
    for _ in range(16):
        result = stage.process(0.4, 0.0)
    assert result == pytest.approx(0.4 * 0.73, rel=1e-9)


def test_optical_release_is_slower_than_attack():
    stage = GainStageOptical(44100)
    rising = stage.process(1.0, 0.0)
    stage.reset(1.0)
    falling = stage.process(0.0, 0.0)
    assert 1.0 - rising > 1.0 - falling - 1e-12
    assert rising > 1.0 - falling


def test_optical_coefficients_get_faster_with_more_reduction():
    stage = GainStageOptical(44100)
    assert list(stage.attack_coefficients) == sorted(stage.attack_coefficients, reverse=True)
    assert all(a < r for a, r in zip(stage.attack_coefficients, stage.release_coefficients))


def test_optical_output_between_old_and_new():
    stage = GainStageOptical(44100)
    stage.reset(2.0)
    result = stage.process(8.0, 0.0)
    assert 2.0 < result < 8.0


def test_optical_saturation_stays_below_ideal():
    stage = GainStageOptical(44100)
    result = stage.process(10.0, 10.0)
    assert stage.gain_reduction < result < 10.0


def test_optical_reset_restarts_envelope():
    stage = GainStageOptical(44100)
    first = [stage.process(5.0, 0.0) for _ in range(10)]
    stage.reset(0.0)
    second = [stage.process(5.0, 0.0) for _ in range(10)]
    assert first == second


def test_optical_negative_reduction_uses_first_coefficient():
    stage = GainStageOptical(1000)
    stage.reset(0.0)
    result = stage.process(-1.0, -5.0)
    coefficient = stage.release_coefficients[0]
    assert result == pytest.approx((1.0 - coefficient) * -1.0)