import pytest

from squeezer.parameters import (
    ParameterKind,
    parameter_index,
    squeezer_parameters,
)
from squeezer.side_chain import Detector


def _spec(key, stereo=False):
    return squeezer_parameters(stereo)[parameter_index(stereo, key)]


def test_first_indices_follow_header_order():
    assert parameter_index(False, "bypass") == 0
    assert parameter_index(False, "detector_rms_filter") == 1
    assert parameter_index(False, "gain_stage") == 4
    assert parameter_index(False, "threshold_switch") == 5
    assert parameter_index(False, "threshold") == 6


def test_stereo_link_only_in_stereo():
    assert parameter_index(True, "stereo_link_switch") == 15
    assert parameter_index(True, "stereo_link") == 16
    with pytest.raises(KeyError):
        parameter_index(False, "stereo_link")


def test_unknown_parameter_raises():
    with pytest.raises(KeyError):
        parameter_index(True, "no_such_parameter")


def test_index_round_trip():
    for stereo in (False, True):
        for index, spec in enumerate(squeezer_parameters(stereo)):
            assert parameter_index(stereo, spec.key) == index


def test_mode_entry_precedes_combined_value():
    specs = squeezer_parameters(True)
    for index, spec in enumerate(specs):
        if spec.kind is ParameterKind.COMBINED:
            mode = specs[index - 1]
            assert mode.kind is ParameterKind.MODE
            assert mode.key == spec.key + "_switch"


def test_defaults_are_reachable_values():
    for spec in squeezer_parameters(True):
        assert spec.clamp(spec.default) == pytest.approx(spec.default)


def test_combined_presets_within_range():
    for spec in squeezer_parameters(True):
        if spec.kind is ParameterKind.COMBINED:
            for preset in spec.presets:
                assert spec.minimum <= preset.value <= spec.maximum


def test_source_defaults():
    assert _spec("threshold").default == -12.0
    assert _spec("ratio").default == 2.0
    assert _spec("attack_rate").default == 20.0
    assert _spec("release_rate").default == 150.0
    assert _spec("detector").default == Detector.SMOOTH_BRANCHING
    assert _spec("auto_makeup_gain").default == 1.0
    assert _spec("bypass").default == 0.0


def test_preset_labels():
    assert _spec("ratio").preset_label(2.0) == "2:1"
    assert _spec("ratio").preset_label(0.67) == "0.67:1"
    assert _spec("knee_width").preset_label(0.0) == "Hard"
    assert _spec("release_rate").preset_label(1500.0) == "1.5 s"
    assert _spec("detector_rms_filter").preset_label(10.0) == "Medium (10 ms)"
    assert _spec("sidechain_filter_gain").preset_label(3.0) == "+3 dB"


def test_boolean_labels():
    bypass = _spec("bypass")
    assert bypass.preset_label(1.0) == "Bypassed"
    assert bypass.preset_label(0.0) == "Active"
    assert _spec("sidechain_listen").preset_label(True) == "Side-Chain"


def test_free_value_label_uses_suffix():
    assert _spec("threshold").preset_label(-13.0) == "-13 dB"
    assert _spec("makeup_gain").preset_label(2.5) == "2.5 dB"


def test_switch_rejects_unknown_value():
    with pytest.raises(ValueError):
        _spec("design").preset_label(5.0)


def test_clamp_combined_to_range():
    threshold = _spec("threshold")
    assert threshold.clamp(100.0) == 18.0
    assert threshold.clamp(-100.0) == -60.0


def test_clamp_snaps_to_step():
    knee = _spec("knee_width")
    result = knee.clamp(13.0)
    assert result == 12.0
    assert knee.clamp(result) == result


def test_clamp_switch_picks_nearest_preset():
    rms = _spec("detector_rms_filter")
    assert rms.clamp(9.0) == 10.0
    assert rms.clamp(1000.0) == 50.0


def test_clamp_boolean():
    bypass = _spec("bypass")
    assert bypass.clamp(0.3) == 1.0
    assert bypass.clamp(0.0) == 0.0