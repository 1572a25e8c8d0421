"""Side chain of the compressor: gain computer, level detector and envelopes."""

from __future__ import annotations

import math
from enum import IntEnum

from squeezer.gain_stage import GainStage, GainStageFET, GainStageOptical

_METER_MINIMUM_DECIBEL = -70.01
_CREST_FACTOR_AUTO_GAIN = 20.0


class Design(IntEnum):
    """Where the side chain takes its signal from."""

    FEED_FORWARD = 0
    FEED_BACK = 1


class Detector(IntEnum):
    """Shape of the attack and release envelopes."""

    LINEAR = 0
    SMOOTH_DECOUPLED = 1
    SMOOTH_BRANCHING = 2


class GainStageType(IntEnum):
    """Model of the element that applies the gain reduction."""

    FET = 0
    OPTICAL = 1


def level_to_decibel(level: float) -> float:
    """Convert a linear level to decibels, never going below -70.01 dB."""
    if level == 0.0:
        return _METER_MINIMUM_DECIBEL
    decibels = 20.0 * math.log10(level)
    return max(decibels, _METER_MINIMUM_DECIBEL)


def decibel_to_level(decibels: float) -> float:
    """Convert decibels to a linear level."""
    return 10.0 ** (decibels / 20.0)


def _envelope_coefficient(milliseconds: float, sample_rate: float, reach: float) -> float:
    """Coefficient of a logarithmic envelope reaching ``1 - reach`` in the given time."""
    samples = milliseconds / 1000.0 * sample_rate
    if samples == 0.0:
        return 0.0
    return math.exp(math.log(reach) / samples)


class SideChain:
    """Computes the gain reduction for one channel from its input levels in decibels."""

    def __init__(self, sample_rate: int) -> None:
        self.sample_rate = float(sample_rate)
        self._fet = GainStageFET(sample_rate)
        self._optical = GainStageOptical(sample_rate)

        self._crest_factor = _CREST_FACTOR_AUTO_GAIN
        self._gain_reduction = 0.0
        self._gain_reduction_ideal = 0.0
        self._gain_reduction_intermediate = 0.0
        self._gain_compensation = 0.0
        self._detector_output_squared = 0.0

        self._threshold = -12.0
        self._ratio_internal = 0.5
        self._knee_width = 0.0
        self._knee_width_half = 0.0
        self._knee_width_double = 0.0

        self._attack_rate = 10
        self._attack_coefficient = 0.0
        self._release_rate = 100
        self._release_coefficient = 0.0
        self._detector_rate = 10.0
        self._detector_coefficient = 0.0
        self._detector_type = Detector.SMOOTH_BRANCHING
        self._gain_stage_type = GainStageType.FET

        self.threshold = -12.0
        self.ratio = 2.0
        self.knee_width = 0.0
        self.detector_rms_filter = 10.0
        self.attack_rate = 10
        self.release_rate = 100
        self.detector = Detector.SMOOTH_BRANCHING
        self.gain_stage = GainStageType.FET

        self.reset()

    def reset(self) -> None:
        """Clear the envelopes and the automatic make-up gain."""
        self._gain_reduction = 0.0
        self._gain_compensation = 0.0
        self._detector_output_squared = 0.0
        self._crest_factor = _CREST_FACTOR_AUTO_GAIN

    def _update_compensation(self) -> None:
        self._gain_compensation = self.query_gain_computer(self._crest_factor) / 2.0

    @property
    def gain_compensation(self) -> float:
        """Gain reduction removed again by automatic make-up gain, in decibels."""
        return self._gain_compensation

    @property
    def detector_rms_filter(self) -> float:
        """Rate of the RMS level detection filter in milliseconds."""
        return self._detector_rate

    @detector_rms_filter.setter
    def detector_rms_filter(self, milliseconds: float) -> None:
        self._detector_rate = milliseconds
        # envelope reaches 90% of the final reading in the given time
        self._detector_coefficient = _envelope_coefficient(milliseconds, self.sample_rate, 0.10)

    @property
    def detector(self) -> Detector:
        """Detector type shaping the envelopes."""
        return self._detector_type

    @detector.setter
    def detector(self, detector: int) -> None:
        self._detector_type = Detector(detector)
        self._gain_reduction_intermediate = 0.0
        self.attack_rate = self._attack_rate
        self.release_rate = self._release_rate

    @property
    def gain_stage(self) -> GainStageType:
        """Gain stage model applied to the gain reduction."""
        return self._gain_stage_type

    @gain_stage.setter
    def gain_stage(self, gain_stage: int) -> None:
        self._gain_stage_type = GainStageType(gain_stage)
        self.threshold = self._threshold
        self._current_stage().reset(self._gain_reduction)

    @property
    def threshold(self) -> float:
        """Threshold in decibels."""
        return self._threshold

    @threshold.setter
    def threshold(self, decibels: float) -> None:
        self._threshold = decibels
        self._update_compensation()

    @property
    def ratio(self) -> float:
        """Compression ratio."""
        return 1.0 / (1.0 - self._ratio_internal)

    @ratio.setter
    def ratio(self, ratio: float) -> None:
        self._ratio_internal = 1.0 - 1.0 / ratio
        self._update_compensation()

    @property
    def knee_width(self) -> float:
        """Knee width in decibels."""
        return self._knee_width

    @knee_width.setter
    def knee_width(self, decibels: float) -> None:
        self._knee_width = decibels
        self._knee_width_half = decibels / 2.0
        self._knee_width_double = decibels * 2.0
        self._update_compensation()

    @property
    def attack_rate(self) -> int:
        """Attack rate in milliseconds."""
        return self._attack_rate

    @attack_rate.setter
    def attack_rate(self, milliseconds: int) -> None:
        self._attack_rate = milliseconds
        if milliseconds == 0:
            self._attack_coefficient = 0.0
        else:
            self._attack_coefficient = _envelope_coefficient(
                milliseconds, self.sample_rate, 0.10
            )

    @property
    def release_rate(self) -> int:
        """Release rate in milliseconds."""
        return self._release_rate

    @release_rate.setter
    def release_rate(self, milliseconds: int) -> None:
        self._release_rate = milliseconds
        if milliseconds == 0:
            self._release_coefficient = 0.0
        elif self._detector_type == Detector.LINEAR:
            # falls 10 dB per release interval
            self._release_coefficient = 10.0 / (milliseconds / 1000.0 * self.sample_rate)
        else:
            self._release_coefficient = _envelope_coefficient(
                milliseconds, self.sample_rate, 0.10
            )

    def _current_stage(self) -> GainStage:
        if self._gain_stage_type == GainStageType.FET:
            return self._fet
        return self._optical

    def gain_reduction(self, auto_makeup_gain: bool) -> float:
        """Return the current gain reduction in decibels, passed through the gain stage."""
        value = self._current_stage().process(self._gain_reduction, self._gain_reduction_ideal)
        if auto_makeup_gain:
            return value - self._gain_compensation
        return value

    def query_gain_computer(self, input_level: float) -> float:
        """Return the static gain reduction in decibels for an input level in decibels."""
        above = input_level - self._threshold
        if self._knee_width == 0.0:
            if input_level <= self._threshold:
                return 0.0
            return above * self._ratio_internal

        if above < -self._knee_width_half:
            return 0.0
        if above > self._knee_width_half:
            return above * self._ratio_internal
        factor = above + self._knee_width_half
        return factor * factor / self._knee_width_double * self._ratio_internal

    def process_sample(self, input_level: float) -> None:
        """Feed one input level in decibels through the side chain."""
        self._gain_reduction_ideal = self.query_gain_computer(input_level)
        new = self._level_detection_filter(self._gain_reduction_ideal)

        if self._detector_type == Detector.LINEAR:
            self._apply_linear(new)
        elif self._detector_type == Detector.SMOOTH_DECOUPLED:
            self._apply_smooth_decoupled(new)
        else:
            self._apply_smooth_branching(new)

    def _level_detection_filter(self, level: float) -> float:
        c = self._detector_coefficient
        self._detector_output_squared = c * self._detector_output_squared + (1.0 - c) * level * level
        return math.sqrt(self._detector_output_squared)

    def _apply_linear(self, new: float) -> None:
        if new >= self._gain_reduction:
            if self._attack_coefficient == 0.0:
                self._gain_reduction = new
            else:
                a = self._attack_coefficient
                self._gain_reduction = a * self._gain_reduction + (1.0 - a) * new
        elif self._release_coefficient == 0.0:
            self._gain_reduction = new
        else:
            self._gain_reduction = max(self._gain_reduction - self._release_coefficient, new)

    def _apply_smooth_decoupled(self, new: float) -> None:
        if self._release_coefficient == 0.0:
            self._gain_reduction_intermediate = new
        else:
            r = self._release_coefficient
            self._gain_reduction_intermediate = max(
                r * self._gain_reduction_intermediate + (1.0 - r) * new, new
            )

        if self._attack_coefficient == 0.0:
            self._gain_reduction = self._gain_reduction_intermediate
        else:
            a = self._attack_coefficient
            self._gain_reduction = (
                a * self._gain_reduction + (1.0 - a) * self._gain_reduction_intermediate
            )

    def _apply_smooth_branching(self, new: float) -> None:
        if new > self._gain_reduction:
            coefficient = self._attack_coefficient
        else:
            coefficient = self._release_coefficient
        if coefficient == 0.0:
            self._gain_reduction = new
        else:
            self._gain_reduction = coefficient * self._gain_reduction + (1.0 - coefficient) * new