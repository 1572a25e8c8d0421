"""Gain stages that shape the side chain's gain reduction."""

from __future__ import annotations

import math

_COEFFICIENTS_PER_DECIBEL = 2
_NUMBER_OF_DECIBELS = 37
_NUMBER_OF_COEFFICIENTS = _NUMBER_OF_DECIBELS * _COEFFICIENTS_PER_DECIBEL
_SATURATION_LIMIT = 24.0


class GainStage:
    """Gain stage that passes the computed gain reduction straight through."""

    def __init__(self, sample_rate: int) -> None:
        self.sample_rate = float(sample_rate)
        self.gain_reduction = 0.0
        self.reset(0.0)

    def reset(self, gain_reduction: float) -> None:
        """Set the current gain reduction (in decibels)."""
        self.gain_reduction = gain_reduction

    def process(self, gain_reduction_new: float, gain_reduction_ideal: float) -> float:
        """Take a new gain reduction and return the processed one in decibels."""
        self.gain_reduction = gain_reduction_new
        return self.gain_reduction


class GainStageFET(GainStage):
    """Field-effect transistor stage: reacts instantly."""

    def process(self, gain_reduction_new: float, gain_reduction_ideal: float) -> float:
        return super().process(gain_reduction_new, gain_reduction_ideal)


class GainStageOptical(GainStage):
    """Optical stage whose speed depends on the amount of gain reduction."""

    def __init__(self, sample_rate: int) -> None:
        rate = float(sample_rate)
        attack: list[float] = []
        release: list[float] = []
        for n in range(_NUMBER_OF_COEFFICIENTS):
            decibels = n / _COEFFICIENTS_PER_DECIBEL
            resistance = 480.0 / (3.0 + decibels)
            attack_seconds = resistance / 10.0 / 1000.0
            release_seconds = resistance / 1000.0
            # envelopes reach 73% of the final reading in the given time
            attack.append(math.exp(math.log(0.27) / (attack_seconds * rate)))
            release.append(math.exp(math.log(0.27) / (release_seconds * rate)))
        self.attack_coefficients = tuple(attack)
        self.release_coefficients = tuple(release)
        super().__init__(sample_rate)

    def process(self, gain_reduction_new: float, gain_reduction_ideal: float) -> float:
        old = self.gain_reduction
        index = int(gain_reduction_new * _COEFFICIENTS_PER_DECIBEL)
        index = min(max(index, 0), _NUMBER_OF_COEFFICIENTS - 1)

        if gain_reduction_new > old:
            coefficient = self.attack_coefficients[index]
        else:
            coefficient = self.release_coefficients[index]
        self.gain_reduction = coefficient * old + (1.0 - coefficient) * gain_reduction_new

        # saturation of the optical element
        if self.gain_reduction < gain_reduction_ideal:
            diff = gain_reduction_ideal - self.gain_reduction
            diff = _SATURATION_LIMIT - _SATURATION_LIMIT / (1.0 + diff / _SATURATION_LIMIT)
            return gain_reduction_ideal - diff
        return self.gain_reduction