"""Parameter set of the compressor: names, ranges, presets and defaults."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from functools import lru_cache

from squeezer.side_chain import Design, Detector, GainStageType


class ParameterKind(Enum):
    """How a parameter's value is chosen."""

    BOOLEAN = "boolean"
    SWITCH = "switch"
    COMBINED = "combined"
    MODE = "mode"


@dataclass(frozen=True)
class Preset:
    """A named value of a parameter."""

    value: float
    label: str


@dataclass(frozen=True)
class ParameterSpec:
    """Description of one plug-in parameter.

    ``COMBINED`` parameters are continuous within ``minimum`` and
    ``maximum`` in steps of ``step``; each is preceded in the parameter
    list by a ``MODE`` entry that selects between presets and free values.
    ``SWITCH`` parameters take only their preset values.
    """

    key: str
    name: str
    kind: ParameterKind
    default: float
    presets: tuple[Preset, ...] = ()
    minimum: float | None = None
    maximum: float | None = None
    step: float | None = None
    scaling: float = 0.0
    decimal_places: int = 0
    suffix: str = ""
    true_label: str = ""
    false_label: str = ""

    def preset_label(self, value: float) -> str:
        """Return the text shown for ``value``."""
        if self.kind in (ParameterKind.BOOLEAN, ParameterKind.MODE):
            return self.true_label if value else self.false_label

        for preset in self.presets:
            if math.isclose(preset.value, value, rel_tol=1e-6, abs_tol=1e-9):
                return preset.label

        if self.kind is ParameterKind.SWITCH:
            raise ValueError(f"{value!r} is not a preset of {self.name!r}")
        return f"{value:.{self.decimal_places}f}{self.suffix}"

    def clamp(self, value: float) -> float:
        """Return the nearest value this parameter can take."""
        if self.kind in (ParameterKind.BOOLEAN, ParameterKind.MODE):
            return 1.0 if value else 0.0

        if self.kind is ParameterKind.SWITCH:
            return min(self.presets, key=lambda p: abs(p.value - value)).value

        assert self.minimum is not None and self.maximum is not None
        assert self.step is not None
        bounded = min(max(value, self.minimum), self.maximum)
        steps = round((bounded - self.minimum) / self.step)
        snapped = self.minimum + steps * self.step
        snapped = min(max(snapped, self.minimum), self.maximum)
        return round(snapped, self.decimal_places + 6)


def _boolean(key: str, name: str, true_label: str, false_label: str, default: bool) -> ParameterSpec:
    return ParameterSpec(
        key=key,
        name=name,
        kind=ParameterKind.BOOLEAN,
        default=1.0 if default else 0.0,
        true_label=true_label,
        false_label=false_label,
    )


def _switch(key: str, name: str, presets: list[tuple[float, str]], default: float) -> ParameterSpec:
    return ParameterSpec(
        key=key,
        name=name,
        kind=ParameterKind.SWITCH,
        default=float(default),
        presets=tuple(Preset(float(v), label) for v, label in presets),
    )


def _combined(
    key: str,
    name: str,
    minimum: float,
    maximum: float,
    step: float,
    scaling: float,
    decimal_places: int,
    presets: list[tuple[float, str]],
    suffix: str,
    default: float,
) -> tuple[ParameterSpec, ParameterSpec]:
    mode = ParameterSpec(
        key=f"{key}_switch",
        name=name,
        kind=ParameterKind.MODE,
        default=1.0,
        true_label="Presets",
        false_label="Continuous",
    )
    value = ParameterSpec(
        key=key,
        name=name,
        kind=ParameterKind.COMBINED,
        default=float(default),
        presets=tuple(Preset(float(v), label) for v, label in presets),
        minimum=float(minimum),
        maximum=float(maximum),
        step=float(step),
        scaling=float(scaling),
        decimal_places=decimal_places,
        suffix=suffix,
    )
    return mode, value


def _signed_db(values: range) -> list[tuple[float, str]]:
    return [(float(v), f"{v:+d} dB" if v else "0 dB") for v in values]


@lru_cache(maxsize=None)
def _build(stereo: bool) -> tuple[ParameterSpec, ...]:
    specs: list[ParameterSpec] = [
        _boolean("bypass", "Bypass", "Bypassed", "Active", False),
        _switch(
            "detector_rms_filter",
            "RMS Filter",
            [
                (0.1, "Peak (100 us)"),
                (2.0, "Fast (2 ms)"),
                (10.0, "Medium (10 ms)"),
                (50.0, "Slow (50 ms)"),
            ],
            10.0,
        ),
        _switch(
            "design",
            "Design",
            [(Design.FEED_FORWARD, "Feed-Forward"), (Design.FEED_BACK, "Feed-Back")],
            Design.FEED_FORWARD,
        ),
        _switch(
            "detector",
            "Detector",
            [
                (Detector.LINEAR, "Linear"),
                (Detector.SMOOTH_DECOUPLED, "S-Curve"),
                (Detector.SMOOTH_BRANCHING, "Logarithmic"),
            ],
            Detector.SMOOTH_BRANCHING,
        ),
        _switch(
            "gain_stage",
            "Gain Stage",
            [(GainStageType.FET, "FET"), (GainStageType.OPTICAL, "Optical")],
            GainStageType.FET,
        ),
    ]

    specs.extend(
        _combined(
            "threshold", "Threshold", -60.0, 18.0, 1.0, 0.0, 0,
            _signed_db(range(-48, 19, 2)), " dB", -12.0,
        )
    )
    specs.extend(
        _combined(
            "ratio", "Ratio", 0.1, 10.0, 0.05, 1.0, 2,
            [
                (0.50, "0.50:1"), (0.67, "0.67:1"), (0.83, "0.83:1"),
                (0.91, "0.91:1"), (1.00, "Bypass"), (1.10, "1.1:1"),
                (1.20, "1.2:1"), (1.50, "1.5:1"), (2.00, "2:1"),
                (2.50, "2.5:1"), (3.00, "3:1"), (4.00, "4:1"),
                (6.00, "6:1"), (8.00, "8:1"), (10.00, "10:1"),
            ],
            ":1", 2.0,
        )
    )
    specs.extend(
        _combined(
            "knee_width", "Knee Width", 0.0, 48.0, 6.0, 0.0, 0,
            [(0.0, "Hard"), (12.0, "Medium"), (48.0, "Soft")],
            " dB", 0.0,
        )
    )
    specs.extend(
        _combined(
            "attack_rate", "Attack Rate", 0.0, 500.0, 1.0, 2.0, 0,
            [(float(v), f"{v} ms") for v in (1, 2, 5, 10, 20, 50, 100, 200, 500)],
            " ms", 20.0,
        )
    )
    specs.extend(
        _combined(
            "release_rate", "Release Rate", 0.0, 8000.0, 1.0, 3.0, 0,
            [(float(v), f"{v} ms") for v in (50, 75, 100, 125, 150, 175, 200, 250, 375, 500, 750)]
            + [
                (1000.0, "1.0 s"), (1500.0, "1.5 s"), (2000.0, "2.0 s"),
                (4000.0, "4.0 s"), (8000.0, "8.0 s"),
            ],
            " ms", 150.0,
        )
    )

    if stereo:
        specs.extend(
            _combined(
                "stereo_link", "Stereo Link", 0.0, 100.0, 1.0, 0.0, 0,
                [(0.0, "Off"), (50.0, "50 %"), (75.0, "75 %"), (90.0, "90 %"), (100.0, "100 %")],
                " %", 100.0,
            )
        )

    specs.append(_boolean("auto_makeup_gain", "Auto Make-Up Gain", "Auto", "Manual", True))
    specs.extend(
        _combined(
            "makeup_gain", "Make-Up Gain", -36.0, 36.0, 0.5, 0.0, 1,
            _signed_db(range(-18, 19)), " dB", 0.0,
        )
    )
    specs.extend(
        _combined(
            "wet_mix", "Wet Mix", 0.0, 100.0, 1.0, 1.0, 0,
            [(0.0, "Bypass")]
            + [(float(v), f"{v} %") for v in (5, 10, 15, 20, 25, 30, 40, 50, 75, 100)],
            " %", 100.0,
        )
    )
    specs.append(
        _boolean("sidechain_filter_state", "SC Filter State", "Enabled", "Disabled", False)
    )
    specs.extend(
        _combined(
            "sidechain_filter_cutoff", "SC Filter Cutoff Frequency",
            60.0, 12000.0, 10.0, 1.0, 0,
            [
                # high-pass filter
                (100.0, "100 Hz"), (250.0, "250 Hz"), (500.0, "500 Hz"),
                (1000.0, "1.0 kHz"), (1500.0, "1.5 kHz"), (2500.0, "2.5 kHz"),
                # low-pass filter
                (3000.0, "3.0 kHz"), (4000.0, "4.0 kHz"), (5000.0, "5.0 kHz"),
                (6500.0, "6.5 kHz"), (9000.0, "9.0 kHz"), (12000.0, "12 kHz"),
            ],
            " Hz", 100.0,
        )
    )
    specs.append(
        _switch("sidechain_filter_gain", "SC Filter Gain", _signed_db(range(-12, 13)), 0.0)
    )
    specs.append(
        _boolean("sidechain_listen", "SC Listen", "Side-Chain", "Compressor", False)
    )
    return tuple(specs)


def squeezer_parameters(stereo: bool) -> tuple[ParameterSpec, ...]:
    """Return all parameters in index order for the mono or stereo build."""
    return _build(bool(stereo))


@lru_cache(maxsize=None)
def _indices(stereo: bool) -> dict[str, int]:
    return {spec.key: index for index, spec in enumerate(_build(stereo))}


def parameter_index(stereo: bool, name: str) -> int:
    """Return the index of the parameter with key ``name``.

    Raises ``KeyError`` when the build has no such parameter.
    """
    try:
        return _indices(bool(stereo))[name]
    except KeyError:
        raise KeyError(f"unknown parameter {name!r}") from None