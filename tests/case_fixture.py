"""Case test fixture — a small keyboard half on a flat matrix.

The defaults shipped with the package are used as the base so that every
feature has a complete parameter set; tests override only what they
exercise.

Finger cluster (flat, pitch 19.05 mm, origin at z = 18):
  - columns 0-3: rows -1..2
  - column 4:    rows -1..1
  - column 5:    rows  0..1
"""

from __future__ import annotations

from typing import Any, Mapping

from keycase.config import Options, options_from_dict
from keycase.matrix import FlatMatrix


def make_options(overrides: Mapping[str, Any] | None = None) -> Options:
    """Return the default Options with *overrides* deep-merged on top."""
    return options_from_dict(overrides or {})


def make_case(overrides: Mapping[str, Any] | None = None) -> tuple[Options, FlatMatrix]:
    """Return (options, engine) for the fixture case."""
    options = make_options(overrides)
    return options, FlatMatrix(options)


def led_overrides(**values: Any) -> dict:
    return {"case": {"leds": values}}
