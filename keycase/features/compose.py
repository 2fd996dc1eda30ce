"""Composition root — collect the enabled features into case-ready trees.

Positive shapes are material added to the case; negative shapes are cut
from it afterwards, so a negative always wins over any positive it
overlaps.  Features are independent of one another and are built in a
fixed order only so that output is reproducible.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from keycase.config.options import Options
from keycase.csg import Node, difference, union
from keycase.matrix.engine import CoordinateEngine

from .back_plate import backplate_block, backplate_fastener_holes
from .connection import connection_negative, connection_positive
from .foot_plates import foot_plates
from .leds import led_holes
from .mcu import mcu_negative, mcu_support, mcu_visualization
from .usb_holder import usb_holder_negative, usb_holder_positive

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class Feature:
    """One auxiliary feature's contribution to the case."""

    name: str
    positive: Node | None = None
    negative: Node | None = None
    preview: Node | None = None


def _enabled(options: Options, *path: str) -> bool:
    return bool(options.get(*path, "include", default=False))


def build_features(options: Options, engine: CoordinateEngine) -> list[Feature]:
    """Build every feature whose ``include`` flag is set."""
    features: list[Feature] = []

    if _enabled(options, "mcu"):
        support = options.get("mcu", "support", default=True)
        features.append(Feature(
            name="mcu",
            positive=mcu_support(options, engine) if support else None,
            negative=mcu_negative(options, engine),
            preview=mcu_visualization(options, engine),
        ))

    if _enabled(options, "usb-holder"):
        features.append(Feature(
            name="usb-holder",
            positive=usb_holder_positive(engine),
            negative=usb_holder_negative(engine),
        ))

    if _enabled(options, "case", "back-plate"):
        features.append(Feature(
            name="back-plate",
            positive=backplate_block(options, engine),
            negative=backplate_fastener_holes(options, engine),
        ))

    if _enabled(options, "case", "leds"):
        features.append(Feature(name="leds", negative=led_holes(options, engine)))

    if _enabled(options, "connection"):
        features.append(Feature(
            name="connection",
            positive=connection_positive(options, engine),
            negative=connection_negative(options, engine),
        ))

    if _enabled(options, "case", "foot-plates"):
        features.append(Feature(name="foot-plates", positive=foot_plates(options, engine)))

    log.info("Composed %d auxiliary feature(s): %s",
             len(features), ", ".join(f.name for f in features) or "none")
    return features


def auxiliary_positive(features: list[Feature]) -> Node:
    return union(*(f.positive for f in features if f.positive is not None))


def auxiliary_negative(features: list[Feature]) -> Node:
    return union(*(f.negative for f in features if f.negative is not None))


def auxiliary_preview(features: list[Feature]) -> Node:
    return union(*(f.preview for f in features if f.preview is not None))


def compose_case(features: list[Feature], shell: Node | None = None) -> Node:
    """Positive features (and *shell*, if given) minus every negative feature."""
    positive = auxiliary_positive(features)
    body = union(shell, positive) if shell is not None else positive
    return difference(body, auxiliary_negative(features))


def case_auxiliaries(
    options: Options, engine: CoordinateEngine, shell: Node | None = None,
) -> Node:
    return compose_case(build_features(options, engine), shell)
