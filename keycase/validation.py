"""Configuration validation — check an Options tree before building geometry."""

from __future__ import annotations

import logging

from keycase.config.hardware import MICRO_USB, PRO_MICRO, USB_HOLDER
from keycase.config.options import ConfigReferenceError, Options
from keycase.features.foot_plates import FootPoint, foot_point_position, parse_foot_point
from keycase.features.leds import (
    CHANNEL_WIDTH, LedParams, led_hole_position, west_wall_channel_outline,
)
from keycase.features.mcu import mcu_finger_coordinates
from keycase.geometry import rect_inside_polygon, validate_outline
from keycase.matrix.engine import CoordinateEngine

log = logging.getLogger(__name__)


def _check_alias(options: Options, name: str, where: str, errors: list[str]) -> None:
    try:
        options.alias(name)
    except ConfigReferenceError:
        errors.append(f"{where}: unknown key alias '{name}'")


def _check_direction(
    options: Options, path: tuple, errors: list[str], *,
    cardinal: bool = False, corner: bool = False,
):
    try:
        direction = options.direction(*path)
    except ConfigReferenceError as e:
        errors.append(str(e))
        return None
    where = ".".join(map(str, path))
    if cardinal and not direction.is_cardinal:
        errors.append(f"{where}: {direction.name} is not a cardinal direction")
    if corner and direction.is_cardinal:
        errors.append(f"{where}: {direction.name} is a wall, not a corner")
    return direction


def _check_clearances(options: Options, errors: list[str]) -> None:
    """Every padded dimension of a negative space must exceed its part."""
    if MICRO_USB.channel_width <= MICRO_USB.width:
        errors.append("Micro-USB channel is not wider than the receptacle")
    if MICRO_USB.channel_length <= MICRO_USB.length:
        errors.append("Micro-USB channel is not longer than the receptacle")
    if PRO_MICRO.thickness_tolerance <= 0:
        errors.append("MCU notch is not thicker than the board")
    if USB_HOLDER.wall_thickness <= 0:
        errors.append("USB holder block is not larger than its connector")
    if float(options.get("case", "web-thickness")) <= 0:
        errors.append("case.web-thickness: must be positive")


def _check_foot_plates(
    options: Options, engine: CoordinateEngine | None, errors: list[str],
) -> None:
    base = ("case", "foot-plates", "polygons")
    for i, entry in enumerate(options.get(*base, default=())):
        label = f"Foot plate {i}"
        points: list[FootPoint] = []
        for j, raw in enumerate(entry.get("points", ())):
            try:
                point = parse_foot_point(raw, base + (i, "points", j))
            except ConfigReferenceError as e:
                errors.append(f"{label}: {e}")
                continue
            _check_alias(options, point.key_alias, f"{label} point {j}", errors)
            points.append(point)
        if len(points) < 3:
            errors.append(f"{label}: has only {len(points)} usable point(s), need at least 3.")
            continue
        if engine is not None:
            try:
                outline = [foot_point_position(options, engine, p) for p in points]
            except ConfigReferenceError:
                continue  # unknown alias, already reported
            errors.extend(validate_outline(outline, label))


def _check_leds(options: Options, engine: CoordinateEngine | None, errors: list[str]) -> None:
    params = LedParams.from_options(options)
    before = len(errors)
    if params.amount < 0:
        errors.append(f"case.leds.amount: must not be negative, got {params.amount}")
    for name, value in (("interval", params.interval),
                        ("emitter-diameter", params.emitter_diameter),
                        ("housing-size", params.housing_size)):
        if value <= 0:
            errors.append(f"case.leds.{name}: must be positive, got {value}")
    if engine is None or len(errors) > before:
        return
    try:
        outline = west_wall_channel_outline(options, engine)
        positions = [led_hole_position(options, engine, i) for i in range(params.amount)]
    except ConfigReferenceError as e:
        errors.append(f"LED strip: {e}")
        return
    cx = outline[0][0] + CHANNEL_WIDTH / 2
    for ordinal, (_, y, _) in enumerate(positions):
        if not rect_inside_polygon(outline, cx, y, CHANNEL_WIDTH / 2, params.housing_size):
            log.warning("LED %d housing escapes the west wall channel", ordinal)
            errors.append(f"LED {ordinal}: housing at y={y:.1f} is outside the west wall channel")


def validate_options(options: Options, engine: CoordinateEngine | None = None) -> list[str]:
    """Validate a configuration. Returns error messages (empty = valid).

    With an *engine*, outlines are also resolved and checked in space.
    """
    errors: list[str] = []

    # ── Aliases ──
    if options.get("case", "back-plate", "include", default=False):
        _check_alias(options, options.get("case", "back-plate", "position", "key-alias"),
                     "case.back-plate.position.key-alias", errors)
    if options.get("connection", "include", default=False):
        _check_alias(options, options.get("connection", "position", "key-alias"),
                     "connection.position.key-alias", errors)
        _check_direction(options, ("connection", "position", "corner"), errors, corner=True)

    # ── MCU ──
    if options.get("mcu", "include", default=False):
        _check_direction(options, ("mcu", "connector-direction"), errors, cardinal=True)
        try:
            mcu_finger_coordinates(options)
        except ConfigReferenceError as e:
            errors.append(str(e))

    # ── Foot plates ──
    if options.get("case", "foot-plates", "include", default=False):
        _check_foot_plates(options, engine, errors)

    # ── LEDs ──
    if options.get("case", "leds", "include", default=False):
        _check_leds(options, engine, errors)

    _check_clearances(options, errors)
    return errors
