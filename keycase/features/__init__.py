"""Auxiliary features — placed hardware holders and cut-outs for the case.

Submodules:
  mcu          Microcontroller bay: preview, cavity and holder.
  back_plate   Plate and fastener holes for a connecting beam.
  leds         Diode housings and emitter holes along the west wall.
  connection   Socket for the cable between the halves.
  foot_plates  Flat feet outlined by key corners.
  usb_holder   Standalone USB connector holder.
  compose      Composition root (positive / negative / preview trees).
"""

from .mcu import mcu_visualization, mcu_negative, mcu_support, mcu_position
from .back_plate import backplate_place, backplate_shape, backplate_fastener_holes, backplate_block
from .leds import led_holes, led_hole_position, led_emitter_channel, led_housing_channel
from .connection import (
    connection_nook, connection_position, connection_metasocket, connection_socket,
    connection_positive, connection_negative,
)
from .foot_plates import foot_plates, foot_point_position
from .usb_holder import usb_holder_positive, usb_holder_negative
from .compose import (
    Feature, build_features, auxiliary_positive, auxiliary_negative,
    auxiliary_preview, compose_case, case_auxiliaries,
)

__all__ = [
    # MCU
    "mcu_visualization", "mcu_negative", "mcu_support", "mcu_position",
    # Back plate
    "backplate_place", "backplate_shape", "backplate_fastener_holes", "backplate_block",
    # LEDs
    "led_holes", "led_hole_position", "led_emitter_channel", "led_housing_channel",
    # Connection
    "connection_nook", "connection_position", "connection_metasocket",
    "connection_socket", "connection_positive", "connection_negative",
    # Foot plates
    "foot_plates", "foot_point_position",
    # USB holder
    "usb_holder_positive", "usb_holder_negative",
    # Composition
    "Feature", "build_features", "auxiliary_positive", "auxiliary_negative",
    "auxiliary_preview", "compose_case", "case_auxiliaries",
]
