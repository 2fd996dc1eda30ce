"""Fixed part dimensions — the physical hardware the auxiliary features hold.

These are properties of purchased parts, not user options, so they live
here rather than in the parameter tree.  All distances are in millimetres.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class MicroUSB:
    """A micro-USB female receptacle."""

    width: float = 7.5
    length: float = 5.3
    height: float = 2.8

    channel_width: float = 7.8
    """Width of the channel cut for the receptacle; wider than the part."""

    channel_length: float = 10.0
    """Length of the channel; runs through the case wall."""

    @property
    def size(self) -> tuple[float, float, float]:
        return (self.width, self.length, self.height)

    @property
    def channel_size(self) -> tuple[float, float, float]:
        return (self.channel_width, self.channel_length, self.height)


@dataclass(frozen=True)
class ProMicro:
    """Arduino Pro Micro board.  Length runs from the USB edge backward."""

    width: float = 18.0
    length: float = 33.0
    thickness: float = 1.65

    thickness_tolerance: float = 0.3
    """Slack added to the board thickness in the notch that holds it."""

    usb_overhang: float = 1.0
    """How far the receptacle's mouth sits beyond the board's USB edge."""


@dataclass(frozen=True)
class UsbHolder:
    """A standalone USB female connector and the block that holds it."""

    width: float = 6.5
    length: float = 10.0
    height: float = 13.6

    wall_thickness: float = 4.0
    """Material added around the connector in width and height."""

    @property
    def size(self) -> tuple[float, float, float]:
        return (self.width, self.length, self.height)


# Module-level singletons.
MICRO_USB = MicroUSB()
PRO_MICRO = ProMicro()
USB_HOLDER = UsbHolder()
