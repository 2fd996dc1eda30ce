"""Configuration — the parameter tree and fixed part dimensions."""

from .options import (
    Options, KeyAlias, ConfigReferenceError,
    load_options, options_from_dict, deep_merge, DEFAULTS_PATH,
)
from .hardware import MicroUSB, ProMicro, UsbHolder, MICRO_USB, PRO_MICRO, USB_HOLDER

__all__ = [
    # Options
    "Options", "KeyAlias", "ConfigReferenceError",
    "load_options", "options_from_dict", "deep_merge", "DEFAULTS_PATH",
    # Hardware
    "MicroUSB", "ProMicro", "UsbHolder", "MICRO_USB", "PRO_MICRO", "USB_HOLDER",
]
