"""
OpenSCAD compiler wrapper — runs the openscad CLI for syntax checking and STL rendering.
"""

from __future__ import annotations

import logging
import shutil
import subprocess
import sys
from pathlib import Path

log = logging.getLogger(__name__)

CHECK_TIMEOUT_S = 30
COMPILE_TIMEOUT_S = 600


def _find_openscad() -> str | None:
    """Locate the openscad binary."""
    path = shutil.which("openscad")
    if path:
        return path
    for candidate in [
        r"C:\Program Files\OpenSCAD\openscad.exe",
        r"C:\Program Files (x86)\OpenSCAD\openscad.exe",
        "/Applications/OpenSCAD.app/Contents/MacOS/OpenSCAD",
    ]:
        if Path(candidate).exists():
            return candidate
    return None


def _null_device() -> str:
    return "NUL" if sys.platform == "win32" else "/dev/null"


def check_scad(scad_path: Path) -> tuple[bool, str]:
    """
    Syntax-check an OpenSCAD file without rendering.

    Returns (ok, message).
    """
    exe = _find_openscad()
    if not exe:
        return False, "OpenSCAD not found on PATH."

    try:
        result = subprocess.run(
            [exe, "-o", _null_device(), str(scad_path)],
            capture_output=True,
            text=True,
            timeout=CHECK_TIMEOUT_S,
        )
    except subprocess.TimeoutExpired:
        return False, f"OpenSCAD timed out ({CHECK_TIMEOUT_S}s)."
    except OSError as e:
        return False, str(e)

    stderr = result.stderr.strip()
    if result.returncode == 0:
        return True, stderr or "OK"
    return False, stderr or f"OpenSCAD exited with code {result.returncode}"


def compile_scad(scad_path: Path, stl_path: Path | None = None) -> tuple[bool, str, Path | None]:
    """
    Compile an OpenSCAD file to STL.

    Returns (ok, message, stl_path_or_none).
    """
    exe = _find_openscad()
    if not exe:
        return False, "OpenSCAD not found on PATH.", None

    if stl_path is None:
        stl_path = scad_path.with_suffix(".stl")

    log.info("Compiling %s -> %s", scad_path, stl_path)
    try:
        result = subprocess.run(
            [exe, "-o", str(stl_path), str(scad_path)],
            capture_output=True,
            text=True,
            timeout=COMPILE_TIMEOUT_S,
        )
    except subprocess.TimeoutExpired:
        return False, f"OpenSCAD timed out ({COMPILE_TIMEOUT_S}s).", None
    except OSError as e:
        return False, str(e), None

    stderr = result.stderr.strip()
    if result.returncode == 0 and stl_path.exists():
        return True, stderr or "OK", stl_path
    return False, stderr or f"OpenSCAD exited with code {result.returncode}", None
