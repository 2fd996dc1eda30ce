"""Coordinate engines — where keys, walls and corners are in space.

Feature placement only talks to the ``CoordinateEngine`` protocol.  The
real key-matrix geometry (curvature, tenting, per-key tweaks) lives in
whatever implements it.  ``FlatMatrix`` is a plain planar grid built
from the parameter tree; it is enough to place features sensibly, to
preview a configuration and to test placement without a curved matrix.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Protocol, Sequence

from keycase.csg import Node, cube, translate
from keycase.csg.transform import add
from keycase.matrix.compass import Direction

if TYPE_CHECKING:
    from keycase.config.options import Options


log = logging.getLogger(__name__)

Vec3 = tuple[float, float, float]
Coordinates = tuple[int, int]

# Rear-housing corner insets are counted in half web thicknesses.
_CORNER_UNIT_FRACTION = 0.5


class CoordinateEngine(Protocol):
    """Queries feature placement needs from the key matrix."""

    @property
    def mount_depth(self) -> float: ...

    def cluster_position(
        self, cluster: str, coordinates: Sequence[int],
        offset: Sequence[float] = (0.0, 0.0, 0.0),
    ) -> Vec3:
        """Absolute position of *offset*, given in the key's own frame."""
        ...

    def place(self, cluster: str, coordinates: Sequence[int], shape: Node) -> Node:
        """Move *shape* from the origin into the key's frame."""
        ...

    def wall_slab_center_offset(
        self, cluster: str, coordinates: Sequence[int], direction: Direction,
    ) -> Vec3:
        """Offset, in the key's frame, to the centre of its wall facing *direction*."""
        ...

    def wall_corner_position(
        self, cluster: str, coordinates: Sequence[int], direction: Direction,
    ) -> Vec3:
        """Absolute position of the outer wall corner named by *direction*."""
        ...

    def mount_corner_post(
        self, cluster: str, coordinates: Sequence[int], direction: Direction,
    ) -> Node:
        """A small post at a corner of the key mount, already placed."""
        ...

    def housing_position(
        self, corner: Direction, depth: float, offset: Sequence[float],
    ) -> Vec3:
        """A point *depth* corner units inside a corner of the rear housing."""
        ...


class FlatMatrix:
    """All keys on one plane, columns along +x and rows along +y."""

    def __init__(self, options: Options) -> None:
        params = ("by-key", "parameters")
        self._options = options
        self.pitch = float(options.get(*params, "key-pitch"))
        self.mount_width = float(options.get(*params, "mount-width"))
        self._mount_depth = float(options.get(*params, "mount-depth"))
        self.wall_xy_offset = float(options.get(*params, "wall", "xy-offset"))
        self.web_thickness = float(options.get("case", "web-thickness"))

    @property
    def mount_depth(self) -> float:
        return self._mount_depth

    # ── keys ──────────────────────────────────────────────────────

    def cluster_position(
        self, cluster: str, coordinates: Sequence[int],
        offset: Sequence[float] = (0.0, 0.0, 0.0),
    ) -> Vec3:
        origin = self._options.vector("key-clusters", cluster, "position")
        col, row = coordinates
        key = (col * self.pitch, row * self.pitch, 0.0)
        return add(add(origin, key), offset)

    def place(self, cluster: str, coordinates: Sequence[int], shape: Node) -> Node:
        return translate(self.cluster_position(cluster, coordinates), shape)

    # ── walls ─────────────────────────────────────────────────────

    def wall_slab_center_offset(
        self, cluster: str, coordinates: Sequence[int], direction: Direction,
    ) -> Vec3:
        gx, gy = direction.to_grid
        return (
            gx * (self.mount_width / 2 + self.wall_xy_offset),
            gy * (self.mount_depth / 2 + self.wall_xy_offset),
            0.0,
        )

    def wall_corner_position(
        self, cluster: str, coordinates: Sequence[int], direction: Direction,
    ) -> Vec3:
        gx, gy = direction.to_grid
        px, py = direction.primary.to_grid
        local = (
            gx * self.mount_width / 2 + px * self.wall_xy_offset,
            gy * self.mount_depth / 2 + py * self.wall_xy_offset,
            0.0,
        )
        return self.cluster_position(cluster, coordinates, local)

    def mount_corner_post(
        self, cluster: str, coordinates: Sequence[int], direction: Direction,
    ) -> Node:
        gx, gy = direction.to_grid
        t = self.web_thickness
        post = translate(
            (gx * (self.mount_width - t) / 2, gy * (self.mount_depth - t) / 2, -t / 2),
            cube(t, t, t),
        )
        return self.place(cluster, coordinates, post)

    # ── rear housing ──────────────────────────────────────────────

    def housing_bounds(self) -> tuple[float, float, float, float]:
        """(west, south, east, north) of the rear housing behind the finger cluster."""
        from keycase.config.options import ConfigReferenceError

        o = self._options
        columns = o.get("key-clusters", "finger", "derived", "row-indices-by-column")
        used = [c for c, rows in enumerate(columns) if rows]
        if not used:
            raise ConfigReferenceError(
                ("key-clusters", "finger", "matrix-columns"), "no matrix column has rows",
            )
        top_row = max(max(columns[c]) for c in used)
        ox, oy, _ = o.vector("key-clusters", "finger", "position")
        margin = self.wall_xy_offset
        west = ox + min(used) * self.pitch - self.mount_width / 2 - margin
        east = ox + max(used) * self.pitch + self.mount_width / 2 + margin
        south = (oy + top_row * self.pitch + self.mount_depth / 2 + margin
                 + float(o.get("case", "rear-housing", "distance")))
        north = south + float(o.get("case", "rear-housing", "depth"))
        return (west, south, east, north)

    def housing_position(
        self, corner: Direction, depth: float, offset: Sequence[float],
    ) -> Vec3:
        west, south, east, north = self.housing_bounds()
        gx, gy = corner.to_grid
        inset = depth * self.web_thickness * _CORNER_UNIT_FRACTION
        cx, cy = (west + east) / 2, (south + north) / 2
        x = cx + gx * ((east - west) / 2 - inset)
        y = cy + gy * ((north - south) / 2 - inset)
        z = float(self._options.get("case", "rear-housing", "height"))
        log.debug("Rear housing corner %s at (%.2f, %.2f, %.2f)", corner.name, x, y, z)
        return add((x, y, z), offset)
