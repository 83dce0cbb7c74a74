"""Roof pressure zone layout (ASCE 7-22 Figure 30.3-2).

Zone widths use the edge distance ``a``::

    a = min(0.1 * least horizontal dimension, 0.4 * h)
    a >= max(0.04 * least horizontal dimension, 3 ft)

A rectangular roof gets four ``a × a`` corner zones, perimeter strips of
width ``a`` between them and an interior field. An L-shaped roof is laid
out as two rectangles plus a corner zone at the re-entrant corner.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from roofwind.errors import require_positive
from roofwind.schemas import SecondLeg, Zone

MIN_EDGE_DISTANCE_FT = 3.0


@dataclass(frozen=True)
class ZoneArea:
    """One rectangular piece of a roof zone, in plan coordinates (ft)."""

    zone: Zone
    name: str
    x: float
    y: float
    length: float
    width: float

    @property
    def area(self) -> float:
        return self.length * self.width


@dataclass(frozen=True)
class ZoneLayout:
    edge_distance: float
    zones: tuple[ZoneArea, ...]
    notes: tuple[str, ...] = field(default=())

    def area_of(self, zone: Zone) -> float:
        return sum(z.area for z in self.zones if z.zone == zone)

    @property
    def total_area(self) -> float:
        return sum(z.area for z in self.zones)


def edge_distance(least_dimension: float, height: float) -> float:
    """ASCE edge distance ``a`` for zone widths, in feet."""
    require_positive(least_dimension, "Least horizontal dimension")
    require_positive(height, "Building height")
    a = min(0.1 * least_dimension, 0.4 * height)
    return max(a, 0.04 * least_dimension, MIN_EDGE_DISTANCE_FT)


def _rectangle_zones(
    length: float, width: float, a: float, prefix: str = "", x0: float = 0.0
) -> list[ZoneArea]:
    # Corners overlap on very small roofs; keep them within the plan.
    a = min(a, length / 2.0, width / 2.0)
    zones = [
        ZoneArea(Zone.CORNER, f"{prefix}Southwest Corner", x0, 0.0, a, a),
        ZoneArea(Zone.CORNER, f"{prefix}Southeast Corner", x0 + length - a, 0.0, a, a),
        ZoneArea(Zone.CORNER, f"{prefix}Northwest Corner", x0, width - a, a, a),
        ZoneArea(Zone.CORNER, f"{prefix}Northeast Corner", x0 + length - a, width - a, a, a),
    ]

    inner_length = length - 2 * a
    inner_width = width - 2 * a
    if inner_length > 0:
        zones.append(ZoneArea(Zone.PERIMETER, f"{prefix}South Edge", x0 + a, 0.0, inner_length, a))
        zones.append(
            ZoneArea(Zone.PERIMETER, f"{prefix}North Edge", x0 + a, width - a, inner_length, a)
        )
    if inner_width > 0:
        zones.append(ZoneArea(Zone.PERIMETER, f"{prefix}West Edge", x0, a, a, inner_width))
        zones.append(
            ZoneArea(Zone.PERIMETER, f"{prefix}East Edge", x0 + length - a, a, a, inner_width)
        )
    if inner_length > 0 and inner_width > 0:
        zones.append(ZoneArea(Zone.FIELD, f"{prefix}Field", x0 + a, a, inner_length, inner_width))
    return zones


def calculate_zone_layout(
    length: float,
    width: float,
    height: float,
    second_leg: Optional[SecondLeg] = None,
) -> ZoneLayout:
    """Lay out corner, perimeter and field zones for the roof.

    Parameters
    ----------
    length, width : float
        Plan dimensions of the (primary) rectangle in feet.
    height : float
        Mean roof height in feet.
    second_leg : SecondLeg or None
        Second wing of an L-shaped roof, attached along the primary
        rectangle's east edge with a common south edge.

    Returns
    -------
    ZoneLayout
    """
    require_positive(length, "Building length")
    require_positive(width, "Building width")
    require_positive(height, "Building height")

    if second_leg is None:
        a = edge_distance(min(length, width), height)
        return ZoneLayout(
            edge_distance=a,
            zones=tuple(_rectangle_zones(length, width, a)),
            notes=(f"Edge distance a = {a:.1f} ft per ASCE 7-22 Figure 30.3-2",),
        )

    least = min(length, width, second_leg.length, second_leg.width)
    a = edge_distance(least, height)
    zones = _rectangle_zones(length, width, a, prefix="Leg 1 ")
    zones += _rectangle_zones(second_leg.length, second_leg.width, a, prefix="Leg 2 ", x0=length)
    notes = [
        f"Edge distance a = {a:.1f} ft per ASCE 7-22 Figure 30.3-2",
        "L-shaped roof laid out as two rectangles - verify zones at the leg junction",
    ]

    if second_leg.width != width:
        inside_y = min(width, second_leg.width)
        inside_x = length if second_leg.width > width else length - a
        zones.append(ZoneArea(Zone.CORNER, "Re-entrant Corner", inside_x, inside_y, a, a))
        notes.append("Re-entrant corner zone added at the inside corner of the L")
    else:
        notes.append("Legs have equal width - roof is rectangular in plan, no re-entrant corner")

    return ZoneLayout(edge_distance=a, zones=tuple(zones), notes=tuple(notes))


__all__ = [
    "MIN_EDGE_DISTANCE_FT",
    "ZoneArea",
    "ZoneLayout",
    "calculate_zone_layout",
    "edge_distance",
]
