"""Conversion between WGS84 and the RT90 2.5 gon V grid.

Gauss-Krüger (transverse Mercator) projection using Krüger's series truncated
at the 4th order, with the parameters published by Lantmäteriet for direct
projection from GRS80/SWEREF 99 to RT90 2.5 gon V. Accurate to well below a
millimeter inside Sweden; not valid far outside the region.

RT90 follows the Swedish convention: X is northing and Y is easting.
"""

import math
from dataclasses import dataclass

from skane_departures.domain.models.point import Point


@dataclass(frozen=True)
class GridPoint:
    """Position on the RT90 grid, in meters."""

    northing: float
    easting: float

    def to_wire(self) -> tuple[int, int]:
        """Quantize to the integer meters the feed expects, as (X, Y)."""
        return round(self.northing), round(self.easting)


@dataclass(frozen=True)
class _Projection:
    central_meridian: float
    scale: float
    false_northing: float
    false_easting: float
    # k0 * rectifying radius
    k0_a_roof: float
    a: float
    b: float
    c: float
    d: float
    beta: tuple[float, float, float, float]
    delta: tuple[float, float, float, float]
    a_star: float
    b_star: float
    c_star: float
    d_star: float


def _build_projection(
    axis: float,
    flattening: float,
    central_meridian_deg: float,
    scale: float,
    false_northing: float,
    false_easting: float,
) -> _Projection:
    e2 = flattening * (2.0 - flattening)
    n = flattening / (2.0 - flattening)
    a_roof = axis / (1.0 + n) * (1.0 + n**2 / 4.0 + n**4 / 64.0)

    return _Projection(
        central_meridian=math.radians(central_meridian_deg),
        scale=scale,
        false_northing=false_northing,
        false_easting=false_easting,
        k0_a_roof=scale * a_roof,
        a=e2,
        b=(5.0 * e2**2 - e2**3) / 6.0,
        c=(104.0 * e2**3 - 45.0 * e2**4) / 120.0,
        d=(1237.0 * e2**4) / 1260.0,
        beta=(
            n / 2.0 - 2.0 * n**2 / 3.0 + 5.0 * n**3 / 16.0 + 41.0 * n**4 / 180.0,
            13.0 * n**2 / 48.0 - 3.0 * n**3 / 5.0 + 557.0 * n**4 / 1440.0,
            61.0 * n**3 / 240.0 - 103.0 * n**4 / 140.0,
            49561.0 * n**4 / 161280.0,
        ),
        delta=(
            n / 2.0 - 2.0 * n**2 / 3.0 + 37.0 * n**3 / 96.0 - n**4 / 360.0,
            n**2 / 48.0 + n**3 / 15.0 - 437.0 * n**4 / 1440.0,
            17.0 * n**3 / 480.0 - 37.0 * n**4 / 840.0,
            4397.0 * n**4 / 161280.0,
        ),
        a_star=e2 + e2**2 + e2**3 + e2**4,
        b_star=-(7.0 * e2**2 + 17.0 * e2**3 + 30.0 * e2**4) / 6.0,
        c_star=(224.0 * e2**3 + 889.0 * e2**4) / 120.0,
        d_star=-(4279.0 * e2**4) / 1260.0,
    )


GRS80_AXIS = 6378137.0
GRS80_FLATTENING = 1.0 / 298.257222101
RT90_CENTRAL_MERIDIAN = 15.0 + 48.0 / 60.0 + 22.624306 / 3600.0
RT90_SCALE = 1.00000561024
RT90_FALSE_NORTHING = -667.711
RT90_FALSE_EASTING = 1500064.274

_RT90 = _build_projection(
    GRS80_AXIS,
    GRS80_FLATTENING,
    RT90_CENTRAL_MERIDIAN,
    RT90_SCALE,
    RT90_FALSE_NORTHING,
    RT90_FALSE_EASTING,
)


def geodetic_to_grid(latitude: float, longitude: float) -> GridPoint:
    """Project WGS84 decimal degrees onto the RT90 grid.

    The result is rounded to millimeters.
    """
    p = _RT90
    phi = math.radians(latitude)
    d_lambda = math.radians(longitude) - p.central_meridian

    sin_phi = math.sin(phi)
    phi_star = phi - sin_phi * math.cos(phi) * (
        p.a + p.b * sin_phi**2 + p.c * sin_phi**4 + p.d * sin_phi**6
    )
    xi_prim = math.atan(math.tan(phi_star) / math.cos(d_lambda))
    eta_prim = math.atanh(math.cos(phi_star) * math.sin(d_lambda))

    xi_sum = xi_prim
    eta_sum = eta_prim
    for k, beta in enumerate(p.beta, start=1):
        xi_sum += beta * math.sin(2 * k * xi_prim) * math.cosh(2 * k * eta_prim)
        eta_sum += beta * math.cos(2 * k * xi_prim) * math.sinh(2 * k * eta_prim)

    northing = p.k0_a_roof * xi_sum + p.false_northing
    easting = p.k0_a_roof * eta_sum + p.false_easting
    return GridPoint(northing=round(northing, 3), easting=round(easting, 3))


def grid_to_geodetic(grid: GridPoint) -> tuple[float, float]:
    """Convert an RT90 grid position to WGS84 (latitude, longitude) in degrees."""
    p = _RT90
    xi = (grid.northing - p.false_northing) / p.k0_a_roof
    eta = (grid.easting - p.false_easting) / p.k0_a_roof

    xi_prim = xi
    eta_prim = eta
    for k, delta in enumerate(p.delta, start=1):
        xi_prim -= delta * math.sin(2 * k * xi) * math.cosh(2 * k * eta)
        eta_prim -= delta * math.cos(2 * k * xi) * math.sinh(2 * k * eta)

    phi_star = math.asin(math.sin(xi_prim) / math.cosh(eta_prim))
    d_lambda = math.atan(math.sinh(eta_prim) / math.cos(xi_prim))

    sin_phi_star = math.sin(phi_star)
    phi = phi_star + sin_phi_star * math.cos(phi_star) * (
        p.a_star
        + p.b_star * sin_phi_star**2
        + p.c_star * sin_phi_star**4
        + p.d_star * sin_phi_star**6
    )
    return math.degrees(phi), math.degrees(p.central_meridian + d_lambda)


def point_to_grid(point: Point) -> GridPoint:
    """Project a micro-degree point onto the RT90 grid."""
    return geodetic_to_grid(point.latitude, point.longitude)


def grid_to_point(grid: GridPoint) -> Point:
    """Convert an RT90 grid position to a micro-degree point."""
    latitude, longitude = grid_to_geodetic(grid)
    return Point.from_degrees(latitude, longitude)
