"""
S2 geometry utilities using s2sphere.

Turns typed GeoJSON geometries into regions the s2sphere RegionCoverer can
work with, computes coverings, and projects the resulting cells back into
GeoJSON polygon features.
"""
import math
from typing import List, Optional, Sequence, Tuple, Union
import logging

from s2sphere import Cell, CellId, LatLng, LatLngRect, RegionCoverer
from shapely.geometry import Polygon as ShapelyPolygon
from shapely.prepared import prep
from shapely.validation import explain_validity

from geokit.core.constants import (
    S2_MIN_LEVEL,
    S2_MAX_LEVEL,
    DEFAULT_MAX_CELLS,
    CELL_EDGE_SEGMENTS,
    POLYGON_EDGE_STEP,
)
from geokit.core.exceptions import ConfigurationError, GeospatialError, UnsupportedGeometryError
from geokit.schemas.geojson import (
    CellLabels,
    CellProperties,
    Feature,
    FeatureCollection,
    PointGeometry,
    PolygonGeometry,
)

logger = logging.getLogger(__name__)

# Cells reaching this close to a pole have no usable lng/lat outline
POLE_LATITUDE_LIMIT = 89.9999


def _check_position(lng: float, lat: float) -> None:
    if not -90.0 <= lat <= 90.0:
        raise GeospatialError(f"latitude out of range: {lat}")
    if not -180.0 <= lng <= 180.0:
        raise GeospatialError(f"longitude out of range: {lng}")


def _to_unit_vector(lat: float, lng: float) -> Tuple[float, float, float]:
    phi, theta = math.radians(lat), math.radians(lng)
    cos_phi = math.cos(phi)
    return (cos_phi * math.cos(theta), cos_phi * math.sin(theta), math.sin(phi))


def _to_lng_lat(v: Tuple[float, float, float]) -> Tuple[float, float]:
    x, y, z = v
    return (math.degrees(math.atan2(y, x)), math.degrees(math.atan2(z, math.hypot(x, y))))


def _interpolate(a, b, t: float) -> Tuple[float, float, float]:
    # Normalization is unnecessary; _to_lng_lat only uses ratios.
    return tuple((1.0 - t) * p + t * q for p, q in zip(a, b))


def cell_outline(cell: Cell, segments: int = CELL_EDGE_SEGMENTS) -> Optional[ShapelyPolygon]:
    """
    Outline of a cell in lng/lat, with geodesic edges densified.

    Returns None for cells that do not map onto the lng/lat plane: face
    cells, cells touching a pole, and cells crossing the antimeridian.
    """
    if cell.level() == 0:
        return None

    corners = []
    for k in range(4):
        lat_lng = LatLng.from_point(cell.get_vertex(k))
        corners.append(_to_unit_vector(lat_lng.lat().degrees, lat_lng.lng().degrees))

    outline = []
    for k in range(4):
        a, b = corners[k], corners[(k + 1) % 4]
        for step in range(segments):
            outline.append(_to_lng_lat(_interpolate(a, b, step / segments)))

    lngs = [p[0] for p in outline]
    if max(abs(p[1]) for p in outline) >= POLE_LATITUDE_LIMIT:
        return None
    if max(lngs) - min(lngs) > 180.0:
        return None

    return ShapelyPolygon(outline)


def great_circle_ring(ring: Sequence[Sequence[float]],
                      step: float = POLYGON_EDGE_STEP) -> List[Tuple[float, float]]:
    """
    Densify a [lng, lat] ring so each edge follows its great circle.

    The result is open (no repeated closing position). Edges spanning
    180 degrees of longitude or more have no unique great circle in
    lng/lat and are kept as given.
    """
    points = [(float(p[0]), float(p[1])) for p in ring]
    if len(points) > 1 and points[0] == points[-1]:
        points = points[:-1]

    densified = []
    for k, a in enumerate(points):
        b = points[(k + 1) % len(points)]
        densified.append(a)
        if abs(b[0] - a[0]) >= 180.0:
            continue

        va, vb = _to_unit_vector(a[1], a[0]), _to_unit_vector(b[1], b[0])
        dot = max(-1.0, min(1.0, sum(p * q for p, q in zip(va, vb))))
        segments = int(math.ceil(math.degrees(math.acos(dot)) / step))
        for s in range(1, segments):
            densified.append(_to_lng_lat(_interpolate(va, vb, s / segments)))

    return densified


class PolygonRegion:
    """
    Coverable region for the outer ring of a GeoJSON polygon.

    Vertices are joined along great circles, as on the sphere. Cells
    are screened against the polygon's lat/lng rectangle and then tested
    exactly with shapely. Cells without a planar outline are kept as
    candidates but never counted as contained, so coverings stay
    supersets and interior coverings stay subsets of the polygon.
    """

    def __init__(self, ring: Sequence[Sequence[float]]):
        for position in ring:
            _check_position(position[0], position[1])

        outline = great_circle_ring(ring)
        if len(set(outline)) < 3:
            raise GeospatialError("polygon has no area")

        shape = ShapelyPolygon(outline)
        if not shape.is_valid:
            raise GeospatialError(f"invalid polygon: {explain_validity(shape)}")
        if shape.area == 0:
            raise GeospatialError("polygon has no area")

        self.shape = shape
        self._prepared = prep(shape)
        self._outline_cache: Tuple[Optional[int], Optional[ShapelyPolygon]] = (None, None)

        min_lng, min_lat, max_lng, max_lat = shape.bounds
        if max_lng - min_lng > 180.0:
            # from_point_pair would pick the short way round the globe
            self._rect = LatLngRect.full()
        else:
            self._rect = LatLngRect.from_point_pair(
                LatLng.from_degrees(min_lat, min_lng),
                LatLng.from_degrees(max_lat, max_lng),
            )

    def _outline(self, cell: Cell) -> Optional[ShapelyPolygon]:
        key = cell.id().id()
        cached_key, cached = self._outline_cache
        if cached_key != key:
            cached = cell_outline(cell)
            self._outline_cache = (key, cached)
        return cached

    def get_cap_bound(self):
        return self._rect.get_cap_bound()

    def get_rect_bound(self) -> LatLngRect:
        return self._rect

    def may_intersect(self, cell: Cell) -> bool:
        if not self._rect.may_intersect(cell):
            return False
        outline = self._outline(cell)
        if outline is None:
            return True
        return self._prepared.intersects(outline)

    def contains(self, cell: Cell) -> bool:
        outline = self._outline(cell)
        if outline is None:
            return False
        return self._prepared.contains(outline)


class PointRegion:
    """Coverable region for a single point; it intersects only the cells holding it."""

    def __init__(self, lat: float, lng: float):
        _check_position(lng, lat)
        self.lat_lng = LatLng.from_degrees(lat, lng)
        self._leaf = CellId.from_lat_lng(self.lat_lng)
        self._rect = LatLngRect.from_point_pair(self.lat_lng, self.lat_lng)

    def get_cap_bound(self):
        return self._rect.get_cap_bound()

    def get_rect_bound(self) -> LatLngRect:
        return self._rect

    def may_intersect(self, cell: Cell) -> bool:
        return cell.id().contains(self._leaf)

    def contains(self, cell: Cell) -> bool:
        return False


Region = Union[PolygonRegion, PointRegion]


def polygon_to_region(polygon: PolygonGeometry) -> PolygonRegion:
    """Build a region from a polygon's outer ring; holes are ignored."""
    return PolygonRegion(polygon.outer_ring)


def point_to_region(point: PointGeometry) -> PointRegion:
    """Build a region from a [lng, lat] point."""
    return PointRegion(point.lat, point.lng)


def geometry_to_region(geometry: Union[PointGeometry, PolygonGeometry]) -> Region:
    """
    Build the coverable region for a typed geometry.

    Raises:
        UnsupportedGeometryError: If the geometry is neither Point nor Polygon
        GeospatialError: If the coordinates do not form a usable region
    """
    if isinstance(geometry, PolygonGeometry):
        return polygon_to_region(geometry)
    if isinstance(geometry, PointGeometry):
        return point_to_region(geometry)
    raise UnsupportedGeometryError(
        f"unsupported geometry {getattr(geometry, 'type', None)!r}",
        geometry_type=getattr(geometry, 'type', None),
    )


def validate_level_range(min_level: int, max_level: int) -> None:
    """
    Check a level window against the S2 hierarchy.

    Raises:
        ConfigurationError: If either level is outside 0..30 or min exceeds max
    """
    for name, level in (("min", min_level), ("max", max_level)):
        if not S2_MIN_LEVEL <= level <= S2_MAX_LEVEL:
            raise ConfigurationError(
                f"{name} level must be between {S2_MIN_LEVEL} and {S2_MAX_LEVEL}, got {level}"
            )
    if min_level > max_level:
        raise ConfigurationError(
            f"min level ({min_level}) must not exceed max level ({max_level})"
        )


def cover_region(
    region: Region,
    min_level: int,
    max_level: int,
    interior: bool = False,
    max_cells: int = DEFAULT_MAX_CELLS,
) -> List[CellId]:
    """
    Compute the S2 covering of a region.

    Args:
        region: Region built by geometry_to_region
        min_level: Coarsest cell level allowed
        max_level: Finest cell level allowed
        interior: Only return cells fully contained by the region
        max_cells: Cap on the number of cells

    Returns:
        List of CellId, ordered as the coverer returns them
    """
    validate_level_range(min_level, max_level)

    coverer = RegionCoverer()
    coverer.min_level = min_level
    coverer.max_level = max_level
    coverer.max_cells = max_cells

    if interior:
        covering = coverer.get_interior_covering(region)
    else:
        covering = coverer.get_covering(region)

    cell_ids = list(covering)
    logger.debug(
        f"{'Interior covering' if interior else 'Covering'} at levels "
        f"{min_level}-{max_level}: {len(cell_ids)} cells"
    )
    return cell_ids


def cell_vertices(cell_id: CellId) -> List[Tuple[float, float]]:
    """
    Corner vertices of a cell as (lat, lng) degrees, ring closed.

    Example:
        >>> vertices = cell_vertices(CellId.from_token("89c25"))
        >>> len(vertices)
        5
    """
    cell = Cell(cell_id)

    vertices = []
    for k in range(4):
        lat_lng = LatLng.from_point(cell.get_vertex(k))
        vertices.append((lat_lng.lat().degrees, lat_lng.lng().degrees))

    # Close the ring
    vertices.append(vertices[0])

    return vertices


def cell_ring(cell_id: CellId) -> List[List[float]]:
    """Closed GeoJSON ring for a cell, positions in [lng, lat] order."""
    return [[lng, lat] for lat, lng in cell_vertices(cell_id)]


def cell_to_feature(cell_id: CellId) -> Feature:
    """Polygon feature for a cell, labelled with its token and level."""
    token = cell_id.to_token()
    properties = CellProperties(
        entity_id=token,
        labels=CellLabels(s2_cell_token=token, s2_level=str(cell_id.level())),
    )
    return Feature.with_properties(PolygonGeometry(coordinates=[cell_ring(cell_id)]), properties)


def cells_to_feature_collection(cell_ids: Sequence[CellId]) -> FeatureCollection:
    return FeatureCollection(features=[cell_to_feature(cell_id) for cell_id in cell_ids])
