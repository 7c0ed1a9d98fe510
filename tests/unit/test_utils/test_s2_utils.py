# tests/unit/test_utils/test_s2_utils.py
"""
Tests for S2 utilities using s2sphere.

Covers region building, coverings and interior coverings of polygons and
points, and the projection of cells back into GeoJSON features.
"""

import pytest
from s2sphere import Cell, CellId, LatLng
from shapely.geometry import Polygon
from shapely.ops import unary_union

from geokit.core.exceptions import ConfigurationError, GeospatialError
from geokit.schemas.geojson import PointGeometry, PolygonGeometry
from geokit.utils.s2_utils import (
    PointRegion,
    PolygonRegion,
    cell_outline,
    cell_ring,
    cell_to_feature,
    cell_vertices,
    cells_to_feature_collection,
    cover_region,
    geometry_to_region,
    great_circle_ring,
)

# Slack for straight-line cell rings versus geodesic cell edges, in degrees
TOLERANCE = 1e-4


@pytest.fixture
def square(square_ring):
    return PolygonGeometry(coordinates=[square_ring])


def _cell_polygon(cell_id):
    return Polygon([tuple(p) for p in cell_ring(cell_id)])


class TestRegionBuilding:
    """Test conversion of typed geometries into coverable regions."""

    def test_polygon_region(self, square):
        region = geometry_to_region(square)

        assert isinstance(region, PolygonRegion)
        assert region.shape.bounds == pytest.approx((-122.15, 37.40, -122.05, 37.50), abs=TOLERANCE)

    def test_polygon_ring_without_closing_position(self, square_ring):
        region = geometry_to_region(PolygonGeometry(coordinates=[square_ring[:-1]]))

        assert region.shape.area == pytest.approx(0.01, rel=1e-3)

    def test_polygon_holes_are_ignored(self, square_ring):
        hole = [[-122.11, 37.44], [-122.09, 37.44], [-122.09, 37.46], [-122.11, 37.44]]
        region = geometry_to_region(PolygonGeometry(coordinates=[square_ring, hole]))

        assert region.shape.area == pytest.approx(0.01, rel=1e-3)
        assert len(region.shape.interiors) == 0

    def test_point_region(self):
        region = geometry_to_region(PointGeometry(coordinates=(-122.0841, 37.4220)))

        assert isinstance(region, PointRegion)
        assert region.lat_lng.lat().degrees == pytest.approx(37.4220)
        assert region.lat_lng.lng().degrees == pytest.approx(-122.0841)

    def test_self_intersecting_polygon_rejected(self):
        bowtie = [[0, 0], [1, 1], [1, 0], [0, 1], [0, 0]]

        with pytest.raises(GeospatialError, match="invalid polygon"):
            geometry_to_region(PolygonGeometry(coordinates=[bowtie]))

    def test_degenerate_ring_rejected(self):
        with pytest.raises(GeospatialError, match="no area"):
            geometry_to_region(PolygonGeometry(coordinates=[[[0, 0], [1, 1], [0, 0]]]))

    def test_latitude_out_of_range_rejected(self):
        with pytest.raises(GeospatialError, match="latitude"):
            geometry_to_region(PointGeometry(coordinates=(10.0, 95.0)))


class TestPolygonCovering:
    """Test coverings of a polygon."""

    def test_levels_within_window(self, square):
        cells = cover_region(geometry_to_region(square), 8, 12)

        assert len(cells) > 0
        assert all(8 <= cell_id.level() <= 12 for cell_id in cells)

    def test_covering_contains_polygon(self, square):
        polygon = Polygon([tuple(p) for p in square.outer_ring])
        cells = cover_region(geometry_to_region(square), 10, 13)

        union = unary_union([_cell_polygon(cell_id) for cell_id in cells])
        assert union.buffer(TOLERANCE).covers(polygon)

    def test_interior_covering_within_polygon(self, square):
        polygon = Polygon([tuple(p) for p in square.outer_ring])
        cells = cover_region(geometry_to_region(square), 10, 14, interior=True)

        assert len(cells) > 0
        assert all(10 <= cell_id.level() <= 14 for cell_id in cells)
        for cell_id in cells:
            assert polygon.buffer(TOLERANCE).contains(_cell_polygon(cell_id))

    def test_interior_covering_empty_for_coarse_levels(self, square):
        # Level 5 cells are far larger than the 0.1 degree square
        assert cover_region(geometry_to_region(square), 5, 5, interior=True) == []

    def test_finer_levels_produce_more_cells(self, square):
        region = geometry_to_region(square)

        coarse = cover_region(region, 10, 10)
        fine = cover_region(region, 13, 13)

        assert len(coarse) < len(fine)

    def test_max_cells_respected(self, square):
        cells = cover_region(geometry_to_region(square), 1, 30, max_cells=10)

        assert len(cells) <= 10

    def test_cells_unique(self, square):
        cells = cover_region(geometry_to_region(square), 10, 14)

        tokens = [cell_id.to_token() for cell_id in cells]
        assert len(tokens) == len(set(tokens))


class TestGreatCircleEdges:
    """Polygon edges follow great circles, not straight lng/lat lines."""

    # 40 x 10 degree box; its top edge peaks near lat 51.74, its bottom edge near lat 41.76
    WIDE_RING = [[-100, 40], [-60, 40], [-60, 50], [-100, 50], [-100, 40]]

    @pytest.fixture
    def wide(self):
        return PolygonGeometry(coordinates=[self.WIDE_RING])

    @staticmethod
    def _holds(cells, lat, lng):
        leaf = CellId.from_lat_lng(LatLng.from_degrees(lat, lng))
        return any(cell_id.contains(leaf) for cell_id in cells)

    def test_ring_keeps_vertices_and_bulges_poleward(self):
        ring = great_circle_ring(self.WIDE_RING)

        for vertex in self.WIDE_RING[:4]:
            assert tuple(float(v) for v in vertex) in ring
        assert max(lat for _, lat in ring) == pytest.approx(51.74, abs=0.02)

    def test_short_edges_barely_move(self, square_ring):
        ring = great_circle_ring(square_ring)

        assert len(ring) == 4

    def test_covering_reaches_beyond_straight_edge(self, wide):
        cells = cover_region(geometry_to_region(wide), 1, 8)

        assert self._holds(cells, 51.5, -80.0)

    def test_interior_covering_stops_short_of_straight_edge(self, wide):
        cells = cover_region(geometry_to_region(wide), 1, 8, interior=True)

        assert len(cells) > 0
        assert self._holds(cells, 46.0, -80.0)
        assert not self._holds(cells, 41.0, -80.0)


class TestPointCovering:
    """Test coverings of a single point."""

    def test_point_covered_by_one_max_level_cell(self):
        region = PointRegion(37.4220, -122.0841)
        cells = cover_region(region, 1, 30)

        assert len(cells) == 1
        assert cells[0].level() == 30
        assert cells[0].contains(CellId.from_lat_lng(LatLng.from_degrees(37.4220, -122.0841)))

    def test_point_covering_at_fixed_level(self):
        cells = cover_region(PointRegion(37.4220, -122.0841), 12, 12)

        assert len(cells) == 1
        assert cells[0].level() == 12

    def test_point_interior_covering_is_empty(self):
        assert cover_region(PointRegion(37.4220, -122.0841), 1, 30, interior=True) == []


class TestLevelValidation:

    def test_min_above_max(self, square):
        with pytest.raises(ConfigurationError, match="must not exceed"):
            cover_region(geometry_to_region(square), 12, 8)

    @pytest.mark.parametrize("min_level,max_level", [(-1, 5), (1, 31)])
    def test_level_out_of_range(self, square, min_level, max_level):
        with pytest.raises(ConfigurationError, match="between 0 and 30"):
            cover_region(geometry_to_region(square), min_level, max_level)


class TestCellOutline:

    def test_outline_for_ordinary_cell(self):
        cell = Cell(CellId.from_lat_lng(LatLng.from_degrees(37.4, -122.1)).parent(10))
        outline = cell_outline(cell)

        assert outline is not None
        assert outline.is_valid
        assert outline.contains(Polygon([tuple(p) for p in cell_ring(cell.id())]).centroid)

    def test_face_cell_has_no_outline(self):
        face_cell = CellId.from_lat_lng(LatLng.from_degrees(0.0, 0.0)).parent(0)

        assert cell_outline(Cell(face_cell)) is None

    def test_pole_cell_has_no_outline(self):
        cell = Cell(CellId.from_lat_lng(LatLng.from_degrees(90.0, 0.0)).parent(5))

        assert cell_outline(cell) is None


class TestCellToGeoJSON:
    """Test projection of cells into GeoJSON."""

    @pytest.fixture
    def cell_id(self):
        return CellId.from_lat_lng(LatLng.from_degrees(40.7, -74.0)).parent(10)

    def test_ring_is_closed_with_five_positions(self, cell_id):
        ring = cell_ring(cell_id)

        assert len(ring) == 5
        assert ring[0] == ring[-1]
        assert len({tuple(p) for p in ring[:4]}) == 4

    def test_ring_is_lng_lat(self, cell_id):
        ring = cell_ring(cell_id)

        for lng, lat in ring:
            assert -74.5 < lng < -73.5
            assert 40.2 < lat < 41.2

        assert ring == [[lng, lat] for lat, lng in cell_vertices(cell_id)]

    def test_feature_properties(self, cell_id):
        feature = cell_to_feature(cell_id)
        token = cell_id.to_token()

        assert feature.type == "Feature"
        assert feature.geometry.type == "Polygon"
        assert len(feature.geometry.coordinates) == 1
        assert feature.properties == {
            "entity_id": token,
            "labels": {"s2CellToken": token, "s2Level": "10"},
        }

    def test_feature_collection(self, cell_id):
        siblings = [cell_id, cell_id.next(), cell_id.next().next()]
        collection = cells_to_feature_collection(siblings)

        assert collection.type == "FeatureCollection"
        assert [f.properties["entity_id"] for f in collection.features] == [
            c.to_token() for c in siblings
        ]

    def test_token_round_trips_to_cell(self, cell_id):
        feature = cell_to_feature(cell_id)

        assert CellId.from_token(feature.properties["entity_id"]) == cell_id
