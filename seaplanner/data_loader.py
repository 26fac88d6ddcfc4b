"""Land model loading for sea route planning."""

import json
import logging
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Sequence, Tuple
import requests
from rtree import index
from shapely.geometry import shape, LineString, MultiLineString, MultiPoint, Point, Polygon, MultiPolygon
from . import coastlines
from .config import DEFAULT_LAND_DATA, DEFAULT_SAFETY_MARGIN
from .geo_utils import point_in_polygon, point_to_segment_distance
from .interfaces import Coordinate

logger = logging.getLogger(__name__)

BoundingBox = Tuple[float, float, float, float]  # (min_lon, min_lat, max_lon, max_lat)


def _in_box(lon: float, lat: float, box: BoundingBox) -> bool:
    return box[0] <= lon <= box[2] and box[1] <= lat <= box[3]


@dataclass(frozen=True)
class Landmass:
    """One coastline ring with the safety margin of its region."""
    region: str
    margin: float
    ring: Tuple[Coordinate, ...]
    polygon: Polygon

    def edge_distance(self, lon: float, lat: float) -> float:
        """Distance in degrees to the nearest ring edge, closing edge included."""
        ring = self.ring
        return min(
            point_to_segment_distance((lon, lat), ring[i - 1], ring[i])
            for i in range(len(ring))
        )

    def contains(self, lon: float, lat: float) -> bool:
        return point_in_polygon((lon, lat), self.ring)


@dataclass(frozen=True)
class Corridor:
    """A named detour applied when exactly one route end lies in its trigger box."""
    name: str
    trigger: BoundingBox
    via: Tuple[Coordinate, ...]

    def contains(self, coord: Coordinate) -> bool:
        return _in_box(coord[0], coord[1], self.trigger)


class LandModel:
    """Read-only coastline, lane and corridor data with a spatial index.

    Built once and shared by reference; nothing mutates it after
    construction.
    """

    def __init__(
        self,
        landmasses: Sequence[Landmass],
        lanes: Sequence[LineString] = (),
        lane_regions: Sequence[BoundingBox] = (),
        corridors: Sequence[Corridor] = ()
    ):
        self.landmasses: Tuple[Landmass, ...] = tuple(landmasses)
        self.lanes: Tuple[LineString, ...] = tuple(lanes)
        self.lane_regions: Tuple[BoundingBox, ...] = tuple(lane_regions)
        self.corridors: Tuple[Corridor, ...] = tuple(corridors)
        self._idx = self._build_index()
        vertices = [coord for landmass in self.landmasses for coord in landmass.ring]
        self._vertices: Optional[MultiPoint] = MultiPoint(vertices) if vertices else None

    def _build_index(self) -> index.Index:
        """Index every landmass by its bounds grown by its margin."""
        logger.debug(f"Building spatial index for {len(self.landmasses)} landmasses")
        idx = index.Index()
        for i, landmass in enumerate(self.landmasses):
            min_x, min_y, max_x, max_y = landmass.polygon.bounds
            m = landmass.margin
            idx.insert(i, (min_x - m, min_y - m, max_x + m, max_y + m))
        return idx

    def candidates(self, lon: float, lat: float) -> List[Landmass]:
        """Landmasses whose margin-grown bounds contain the point."""
        return [self.landmasses[i] for i in sorted(self._idx.intersection((lon, lat, lon, lat)))]

    def in_lane_region(self, lon: float, lat: float) -> bool:
        return any(_in_box(lon, lat, box) for box in self.lane_regions)

    def near_lane(self, lon: float, lat: float, tolerance: float) -> bool:
        point = Point(lon, lat)
        return any(lane.distance(point) < tolerance for lane in self.lanes)

    def near_shore(self, lon: float, lat: float, distance: float) -> bool:
        """True if any coastline vertex lies closer than distance."""
        if self._vertices is None:
            return False
        return self._vertices.distance(Point(lon, lat)) < distance

    def corridors_for(self, start: Coordinate, end: Coordinate) -> List[Tuple[Corridor, bool]]:
        """Corridors separating start from end, in travel order.

        Each entry pairs a corridor with whether its via points must be
        reversed (the destination is the end inside the trigger box).
        Corridors left from the start come first in table order, then
        corridors entered at the end in reverse table order.
        """
        leaving = [(c, False) for c in self.corridors if c.contains(start) and not c.contains(end)]
        entering = [(c, True) for c in reversed(self.corridors) if c.contains(end) and not c.contains(start)]
        return leaving + entering


class LandModelLoader:
    """Class to load land model data."""

    def __init__(self):
        """Initialize an empty loader."""
        self.landmasses: List[Landmass] = []
        self.lanes: List[LineString] = []
        self.lane_regions: List[BoundingBox] = []
        self.corridors: List[Corridor] = []

    def build(self) -> LandModel:
        model = LandModel(self.landmasses, self.lanes, self.lane_regions, self.corridors)
        logger.info(f"Land model ready: {len(model.landmasses)} landmasses, "
                    f"{len(model.lanes)} lanes, {len(model.corridors)} corridors")
        return model

    def load_default(self) -> LandModel:
        """Build the land model from the built-in coastline tables."""
        logger.debug("Loading built-in coastline tables")
        for region, (margin, rings) in coastlines.LAND_REGIONS.items():
            self.add_landmasses(region, margin, rings)
        self.lanes.extend(LineString(lane) for lane in coastlines.SHIPPING_LANES)
        self.lane_regions.extend(tuple(box) for box in coastlines.LANE_REGIONS)
        for name, (trigger, via) in coastlines.CORRIDORS.items():
            self.corridors.append(Corridor(name, tuple(trigger), tuple(tuple(p) for p in via)))
        return self.build()

    def load_data(self, url: str = None) -> LandModel:
        """Load land model data from a GeoJSON URL.

        Args:
            url: URL to the GeoJSON data. If None, uses the configured URL,
                or the built-in tables when none is configured.
        """
        if not url:
            url = DEFAULT_LAND_DATA
        if not url:
            logger.debug("No URL provided or configured, using built-in coastlines")
            return self.load_default()

        logger.info(f"Loading land data from {url}")

        try:
            response = requests.get(url)
            response.raise_for_status()
            data = json.loads(response.content)

            logger.debug(f"Retrieved data with {len(data['features'])} features")
            self._process_features(data['features'])
        except (requests.RequestException, json.JSONDecodeError) as e:
            logger.error(f"Failed to load land data: {str(e)}")
            raise
        return self.build()

    def load_file(self, path: str) -> LandModel:
        """Load land model data from a local GeoJSON file."""
        logger.info(f"Loading land data from {path}")
        try:
            with open(path, 'r', encoding='utf-8') as fh:
                data = json.load(fh)
        except (OSError, json.JSONDecodeError) as e:
            logger.error(f"Failed to load land data: {str(e)}")
            raise
        self._process_features(data['features'])
        return self.build()

    @classmethod
    def from_tables(
        cls,
        landmasses: Iterable[Sequence[Coordinate]],
        margin: float = DEFAULT_SAFETY_MARGIN,
        lanes: Iterable[Sequence[Coordinate]] = (),
        lane_regions: Iterable[BoundingBox] = (),
        corridors: Optional[Dict[str, Tuple[BoundingBox, Sequence[Coordinate]]]] = None,
        region: str = 'custom'
    ) -> LandModel:
        """Build a land model from plain coordinate lists."""
        loader = cls()
        loader.add_landmasses(region, margin, landmasses)
        loader.lanes.extend(LineString(lane) for lane in lanes)
        loader.lane_regions.extend(tuple(box) for box in lane_regions)
        for name, (trigger, via) in (corridors or {}).items():
            loader.corridors.append(Corridor(name, tuple(trigger), tuple(tuple(p) for p in via)))
        return loader.build()

    def add_landmasses(self, region: str, margin: float, rings: Iterable[Sequence[Coordinate]]) -> None:
        for ring in rings:
            coords = tuple((float(lon), float(lat)) for lon, lat in ring)
            if len(coords) > 1 and coords[0] == coords[-1]:
                coords = coords[:-1]
            if len(coords) < 3:
                logger.warning(f"Skipping {region} ring with {len(coords)} vertices")
                continue
            self.landmasses.append(Landmass(region, margin, coords, Polygon(coords)))

    def _process_features(self, features: List[Dict]) -> None:
        """Process GeoJSON features into landmasses, lanes, lane regions and corridors.

        Args:
            features: List of GeoJSON features with a 'kind' property
        """
        logger.debug(f"Processing {len(features)} features")

        for feature in features:
            props = feature.get('properties') or {}
            kind = props.get('kind', 'landmass')
            geom = shape(feature['geometry'])

            if kind == 'landmass':
                polygons = list(geom.geoms) if isinstance(geom, MultiPolygon) else [geom]
                self.add_landmasses(
                    props.get('region', 'custom'),
                    float(props.get('margin', DEFAULT_SAFETY_MARGIN)),
                    [list(p.exterior.coords) for p in polygons if isinstance(p, Polygon)]
                )
            elif kind == 'lane':
                if isinstance(geom, MultiLineString):
                    self.lanes.extend(geom.geoms)
                elif isinstance(geom, LineString):
                    self.lanes.append(geom)
            elif kind == 'lane_region':
                self.lane_regions.append(tuple(geom.bounds))
            elif kind == 'corridor':
                self.corridors.append(Corridor(
                    props.get('name', f"corridor_{len(self.corridors) + 1}"),
                    tuple(props['trigger']),
                    tuple(tuple(c) for c in geom.coords)
                ))
            else:
                logger.debug(f"Ignoring feature of kind {kind}")

        logger.debug(f"Processed features: {len(self.landmasses)} landmasses, "
                     f"{len(self.lanes)} lanes, {len(self.corridors)} corridors")


_default_model: Optional[LandModel] = None


def default_land_model() -> LandModel:
    """The configured (or built-in) land model, loaded once per process."""
    global _default_model
    if _default_model is None:
        _default_model = LandModelLoader().load_data()
    return _default_model
