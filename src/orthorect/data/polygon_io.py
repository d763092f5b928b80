import json
import logging
import os

from shapely.geometry import Polygon

logger = logging.getLogger(__name__)


class PolygonIO:
    """
    Save and load polygons in a simple JSON format:
    {"type": "Polygon", "coordinates": [[x, y], ...], "holes": [[[x, y], ...], ...]}
    """

    @staticmethod
    def save_polygon(polygon: Polygon, filename: str):
        """Saves the polygon coordinates to a JSON file."""
        directory = os.path.dirname(filename)
        if directory:
            os.makedirs(directory, exist_ok=True)

        data = {
            "type": "Polygon",
            "coordinates": [list(c[:2]) for c in polygon.exterior.coords],
        }
        if len(polygon.interiors) > 0:
            data["holes"] = [[list(c[:2]) for c in ring.coords] for ring in polygon.interiors]

        with open(filename, 'w') as f:
            json.dump(data, f, indent=4)
        logger.info("Polygon saved to: %s", filename)

    @staticmethod
    def load_polygon(filename: str) -> Polygon:
        """Loads a polygon from a JSON file."""
        if not os.path.exists(filename):
            raise FileNotFoundError(f"File not found: {filename}")

        with open(filename, 'r') as f:
            data = json.load(f)

        if not isinstance(data, dict) or "coordinates" not in data:
            raise ValueError(f"{filename} is not a polygon file (missing 'coordinates').")
        if data.get("type", "Polygon") != "Polygon":
            raise ValueError(f"{filename} contains a {data['type']}, expected a Polygon.")

        logger.info("Polygon loaded from: %s", filename)
        return Polygon(data["coordinates"], data.get("holes") or None)
