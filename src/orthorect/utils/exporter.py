import json
import logging
import os

from shapely.geometry import mapping

logger = logging.getLogger(__name__)


class RectangleExporter:
    """
    Exports decomposition results as a GeoJSON FeatureCollection.
    """

    @staticmethod
    def to_feature_collection(rectangles, properties=None) -> dict:
        """
        :param rectangles: list of rectangular shapely Polygons
        :param properties: optional dict merged into every feature's properties
        """
        features = []
        for i, rect in enumerate(rectangles):
            props = {"index": i, "area": rect.area}
            if properties:
                props.update(properties)
            features.append({
                "type": "Feature",
                "geometry": mapping(rect),
                "properties": props,
            })

        return {"type": "FeatureCollection", "features": features}

    @staticmethod
    def save_geojson(filename, rectangles, properties=None):
        directory = os.path.dirname(filename)
        if directory:
            os.makedirs(directory, exist_ok=True)

        collection = RectangleExporter.to_feature_collection(rectangles, properties)
        with open(filename, 'w') as f:
            json.dump(collection, f, indent=4)
        logger.info("Exported %d rectangles to: %s", len(rectangles), filename)
