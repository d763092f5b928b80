from .polygon_io import PolygonIO
