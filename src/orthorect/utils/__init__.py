from .exporter import RectangleExporter
