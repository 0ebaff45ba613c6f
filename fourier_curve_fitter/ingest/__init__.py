from .readers_points import PointsReader, PointsReaderConfig, drop_nonfinite_points, read_points
from .synthetic import circle_points, demo_curve_points, polygon_points

__all__ = [
    "PointsReader",
    "PointsReaderConfig",
    "drop_nonfinite_points",
    "read_points",
    "circle_points",
    "demo_curve_points",
    "polygon_points",
]
