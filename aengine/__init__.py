"""Quaternion math, dampers, debug-shape geometry and mesh records for a small 3D engine."""

__version__ = "0.1.0"

__all__ = ["dampers", "mathutils", "meshdata", "visgeometry"]