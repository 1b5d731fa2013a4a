"""Bounding boxes, broad-phase pair finding and polygon partitioning for 2D physics."""

__version__ = "0.1.0"

__all__ = [
    "aabb",
    "broadphase",
    "earclip",
    "holes",
    "monotone",
    "optimal_convex",
    "optimal_triangulation",
    "polygon",
    "spatial_hash",
]