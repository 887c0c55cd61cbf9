"""Minimum spanning trees."""

from .kruskal import MSTResult, kruskal_mst, prim_mst

__all__ = ["MSTResult", "kruskal_mst", "prim_mst"]
