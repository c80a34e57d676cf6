"""I/O utilities for cypoints."""

from .pointcloud import points_array, write_json, write_ply, write_xyz

__all__ = ['points_array', 'write_xyz', 'write_ply', 'write_json']
