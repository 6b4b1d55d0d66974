"""Voxel ray casting for VXL block maps, with a pygame viewer."""

__version__ = "0.1.0"