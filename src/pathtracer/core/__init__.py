"""Vectors, rays, bounding boxes, sampling helpers and errors."""
