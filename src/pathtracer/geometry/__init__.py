"""Primitives, the hit record protocol and the bounding volume hierarchy."""
