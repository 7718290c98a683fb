"""Scattering models and textures."""
