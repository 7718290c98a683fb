"""Radiance integrator, thread-parallel image renderer and image output."""
