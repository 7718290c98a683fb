# core/uv.py
from typing import Tuple

class UV:
    """
    Surface parameters (u, v) at a hit point, used for texture lookups.
    """
    __slots__ = ("u", "v")

    def __init__(self, u: float, v: float):
        self.u = u
        self.v = v

    def wrapped(self) -> Tuple[float, float]:
        """Both coordinates folded into [0, 1) so textures tile."""
        return self.u % 1.0, self.v % 1.0

    def __repr__(self) -> str:
        return f"UV({self.u}, {self.v})"
