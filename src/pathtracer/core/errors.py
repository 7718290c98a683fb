# core/errors.py

class InvalidInputError(ValueError):
    """
    Raised while building a scene from input that cannot be rendered:
    an empty primitive list, a polygon with fewer than three vertices,
    a non-positive medium density or invalid render settings.
    """
