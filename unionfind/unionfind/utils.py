import numpy as np

from .errors import ElementError


def to_element(x, allow_integral_float: bool = False) -> int:
    """Convert an identifier to a plain Python int element.

    numpy integer scalars become ``int`` so ``np.int64(3)`` and ``3`` name the
    same element. With ``allow_integral_float`` whole-valued floats are
    accepted too, which is what pandas hands back for an int column that was
    upcast.
    """
    if isinstance(x, np.integer):
        return x.item()
    if isinstance(x, (bool, np.bool_)):
        raise ElementError(x)
    if isinstance(x, int):
        # IntEnum and other subclasses collapse to the plain value
        return x if type(x) is int else int(x)
    if allow_integral_float and isinstance(x, (float, np.floating)):
        if np.isfinite(x) and float(x).is_integer():
            return int(x)
        raise ElementError(x, f"Element must be a whole number, got {x!r}")
    raise ElementError(x)
