"""
Colour Model for Spreading Cells

A colour is a plain (r, g, b) tuple of ints in [0, 255]. When a cell
spreads, its child inherits a copy of the parent colour with each
channel nudged by a random amount up to ``colorshift``. Channels
saturate at 0 and 255 instead of wrapping.

Every function takes the random generator explicitly so that a seeded
``numpy.random.Generator`` reproduces a run draw for draw.
"""


def clamp_channel(value):
    """Saturate a channel value to the 8-bit range."""
    return max(0, min(255, int(value)))


def random_color(rng):
    """Three independent uniform bytes."""
    r, g, b = rng.integers(0, 256, size=3)
    return (int(r), int(g), int(b))


def shift_channel(value, shift_max, rng):
    """Nudge one channel up or down by a random amount below shift_max.

    Args:
        value: Channel value in [0, 255]
        shift_max: Exclusive upper bound of the perturbation magnitude.
            Zero (or less) means no perturbation and consumes no draws.
        rng: numpy Generator

    Returns:
        The shifted channel, clamped to [0, 255]
    """
    if shift_max <= 0:
        return value
    r = int(rng.integers(0, shift_max))
    if rng.integers(0, 2):
        return clamp_channel(value - r)
    return clamp_channel(value + r)


def shift_color(color, shift_max, rng):
    """Apply shift_channel to red, green and blue with fresh draws each."""
    return tuple(shift_channel(int(c), shift_max, rng) for c in color)

