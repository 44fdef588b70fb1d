"""
Simulation Settings

SpreadSettings holds the validated primitive values a run needs. The
defaults reproduce the classic 32x16 terminal piece. Values can come from
a preset, from CLI flags, or from interactive prompts (prompt_settings),
and pydantic rejects anything out of range before a Grid is built.
"""

import numpy as np
from pydantic import BaseModel, Field, ValidationError


class SpreadSettings(BaseModel):
    width: int = Field(default=32, ge=3, description="Grid width in cells, border included")
    height: int = Field(default=16, ge=3, description="Grid height in cells, border included")
    starting_live_cells: int = Field(default=1, ge=0, description="Orphans seeded before the run")
    framerate: int = Field(default=32, ge=1, description="Animated frames per second")
    animate: bool = Field(default=True, description="Show every sweep while running")
    colorshift: int = Field(default=4, ge=0, le=255, description="Max per-channel colour drift")
    spread_chance: float = Field(default=0.5, ge=0.0, le=1.0,
                                 description="Chance a live cell spreads each sweep")
    seed: int | None = Field(default=None, description="Random seed (None = fresh entropy)")

    @property
    def frametime(self):
        """Seconds to pause between animated frames."""
        return 1.0 / self.framerate


def make_rng(seed=None):
    """The single random generator threaded through a run."""
    return np.random.default_rng(seed)


# Prompt text per field, in the order they are asked
PROMPTS = [
    ("width", "Enter Width in pixels"),
    ("height", "Enter Height in pixels"),
    ("starting_live_cells", "Enter the number of Starting Live Cells"),
    ("framerate", "Enter framerate"),
    ("animate", "Animate in the terminal while running?"),
    ("colorshift", "Enter colorshift value"),
    ("spread_chance", "Enter spreadchance (0.0 -> 1.0)"),
]


def parse_yes_no(answer, default):
    answer = answer.strip().lower()
    if answer in ("y", "yes", "true", "1"):
        return True
    if answer in ("n", "no", "false", "0"):
        return False
    return default


def _parse_field(name, answer, default):
    """Convert one prompt answer, falling back to the default on bad input."""
    answer = answer.strip().lower()
    if not answer:
        return default
    try:
        value = type(default)(answer)
        SpreadSettings(**{name: value})
    except (ValueError, ValidationError):
        return default
    return value


def prompt_settings(ask=input, base=None):
    """Ask for each setting on the terminal.

    Blank, unparsable or out-of-range answers keep the default for that
    field.

    Args:
        ask: Callable(prompt) -> str, input() by default
        base: Settings whose values act as defaults (SpreadSettings() if None)
    """
    base = base or SpreadSettings()
    if parse_yes_no(ask("Run with default settings? [Y/n] "), True):
        return base

    values = {}
    for name, text in PROMPTS:
        default = getattr(base, name)
        if isinstance(default, bool):
            suffix = "[Y/n]" if default else "[y/N]"
            values[name] = parse_yes_no(ask(f"{text} {suffix} "), default)
        else:
            values[name] = _parse_field(name, ask(f"{text} [{default}] "), default)
    return base.model_copy(update=values)
