"""
Spread Simulation Presets

Each preset is a bundle of SpreadSettings values known to give a
particular look. "classic" matches the built-in defaults.
"""

PRESETS = {
    "classic": {
        "name": "Classic",
        "description": "Small terminal piece, one seed, gentle drift",
        "width": 32, "height": 16, "starting_live_cells": 1,
        "colorshift": 4, "spread_chance": 0.5, "framerate": 32,
    },
    "mosaic": {
        "name": "Mosaic",
        "description": "Many seeds meeting in hard-edged patches",
        "width": 64, "height": 32, "starting_live_cells": 12,
        "colorshift": 2, "spread_chance": 0.6, "framerate": 32,
    },
    "nebula": {
        "name": "Nebula",
        "description": "Few seeds, strong drift, soft cloudy gradients",
        "width": 96, "height": 48, "starting_live_cells": 3,
        "colorshift": 10, "spread_chance": 0.35, "framerate": 48,
    },
    "lichen": {
        "name": "Lichen",
        "description": "Slow, ragged growth fronts",
        "width": 64, "height": 32, "starting_live_cells": 5,
        "colorshift": 6, "spread_chance": 0.15, "framerate": 24,
    },
    "poster": {
        "name": "Poster",
        "description": "Large image for PNG export, best run in background",
        "width": 512, "height": 512, "starting_live_cells": 8,
        "colorshift": 5, "spread_chance": 0.5, "framerate": 60,
        "animate": False,
    },
}

PRESET_ORDER = ["classic", "mosaic", "nebula", "lichen", "poster"]

# Keys that are display metadata rather than settings
META_KEYS = ("name", "description")


def get_preset(name):
    """Get a preset by name. Returns None if not found."""
    return PRESETS.get(name)


def preset_settings(name):
    """Settings values of a preset, without its display metadata."""
    preset = get_preset(name)
    if preset is None:
        raise KeyError(f"Unknown preset: {name!r}. Available: {PRESET_ORDER}")
    return {k: v for k, v in preset.items() if k not in META_KEYS}


def list_presets():
    """Return list of (key, name, description) for presets."""
    return [(k, PRESETS[k]["name"], PRESETS[k]["description"])
            for k in PRESET_ORDER if k in PRESETS]
