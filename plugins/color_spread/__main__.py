"""
Color Spread - Entry Point

Usage:
    python -m color_spread [preset] [options]

Examples:
    python -m color_spread
    python -m color_spread mosaic --seed 7
    python -m color_spread poster --save poster.png --scale 2
    python -m color_spread --size 80x40 --colorshift 12 --spread 0.3
    python -m color_spread --interactive

Options:
    --size WxH          Grid size in cells, border included
    --cells N           Number of starting live cells
    --colorshift N      Max per-channel colour drift (0-255)
    --spread P          Spread chance per sweep (0.0-1.0)
    --fps N             Animation framerate
    --seed N            Random seed for a reproducible piece
    --animate           Draw every sweep in the terminal
    --background        Run without drawing until finished
    --window            Run in a pygame window instead of the terminal
    --preview           Print the final image in the terminal
    --save FILE         Save the final image (PNG)
    --scale N           Upscale factor for --save
    --interactive       Ask for settings and output choices
    --list              List presets

Use --list to see all available presets.
"""

import sys
import time

from pydantic import ValidationError

from .config import SpreadSettings, make_rng, prompt_settings, parse_yes_no
from .grid import Grid
from .presets import PRESET_ORDER, list_presets, preset_settings
from .render import TerminalAnimator, clear_screen, show
from .simulation import Simulation, RunMode
from .export import save_image


def _print_presets():
    print("\nAvailable presets:")
    for key, name, desc in list_presets():
        print(f"    {key:12s} {name:10s} {desc}")
    print()


def build_grid(settings, rng):
    """Empty grid from settings, seeded with its starting orphans."""
    grid = Grid(settings.width, settings.height,
                colorshift=settings.colorshift,
                spread_chance=settings.spread_chance)
    grid.spawn_orphans(settings.starting_live_cells, rng)
    return grid


def run_terminal(settings, rng, stream=None):
    """Seed and run a simulation, animating in the terminal if asked."""
    grid = build_grid(settings, rng)
    if settings.animate:
        sim = Simulation(grid, rng, frametime=settings.frametime,
                         on_frame=TerminalAnimator(stream))
        sim.run(RunMode.ANIMATED)
    else:
        print("[spread] Running in background")
        sim = Simulation(grid, rng)
        sim.run(RunMode.BACKGROUND)
    return sim


def _save(grid, filename, scale):
    img_start = time.perf_counter()
    try:
        save_image(grid, filename, scale=scale)
    except (OSError, ValueError) as e:
        print(f"[spread] Could not save {filename}: {e}")
        return False
    print(f"[spread] Saved {filename} in {time.perf_counter() - img_start:.3f}s")
    return True


def main(argv=None, ask=input):
    args = sys.argv[1:] if argv is None else list(argv)
    overrides = {}
    preset = "classic"
    window = False
    preview = False
    interactive = False
    save_path = None
    scale = 1

    i = 0
    try:
        while i < len(args):
            arg = args[i]
            has_value = i + 1 < len(args)
            if arg == "--size" and has_value:
                w, h = args[i + 1].lower().split("x")
                overrides["width"], overrides["height"] = int(w), int(h)
                i += 2
            elif arg == "--cells" and has_value:
                overrides["starting_live_cells"] = int(args[i + 1])
                i += 2
            elif arg == "--colorshift" and has_value:
                overrides["colorshift"] = int(args[i + 1])
                i += 2
            elif arg == "--spread" and has_value:
                overrides["spread_chance"] = float(args[i + 1])
                i += 2
            elif arg == "--fps" and has_value:
                overrides["framerate"] = int(args[i + 1])
                i += 2
            elif arg == "--seed" and has_value:
                overrides["seed"] = int(args[i + 1])
                i += 2
            elif arg == "--save" and has_value:
                save_path = args[i + 1]
                i += 2
            elif arg == "--scale" and has_value:
                scale = int(args[i + 1])
                i += 2
            elif arg == "--animate":
                overrides["animate"] = True
                i += 1
            elif arg == "--background":
                overrides["animate"] = False
                i += 1
            elif arg == "--window":
                window = True
                i += 1
            elif arg == "--preview":
                preview = True
                i += 1
            elif arg == "--interactive":
                interactive = True
                i += 1
            elif arg == "--list":
                _print_presets()
                return 0
            elif arg in ("--help", "-h"):
                print(__doc__)
                return 0
            elif arg in PRESET_ORDER:
                preset = arg
                i += 1
            else:
                print(f"Unknown argument: {arg}")
                print("Use --help to see available options")
                return 2
    except ValueError:
        print(f"Bad value for {args[i]}: {args[i + 1]}")
        return 2

    try:
        settings = SpreadSettings(**{**preset_settings(preset), **overrides})
    except ValidationError as e:
        print(f"Invalid settings:\n{e}")
        return 2

    if interactive:
        settings = prompt_settings(ask=ask, base=settings)

    rng = make_rng(settings.seed)

    if window:
        from .viewer import Viewer
        grid = Viewer(settings, rng).run()
    else:
        start = time.perf_counter()
        sim = run_terminal(settings, rng)
        grid = sim.grid
        if settings.animate:
            clear_screen()
        print(f"Finished in {time.perf_counter() - start:.3f}s "
              f"({sim.sweeps} sweeps, {sim.outcome.value})")

    if interactive:
        preview = parse_yes_no(ask("Preview final image in the terminal? [y/N] "), False)
        if parse_yes_no(ask("Save final animation frame as an image? [y/N] "), False):
            save_path = ask("Enter a filename for your picture [image.png] ").strip() or "image.png"

    if preview:
        show(grid)

    if save_path:
        if not _save(grid, save_path, scale):
            return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
