#!/usr/bin/env python3
"""
Colour Wheel - Command Line Interface

Entry point for the colourwheel package.
"""

import argparse
import logging
import sys

from colourwheel.__version__ import __version__


def _setup_logging(verbose=0):
    """Configure logging from -v count (filter out noisy PIL)."""
    if verbose >= 2:
        logging.basicConfig(level=logging.DEBUG, format='[%(levelname)s] %(name)s: %(message)s')
        logging.getLogger('PIL').setLevel(logging.WARNING)
    elif verbose == 1:
        logging.basicConfig(level=logging.INFO, format='[%(levelname)s] %(message)s')
    else:
        logging.basicConfig(level=logging.WARNING)


def _add_wheel_options(parser):
    """Options shared by every command that builds a wheel."""
    parser.add_argument("--radius", type=float, help="Outer radius in px (default 200)")
    parser.add_argument("--line-width", type=float, help="Ring thickness in px (default 50)")
    parser.add_argument("--padding", type=float, help="Gap between rings in px (default 0)")
    parser.add_argument("--shades", type=int, dest="shade_count",
                        help="Number of shades in the inner ring (default 16)")
    parser.add_argument("--rgb-object", action="store_true",
                        help="Report selections as r/g/b values instead of 'rgb()' strings")


def _wheel_config(args):
    """Build a WheelConfig from saved settings plus command-line overrides."""
    from colourwheel.conf import settings

    overrides = {
        'radius': getattr(args, 'radius', None),
        'line_width': getattr(args, 'line_width', None),
        'padding': getattr(args, 'padding', None),
        'shade_count': getattr(args, 'shade_count', None),
    }
    if getattr(args, 'rgb_object', False):
        overrides['use_string_format'] = False
    return settings.wheel_config(**overrides)


def main():
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        prog="colourwheel",
        description="Radial hue/shade colour picker",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    colourwheel gui                           Launch the picker window
    colourwheel render wheel.png              Render the hue ring
    colourwheel render out.png --click 287 351 --click 111 288
                                              Pick a hue, then a shade
    colourwheel shades '#ff0000' --count 8    Print a shade ramp
    colourwheel config --set shade_count 8    Change a saved default
        """
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}"
    )
    parser.add_argument(
        "-v", "--verbose",
        action="count",
        default=0,
        help="Increase verbosity (-v, -vv)"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # GUI command
    gui_parser = subparsers.add_parser("gui", help="Launch graphical picker")
    gui_parser.add_argument("--dynamic-cursor", action="store_true",
                            help="Show a crosshair over selectable rings")
    _add_wheel_options(gui_parser)

    # Render command
    render_parser = subparsers.add_parser("render", help="Render the wheel to an image")
    render_parser.add_argument("output", help="Output image path (e.g. wheel.png)")
    render_parser.add_argument("--click", nargs=2, type=float, action="append",
                               metavar=("X", "Y"), default=[],
                               help="Click at surface coordinates (repeatable)")
    _add_wheel_options(render_parser)

    # Shades command
    shades_parser = subparsers.add_parser("shades", help="Print the shade ramp for a colour")
    shades_parser.add_argument("colour", help="Base colour (e.g. ff0000, '#f00', 'rgb(255,0,0)')")
    shades_parser.add_argument("--count", "-n", type=int, default=None,
                               help="Number of shades (default: saved shade_count)")

    # Config command
    config_parser = subparsers.add_parser("config", help="Show or change saved wheel defaults")
    config_parser.add_argument("--set", nargs=2, metavar=("KEY", "VALUE"),
                               help="Persist a wheel option")
    config_parser.add_argument("--reset", action="store_true",
                               help="Forget all saved options")

    args = parser.parse_args()
    _setup_logging(args.verbose)

    if args.command is None:
        parser.print_help()
        return 0

    if args.command == "gui":
        return gui(args)
    elif args.command == "render":
        return render(args)
    elif args.command == "shades":
        return show_shades(args.colour, count=args.count)
    elif args.command == "config":
        return configure(set_option=args.set, reset=args.reset)

    return 0


def gui(args):
    """Launch the GUI application."""
    try:
        from colourwheel.core.models import WheelConfigError
        config = _wheel_config(args)
        if args.dynamic_cursor:
            from dataclasses import replace
            config = replace(config, dynamic_cursor=True)
    except WheelConfigError as e:
        logging.getLogger(__name__).warning("Invalid wheel options: %s", e)
        print(f"Error: {e}")
        return 1

    try:
        from colourwheel.qt_components.qt_app import run_app
    except ImportError as e:
        print(f"Error: PySide6 not available: {e}")
        print("Install with: pip install PySide6")
        return 1

    print("[Colour Wheel] Starting picker...")
    return run_app(config)


def render(args):
    """Render the wheel headless, replaying clicks, and save it."""
    try:
        from colourwheel.core.controllers import ColourWheelController
        from colourwheel.core.models import WheelConfigError
        from colourwheel.surface import PillowSurface

        try:
            config = _wheel_config(args)
        except WheelConfigError as e:
            logging.getLogger(__name__).warning("Invalid wheel options: %s", e)
            print(f"Error: {e}")
            return 1

        def report(payload):
            if hasattr(payload, 'to_dict'):
                payload = payload.to_dict()
            print(f"Selected: {payload}")

        surface = PillowSurface(config.size)
        wheel = ColourWheelController(config, surface, on_colour_selected=report)
        for x, y in args.click:
            if not wheel.click(x, y):
                print(f"Click ({x:g}, {y:g}): no selection")

        surface.save(args.output)
        print(f"Phase: {wheel.state.phase.name}")
        print(f"Saved {config.size}x{config.size} wheel to {args.output}")
        return 0
    except Exception as e:
        print(f"Error: {e}")
        return 1


def show_shades(colour, count=None):
    """Print the shade ramp for a base colour."""
    try:
        from colourwheel.conf import settings
        from colourwheel.core.models import RGBColor
        from colourwheel.services.shades import ShadeGenerator

        text = colour.strip()
        if len(text) in (3, 6) and all(c in '0123456789abcdefABCDEF' for c in text):
            text = f"#{text}"
        base = RGBColor.parse(text)
        if count is None:
            count = settings.wheel_config().shade_count

        print(f"Base: {base.to_string()} {base.hex}")
        for i, shade in enumerate(ShadeGenerator.produce_shades(base, count)):
            print(f"  [{i:2d}] {shade.hex}  {shade.to_string()}")
        return 0
    except Exception as e:
        print(f"Error: {e}")
        return 1


def configure(set_option=None, reset=False):
    """Show or change persisted wheel options."""
    try:
        from colourwheel import conf

        if reset:
            conf.settings.clear()
            print("Saved options cleared")
        if set_option:
            key, value = set_option
            conf.settings.set_option(key, value)
            print(f"Saved {key} = {conf.settings.options[key]!r}")

        config = conf.settings.wheel_config()
        print(f"Config file: {conf.CONFIG_PATH}")
        for key, value in config.to_options().items():
            marker = "*" if key in conf.settings.options else " "
            if key == 'hue_colours':
                value = ", ".join(value)
            print(f"{marker} {key:18s} {value}")
        print(f"  {'inner_radius':18s} {config.inner_radius:g}")
        print(f"  {'center_radius':18s} {config.center_radius:g}")
        return 0
    except (KeyError, ValueError) as e:
        logging.getLogger(__name__).warning("Option not saved: %s", e)
        print(f"Error: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
