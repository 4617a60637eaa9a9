"""Demo launcher: `python -m cellui_demos <name>`."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable

from cellui.api.geometry import Vec2
from cellui.css.stylesheet import StyleSheet
from cellui.rendering.grid_backend import GridBackend
from cellui.runtime.config import initialize_runtime_config
from cellui.runtime.executor import render_events, run_model
from cellui.runtime.logging import get_logger, setup_logging
from cellui_demos import dialog, layered, lorem, select_list, simple
from cellui_demos.logging_setup import setup_demo_logging

logger = get_logger(__name__)

DEMOS: dict[str, Callable[[], None]] = {
    "dialog": dialog.main,
    "select": select_list.main,
    "lorem": lorem.main,
    "layered": layered.main,
    "simple": simple.main,
}

_BUILDERS = {
    "dialog": dialog.build,
    "select": select_list.build,
    "lorem": lorem.build,
    "layered": layered.build,
}


def _parse_size(raw: str) -> Vec2:
    width, sep, height = raw.lower().partition("x")
    if not sep:
        raise argparse.ArgumentTypeError(f"expected WIDTHxHEIGHT, got {raw!r}")
    try:
        return Vec2(int(width), int(height))
    except ValueError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from exc


def dump(name: str, size: Vec2) -> list[str]:
    """Render a demo's first frame headlessly."""
    if name == "simple":
        backend = GridBackend(size)
        run_model(backend, StyleSheet.parse(simple.STYLESHEET), simple.SimpleModel(), [])
        return backend.lines()
    state, view = _BUILDERS[name]()
    return render_events(view, [], size, state=state)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="cellui_demos", description="cellui example applications")
    parser.add_argument("name", choices=sorted(DEMOS), help="demo to run")
    parser.add_argument(
        "--dump",
        metavar="WxH",
        type=_parse_size,
        help="print the first frame at this size instead of running interactively",
    )
    args = parser.parse_args(argv)

    config = initialize_runtime_config()
    if args.dump is not None:
        setup_logging()
        for line in dump(args.name, args.dump):
            print(line.rstrip())
        return 0
    setup_demo_logging(config)
    logger.info("demo_start name=%s", args.name)
    DEMOS[args.name]()
    return 0


if __name__ == "__main__":
    sys.exit(main())
