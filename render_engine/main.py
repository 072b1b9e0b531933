#!/usr/bin/env python3
"""
Render Engine - Command line entry point.

Renders an HTML document with a CSS stylesheet into a PNG image.
"""

import argparse
import logging
import sys
from typing import List, Optional

from . import __version__
from .core import RenderEngine
from .core.errors import ConfigError, RenderEngineError
from .parser import SUPPORTED_TREE_BUILDERS
from .utils.config import Config
from .utils.logging import log_exception, setup_logging


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="render-engine",
        description="Render an HTML document styled by a CSS stylesheet into an image")

    parser.add_argument("html", help="HTML document")
    parser.add_argument("css", help="CSS stylesheet")
    parser.add_argument("-o", "--output", default="output.png", help="Output image (default: output.png)")
    parser.add_argument("--width", type=int, help="Viewport width in pixels")
    parser.add_argument("--height", type=int, help="Viewport height in pixels")
    parser.add_argument("--config", help="Path to a JSON configuration file")
    parser.add_argument("--tree-builder", choices=SUPPORTED_TREE_BUILDERS,
                        help="HTML tree builder to use")
    parser.add_argument("--dump-layout", action="store_true", help="Print the layout tree")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    parser.add_argument("--version", action="version", version=f"render-engine {__version__}")

    return parser.parse_args(argv)


def read_source(file_name: str) -> str:
    with open(file_name, 'r', encoding='utf-8') as f:
        return f.read()


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main entry point.

    Returns:
        int: Process exit status
    """
    args = parse_args(argv)

    try:
        config = Config(args.config)

        if args.width is not None:
            config.set('viewport.width', args.width)
        if args.height is not None:
            config.set('viewport.height', args.height)
        if args.tree_builder:
            config.set('html.tree_builder', args.tree_builder)

        console_level = "DEBUG" if args.debug else config.get('logging.console_level', "INFO")
        logger = setup_logging(console_level=console_level,
                               log_file=config.get('logging.file'),
                               file_level=config.get('logging.file_level', "DEBUG"))
    except (ConfigError, OSError) as e:
        logging.basicConfig(level=logging.ERROR)
        log_exception(logging.getLogger("render_engine"), e, "Invalid configuration")
        return 1

    logger.info(f"Rendering {args.html} with {args.css}")

    try:
        html = read_source(args.html)
        css = read_source(args.css)

        engine = RenderEngine(config)
        result = engine.render(html, css)

        if args.dump_layout:
            print(result.layout_root.debug_structure())

        result.canvas.save(args.output)
    except RenderEngineError as e:
        log_exception(logger, e, "Rendering failed")
        return 1
    except OSError as e:
        log_exception(logger, e, "File error")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
