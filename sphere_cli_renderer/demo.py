#
# PROJECT: sphere-cli-renderer
# MODULE: sphere_cli_renderer/demo.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-18
#

import argparse
import curses
import logging
import sys
import time

from .config import RenderConfig, terminal_size
from .errors import RendererError, TerminalUnavailableError
from .logging_config import setup_logging, verbosity_to_level
from .renderer import Renderer, Animation

logger = logging.getLogger(__name__)


def parse_args(argv=None):
    """CLI argument parser."""
    epilog = """\
examples:
  %(prog)s                                  One shaded sphere, printed once
  %(prog)s --scale 60 --light 1.5           Smaller, dimmer sphere
  %(prog)s --animate                        Spinning ring of 8 spheres
  %(prog)s --animate --steps 60 --spheres 12 --tilt 45
  %(prog)s --animate --resolution 80 -vv --log-file ring.log   Faster precompute, logged
"""
    parser = argparse.ArgumentParser(
        description="ASCII-shaded sphere renderer",
        epilog=epilog,
        formatter_class=argparse.RawDescriptionHelpFormatter
    )
    parser.add_argument("--animate", action="store_true",
                        help="Precompute and loop a spinning ring of spheres")
    parser.add_argument("--steps", type=int,
                        help="Frames per full turn of the ring (default: 120)")
    parser.add_argument("--spheres", type=int,
                        help="Number of spheres in the ring (default: 8)")
    parser.add_argument("--ring-radius", type=float,
                        help="Distance of ring spheres from the origin (default: 1.5)")
    parser.add_argument("--sphere-radius", type=float,
                        help="Radius of each ring sphere (default: 0.5)")
    parser.add_argument("--tilt", type=float,
                        help="Ring tilt about the X axis in degrees (default: 30)")
    parser.add_argument("--scale", type=float,
                        help="Projection scale (default: 150)")
    parser.add_argument("--light", type=float,
                        help="Light intensity multiplier (default: 2.0)")
    parser.add_argument("--distance", type=float,
                        help="Camera distance in front of the origin (default: 5)")
    parser.add_argument("--resolution", type=int,
                        help="Surface samples per axis (default: 300 static, 150 animated); "
                             "precompute time grows with its square, about 1s per frame "
                             "at the animated default on a 120x40 terminal")
    parser.add_argument("--interval", type=float,
                        help="Seconds between animation frames (default: 0.016)")
    parser.add_argument("-v", "--verbose", action="count", default=0,
                        help="-v for progress, -vv for per-sphere debug output")
    parser.add_argument("--log-file",
                        help="Also write log output to this file")
    return parser.parse_args(argv)


def play(animation: Animation, draw, sleep=time.sleep, loops=None):
    """
    Replay `animation` through `draw(frame)`, pausing between frames.

    Runs forever unless `loops` limits the number of passes.
    """
    if loops is None:
        frames = animation.cycle()
    else:
        frames = (frame for _ in range(loops) for frame in animation)
    for frame in frames:
        draw(frame)
        sleep(animation.interval)


def draw_frame(stdscr, frame: str):
    """Write one frame to the curses screen, clipped to its size."""
    th, tw = stdscr.getmaxyx()
    stdscr.erase()
    for y, line in enumerate(frame.splitlines()[:th]):
        try:
            stdscr.addstr(y, 0, line[:tw - 1])
        except curses.error:
            pass
    stdscr.refresh()


class DemoApp:
    """
    Curses harness for the animated ring: size the canvas from the
    screen, precompute every frame, then loop them.
    """

    def __init__(self, stdscr, config: RenderConfig):
        self.stdscr = stdscr
        self.config = config
        self.renderer = Renderer(config)

        curses.curs_set(0)

        th, tw = stdscr.getmaxyx()
        # Last column stays empty; curses errors on the bottom-right cell
        self.width = tw - 1
        self.height = th
        if self.width < 1 or self.height < 1:
            raise TerminalUnavailableError(f"screen too small ({tw}x{th})")

    def show_progress(self, done: int, total: int):
        try:
            self.stdscr.addstr(0, 0, f" rendering frame {done}/{total} "[:self.width])
        except curses.error:
            pass
        self.stdscr.refresh()
        logger.debug("frame %d/%d", done, total)

    def run(self, loops=None):
        animation = self.renderer.render_animation(self.width, self.height,
                                                   progress=self.show_progress)
        play(animation, lambda frame: draw_frame(self.stdscr, frame), loops=loops)


def render_once(config: RenderConfig, stream=None):
    """Print a single static sphere sized to the terminal."""
    stream = stream if stream is not None else sys.stdout
    width, height = terminal_size(stream)
    logger.info("Rendering static sphere at %dx%d", width, height)
    stream.write(Renderer(config).render_static(width, height))
    stream.flush()


def main(args) -> int:
    setup_logging(verbosity_to_level(args.verbose), args.log_file,
                  console=not args.animate)
    try:
        config = RenderConfig.from_args(args)
        if args.animate:
            try:
                curses.wrapper(lambda s: DemoApp(s, config).run())
            except curses.error as e:
                raise TerminalUnavailableError(e) from e
        else:
            render_once(config)
    except KeyboardInterrupt:
        pass
    except (RendererError, ValueError) as e:
        logger.debug("aborting", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


def cli():
    """Console-script entry point."""
    sys.exit(main(parse_args()))
