"""Countdown: full-screen animated countdown to April 11.

Exercises tick-countdown: throttled sampling, per-field pulses and the
font cycle. The display runs until the window is closed.

Usage:
  python main.py               Full screen
  python main.py --windowed    Resizable window (see --size)
"""
from __future__ import annotations

import argparse
import logging
import sys

import pygame

from tick_countdown import CountdownConfig, CountdownEngine
from ui.constants import DEFAULT_SIZE, FPS
from ui.render import Background, draw_frame

logger = logging.getLogger("countdown")


def _parse_size(value: str) -> tuple[int, int]:
    try:
        w, h = (int(part) for part in value.lower().split("x", 1))
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected WxH, got {value!r}") from None
    if w <= 0 or h <= 0:
        raise argparse.ArgumentTypeError(f"size must be positive, got {value!r}")
    return w, h


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Countdown: tick-countdown display")
    p.add_argument("--windowed", action="store_true", help="Open a resizable window instead of full screen")
    p.add_argument("--size", type=_parse_size, default=DEFAULT_SIZE,
                   metavar="WxH", help="Window size with --windowed (default: 1280x720)")
    p.add_argument("--static-font", action="store_true", help="Keep one font instead of cycling")
    p.add_argument("--log-level", default="WARNING",
                   choices=["DEBUG", "INFO", "WARNING", "ERROR"], help="Logging level (default: WARNING)")
    return p.parse_args()


def open_display(windowed: bool, size: tuple[int, int]) -> pygame.Surface:
    if windowed:
        return pygame.display.set_mode(size, pygame.RESIZABLE)
    return pygame.display.set_mode((0, 0), pygame.FULLSCREEN)


def main() -> None:
    args = parse_args()
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    config = CountdownConfig(cycle_fonts=not args.static_font)
    engine = CountdownEngine(config)

    pygame.init()
    screen = open_display(args.windowed, args.size)
    pygame.display.set_caption(f"Countdown to {engine.target:%B} {engine.target.day}")
    clock = pygame.time.Clock()
    background = Background()

    running = True
    while running:
        clock.tick(FPS)

        # --- Events ---
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False

            elif event.type == pygame.VIDEORESIZE and args.windowed:
                screen = pygame.display.set_mode(event.size, pygame.RESIZABLE)
                background.invalidate()
                logger.debug("resized to %dx%d", *event.size)

            elif event.type == pygame.WINDOWSIZECHANGED:
                screen = pygame.display.get_surface()
                background.invalidate()

        # --- Sample + Render ---
        frame = engine.frame()
        draw_frame(screen, frame, background, config.display_font, config.complete_message)
        pygame.display.flip()

    pygame.quit()
    sys.exit()


if __name__ == "__main__":
    main()
