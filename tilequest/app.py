"""Command-line entry point: load a map and its textures, then play in a window."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Mapping, Sequence
from os import PathLike
from pathlib import Path

import pygame

from tilequest.game import TILE_SIZE, Game, MoveOutcome
from tilequest.gamemap import (
    COLLECTIBLE,
    EXIT,
    FLOOR,
    PLAYER,
    WALL,
    MapError,
    check_extension,
    load_map,
)
from tilequest.image import Image
from tilequest.xpm import XpmError, xpm_file_to_image

__all__ = ["TEXTURE_FILES", "load_textures", "image_to_surface", "run", "main"]

WINDOW_TITLE = "So Long Game"
FRAME_RATE = 60

TEXTURE_FILES: dict[str, str] = {
    WALL: "wall.xpm",
    FLOOR: "floor.xpm",
    PLAYER: "player.xpm",
    COLLECTIBLE: "collectible.xpm",
    EXIT: "exit.xpm",
}

# Keys the game reacts to, translated to the key codes it understands.
_KEYCODES: dict[int, int] = {
    pygame.K_ESCAPE: 65307,
    pygame.K_w: 119,
    pygame.K_s: 115,
    pygame.K_a: 97,
    pygame.K_d: 100,
}


def load_textures(directory: str | PathLike[str]) -> dict[str, Image]:
    """Load the tile image for every map character from XPM files in ``directory``.

    Raises XpmError if any file is missing or cannot be read as an XPM.
    """
    base = Path(directory)
    textures: dict[str, Image] = {}
    for cell, filename in TEXTURE_FILES.items():
        try:
            textures[cell] = xpm_file_to_image(base / filename)
        except (OSError, XpmError) as exc:
            raise XpmError(
                "Failed to load one or more XPM image files. Check paths and formats."
            ) from exc
    return textures


def image_to_surface(image: Image) -> pygame.Surface:
    """Convert an image to an RGBA surface; the image's alpha means transparency."""
    data = image.data
    rgba = bytearray(len(data))
    rgba[0::4] = data[2::4]
    rgba[1::4] = data[1::4]
    rgba[2::4] = data[0::4]
    rgba[3::4] = bytes(0xFF - alpha for alpha in data[3::4])
    surface = pygame.image.frombuffer(bytes(rgba), (image.width, image.height), "RGBA")
    return surface.copy()


def _report(outcome: MoveOutcome | None, game: Game) -> None:
    if outcome is None or outcome is MoveOutcome.BLOCKED:
        return
    if outcome is MoveOutcome.WON:
        print("Congratulations! You collected all items and reached the exit!")
        return
    if outcome is MoveOutcome.EXIT_LOCKED:
        print(
            "You must collect all items before exiting! "
            f"({game.map.collectible_count} remaining)"
        )
        return
    if outcome is MoveOutcome.COLLECTED:
        print(f"Collected item! Items remaining: {game.map.collectible_count}")
    print(f"Moves: {game.move_count}")


def _draw(screen: pygame.Surface, game: Game, surfaces: Mapping[str, pygame.Surface]) -> None:
    screen.fill((0, 0, 0))
    for tile in game.render():
        surface = surfaces.get(tile.cell)
        if surface is not None:
            screen.blit(surface, (tile.x, tile.y))
    pygame.display.flip()


def run(game: Game, textures: Mapping[str, Image]) -> int:
    """Open a window and play ``game`` until it is won or closed; return the move count."""
    pygame.init()
    try:
        screen = pygame.display.set_mode(
            (game.map.width * TILE_SIZE, game.map.height * TILE_SIZE)
        )
        pygame.display.set_caption(WINDOW_TITLE)
        surfaces = {cell: image_to_surface(image) for cell, image in textures.items()}
        clock = pygame.time.Clock()
        print("Starting game loop...")
        _draw(screen, game, surfaces)
        while game.running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    game.running = False
                elif event.type == pygame.KEYDOWN:
                    keycode = _KEYCODES.get(event.key)
                    if keycode is None:
                        continue
                    print(f"Key pressed: {keycode}")
                    _report(game.handle_key(keycode), game)
                elif event.type == pygame.VIDEOEXPOSE:
                    _draw(screen, game, surfaces)
                if not game.running:
                    break
            if game.running:
                _draw(screen, game, surfaces)
                clock.tick(FRAME_RATE)
        print("Closing window and exiting...")
    finally:
        pygame.quit()
    return game.move_count


def _error(message: str) -> int:
    print(f"Error\n{message}", file=sys.stderr)
    return 1


def main(argv: Sequence[str] | None = None) -> int:
    """Load the map named on the command line and play it; return the exit status."""
    parser = argparse.ArgumentParser(prog="tilequest", description="Collect every item, then reach the exit.")
    parser.add_argument("map_file", help="map file with the .ber extension")
    parser.add_argument(
        "--textures",
        default="textures",
        help="directory holding the tile XPM images (default: ./textures)",
    )
    args = parser.parse_args(argv)

    try:
        path = check_extension(args.map_file)
        game_map = load_map(path)
        print("Map loaded:")
        for line in game_map:
            print(line)
        print(f"Width: {game_map.width}, Height: {game_map.height}")
        print("Validating map...")
        game = Game(game_map)
        print("Map validation successful!")
        textures = load_textures(args.textures)
    except (MapError, XpmError) as exc:
        return _error(str(exc))

    try:
        run(game, textures)
    except pygame.error:
        return _error("Failed to create window.")
    return 0