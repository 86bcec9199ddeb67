from __future__ import annotations

from pathlib import Path

from PIL import Image, ImageDraw, ImageFont

from riichi_hand.errors import TileMissingError
from riichi_hand.logging import get_logger
from riichi_hand.schemas import Suite, Tile
from riichi_hand.tile_set import TwoPartTileSet
from riichi_hand.tiles import ALL_TILES, ANY

logger = get_logger(__name__)

FRONT_IMAGE_NAME = "Front"
BACK_IMAGE_NAME = "Back"
SUITE_IMAGE_PREFIXES = {Suite.manzu: "Man", Suite.pinzu: "Pin", Suite.souzu: "Sou"}

FRONT_COLOR = (250, 248, 240, 255)
BACK_COLOR = (231, 171, 38, 255)
BORDER_COLOR = (90, 90, 90, 255)
LABEL_COLOR = (20, 20, 20, 255)
AKADORA_LABEL_COLOR = (200, 30, 30, 255)


def tile_image_name(tile: Tile) -> str:
    """File name (without extension) used for a tile in image directories."""
    if tile == ANY:
        return BACK_IMAGE_NAME
    if tile.suite in SUITE_IMAGE_PREFIXES:
        prefix = SUITE_IMAGE_PREFIXES[tile.suite]
        return f"{prefix}5-Dora" if tile.value == 0 else f"{prefix}{tile.value}"
    return tile.name


def _load_png(path: Path) -> Image.Image:
    with Image.open(path) as image:
        return image.convert("RGBA")


def load_tile_set(directory: Path | str) -> TwoPartTileSet:
    """Loads ``Front.png``, ``Back.png`` and one foreground per tile (``Man1.png``, ``Man5-Dora.png``, ``Ton.png``...)."""
    path = Path(directory)
    tile_map: dict[Tile, Image.Image] = {}
    for tile in ALL_TILES:
        image_path = path / f"{tile_image_name(tile)}.png"
        if not image_path.is_file():
            raise TileMissingError(tile)
        tile_map[tile] = _load_png(image_path)

    front = _load_png(path / f"{FRONT_IMAGE_NAME}.png")
    tile_set = TwoPartTileSet(front, tile_map)
    logger.info(
        "tile set loaded",
        directory=str(path),
        tile_width=tile_set.tile_width,
        tile_height=tile_set.tile_height,
    )
    return tile_set


def _blank_tile(size: tuple[int, int], fill: tuple[int, int, int, int]) -> Image.Image:
    image = Image.new("RGBA", size)
    draw = ImageDraw.Draw(image)
    radius = max(min(size) // 8, 1)
    draw.rounded_rectangle((0, 0, size[0] - 1, size[1] - 1), radius=radius, fill=fill, outline=BORDER_COLOR)
    return image


def _label(size: tuple[int, int], text: str, color: tuple[int, int, int, int]) -> Image.Image:
    image = Image.new("RGBA", size)
    draw = ImageDraw.Draw(image)
    font = ImageFont.load_default()
    left, top, right, bottom = draw.textbbox((0, 0), text, font=font)
    x = (size[0] - (right - left)) // 2 - left
    y = (size[1] - (bottom - top)) // 2 - top
    draw.text((x, y), text, font=font, fill=color)
    return image


def label_tile_set(tile_width: int = 48, tile_height: int = 64) -> TwoPartTileSet:
    """Tile set drawn on the fly, each tile labelled with its notation."""
    size = (tile_width, tile_height)
    tile_map = {ANY: _blank_tile(size, BACK_COLOR)}
    for tile in ALL_TILES:
        if tile == ANY:
            continue
        color = AKADORA_LABEL_COLOR if tile.value == 0 else LABEL_COLOR
        tile_map[tile] = _label(size, tile.notation, color)
    return TwoPartTileSet(_blank_tile(size, FRONT_COLOR), tile_map)
