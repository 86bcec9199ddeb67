from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable, Mapping

from PIL import Image

from riichi_hand.errors import ImageDimensionsError, TileImageRetrieveError, TileMissingError
from riichi_hand.schemas import HandTile, Tile, TilePlacement
from riichi_hand.tiles import ALL_TILES, ANY


class TileSet(ABC):
    """Source of tile images used by the raster renderer.

    Images are RGBA and ``tile_width`` × ``tile_height`` for an upright tile;
    rotated placements return the image turned on its side.
    """

    @abstractmethod
    def tile_image(self, hand_tile: HandTile) -> Image.Image: ...

    @property
    @abstractmethod
    def tile_width(self) -> int: ...

    @property
    @abstractmethod
    def tile_height(self) -> int: ...


def _validate_tile_map(tile_map: Mapping[Tile, Image.Image], extra_images: Iterable[Image.Image] = ()) -> None:
    for tile in ALL_TILES:
        if tile not in tile_map:
            raise TileMissingError(tile)

    size = tile_map[ANY].size
    if any(image.size != size for image in [*tile_map.values(), *extra_images]):
        raise ImageDimensionsError()


def _rgba(image: Image.Image) -> Image.Image:
    return image if image.mode == "RGBA" else image.convert("RGBA")


class SimpleTileSet(TileSet):
    """One complete image per tile; only upright tiles are supported."""

    def __init__(self, tile_map: Mapping[Tile, Image.Image]) -> None:
        _validate_tile_map(tile_map)
        self._tile_map = {tile: _rgba(image) for tile, image in tile_map.items()}
        self._tile_width, self._tile_height = tile_map[ANY].size

    def tile_image(self, hand_tile: HandTile) -> Image.Image:
        if hand_tile.placement is not TilePlacement.normal:
            raise TileImageRetrieveError(hand_tile, "this tile set does not support rotated tiles")
        return self._tile_map[hand_tile.tile].copy()

    @property
    def tile_width(self) -> int:
        return self._tile_width

    @property
    def tile_height(self) -> int:
        return self._tile_height


class TwoPartTileSet(TileSet):
    """A shared front drawn under per-tile foregrounds.

    The image for ``ANY`` is used as the tile back and drawn without a front.
    """

    def __init__(self, front: Image.Image, tile_map: Mapping[Tile, Image.Image]) -> None:
        _validate_tile_map(tile_map, [front])
        self._front = _rgba(front)
        self._tile_map = {tile: _rgba(image) for tile, image in tile_map.items()}
        self._tile_width, self._tile_height = tile_map[ANY].size

    def tile_image(self, hand_tile: HandTile) -> Image.Image:
        background = self._background(hand_tile)
        foreground = self._foreground(hand_tile)
        if foreground is not None:
            background.alpha_composite(foreground)
        return background

    def _foreground(self, hand_tile: HandTile) -> Image.Image | None:
        if hand_tile.tile == ANY:
            return None
        image = self._tile_map[hand_tile.tile]
        if hand_tile.placement is TilePlacement.normal:
            return image.copy()
        return image.transpose(Image.Transpose.ROTATE_270)

    def _background(self, hand_tile: HandTile) -> Image.Image:
        image = self._tile_map[ANY] if hand_tile.tile == ANY else self._front
        if hand_tile.placement is TilePlacement.normal:
            return image.copy()
        return image.transpose(Image.Transpose.ROTATE_270).transpose(Image.Transpose.FLIP_LEFT_RIGHT)

    @property
    def tile_width(self) -> int:
        return self._tile_width

    @property
    def tile_height(self) -> int:
        return self._tile_height
