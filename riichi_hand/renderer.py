from __future__ import annotations

from PIL import Image

from riichi_hand.logging import get_logger
from riichi_hand.schemas import Hand, HandTile, RenderOptions, TilePlacement
from riichi_hand.tile_set import TileSet

logger = get_logger(__name__)


class RasterRenderer:
    """Draws a Hand into an RGBA image.

    Groups are laid out left to right and every tile is aligned to the bottom
    edge. Rotated tiles lie on their side; a rotated-and-shifted tile that
    follows a rotated one is stacked on top of it (added kan).
    """

    def __init__(self, tile_set: TileSet, options: RenderOptions) -> None:
        self._tile_set = tile_set
        self._options = options

    @classmethod
    def render(cls, hand: Hand, tile_set: TileSet, options: RenderOptions | None = None) -> Image.Image:
        return cls(tile_set, options or RenderOptions())._render_hand(hand)

    def _render_hand(self, hand: Hand) -> Image.Image:
        width, height = self.image_size(hand)
        image = Image.new("RGBA", (width, height))

        start_x = 0
        for group in hand.groups:
            group_width, _ = self.group_size(group)
            self._render_group(group, image, start_x)
            start_x += group_width + self._group_gap()

        logger.debug("hand rendered", groups=len(hand.groups), width=width, height=height)
        return image

    def _render_group(self, group: list[HandTile], image: Image.Image, origin_x: int) -> None:
        start_x = 0
        last_placement = TilePlacement.normal
        for hand_tile in group:
            width, height = self.tile_size(hand_tile)
            if last_placement is TilePlacement.rotated and hand_tile.placement is TilePlacement.rotated_and_shifted:
                start_x -= width + self._tile_gap()

            tile_image = self._tile_set.tile_image(hand_tile)
            if tile_image.mode != "RGBA":
                tile_image = tile_image.convert("RGBA")
            image.alpha_composite(tile_image, dest=(origin_x + start_x, image.height - height))

            last_placement = hand_tile.placement
            start_x += width + self._tile_gap()

    def image_size(self, hand: Hand) -> tuple[int, int]:
        sizes = [self.group_size(group) for group in hand.groups]
        if not sizes:
            return 0, 0
        width = sum(w for w, _ in sizes) + self._group_gap() * (len(sizes) - 1)
        height = max(h for _, h in sizes)
        return width, height

    def group_size(self, group: list[HandTile]) -> tuple[int, int]:
        width = 0
        height = 0
        last_placement: TilePlacement | None = None
        for hand_tile in group:
            tile_width, tile_height = self.tile_size(hand_tile)
            if last_placement is None:
                width = tile_width
            elif not (
                last_placement is TilePlacement.rotated and hand_tile.placement is TilePlacement.rotated_and_shifted
            ):
                width += tile_width + self._tile_gap()
            height = max(height, tile_height)
            last_placement = hand_tile.placement
        return width, height

    def tile_size(self, hand_tile: HandTile) -> tuple[int, int]:
        width = self._tile_set.tile_width
        height = self._tile_set.tile_height
        if hand_tile.placement is TilePlacement.rotated:
            return height, width
        if hand_tile.placement is TilePlacement.rotated_and_shifted:
            return height, 2 * width
        return width, height

    def _group_gap(self) -> int:
        return int(self._options.group_gap * self._tile_set.tile_width)

    def _tile_gap(self) -> int:
        return int(self._options.tile_gap * self._tile_set.tile_width)
