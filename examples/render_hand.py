from __future__ import annotations

import structlog

from riichi_hand.logging import setup_logging
from riichi_hand.parser import HandParser
from riichi_hand.renderer import RasterRenderer
from riichi_hand.tile_sets import label_tile_set

logger = structlog.get_logger()


def main() -> None:
    setup_logging()
    tile_set = label_tile_set()

    hand = HandParser.parse(input("Hand notation (e.g. 123m456p789sEEES): ").strip())
    path = input("Where do you want to save the image? ").strip()

    image = RasterRenderer.render(hand, tile_set)
    image.save(path)
    logger.info("hand rendered", path=path, width=image.width, height=image.height)


if __name__ == "__main__":
    main()
