from PIL import Image

from riichi_hand.parser import HandParser
from riichi_hand.renderer import RasterRenderer
from riichi_hand.schemas import Hand, HandTile, RenderOptions, TilePlacement
from riichi_hand.tile_set import TwoPartTileSet
from riichi_hand.tiles import ALL_TILES, ANY, II_MAN

TILE_SIZE = (16, 24)
RED = (255, 0, 0, 255)
BLUE = (0, 0, 255, 255)
NO_GAPS = RenderOptions(tile_gap=0, group_gap=0)


def make_tile_set():
    tile_map = {tile: Image.new("RGBA", TILE_SIZE) for tile in ALL_TILES}
    tile_map[ANY] = Image.new("RGBA", TILE_SIZE, BLUE)
    return TwoPartTileSet(Image.new("RGBA", TILE_SIZE, RED), tile_map)


def render(hand: str, options: RenderOptions = NO_GAPS) -> Image.Image:
    return RasterRenderer.render(HandParser.parse(hand), make_tile_set(), options)


def alpha(image: Image.Image, xy: tuple[int, int]) -> int:
    return image.getpixel(xy)[3]


def test_render_empty_hand():
    assert render("").size == (0, 0)
    assert RasterRenderer.render(Hand(), make_tile_set()).size == (0, 0)


def test_render_single_group():
    image = render("123m")
    assert image.mode == "RGBA"
    assert image.size == (48, 24)
    assert image.getpixel((0, 0)) == RED
    assert image.getpixel((47, 23)) == RED


def test_render_face_down_tile():
    image = render("1m?")
    assert image.getpixel((8, 12)) == RED
    assert image.getpixel((24, 12)) == BLUE


def test_render_rotated_tile_is_bottom_aligned():
    image = render("12*3m")
    assert image.size == (16 + 24 + 16, 24)
    # the rotated tile is only 16 pixels high
    assert alpha(image, (20, 4)) == 0
    assert image.getpixel((20, 12)) == RED


def test_render_shifted_tile_stacks_on_rotated_tile():
    image = render("11*1**m")
    assert image.size == (40, 32)

    # upright tile
    assert alpha(image, (5, 2)) == 0
    assert image.getpixel((5, 20)) == RED
    # rotated tile below the shifted one
    assert image.getpixel((20, 20)) == RED
    assert image.getpixel((20, 5)) == RED


def test_render_shifted_tile_without_rotated_tile_advances():
    image = render("11**m")
    assert image.size == (16 + 24, 32)
    assert alpha(image, (20, 20)) == 0
    assert image.getpixel((20, 5)) == RED


def test_render_group_gap():
    image = render("1m_2m", RenderOptions(tile_gap=0, group_gap=0.5))
    assert image.size == (16 + 8 + 16, 24)
    assert alpha(image, (20, 10)) == 0
    assert image.getpixel((30, 10)) == RED


def test_render_default_group_gap():
    image = RasterRenderer.render(HandParser.parse("1m_2m"), make_tile_set(), RenderOptions())
    assert image.size == (16 + 5 + 16, 24)


def test_render_empty_group_keeps_gaps():
    image = render("1m__2m", RenderOptions(tile_gap=0, group_gap=0.5))
    assert image.size == (16 + 8 + 0 + 8 + 16, 24)


def test_render_tile_gap():
    image = render("12m", RenderOptions(tile_gap=0.25, group_gap=0))
    assert image.size == (16 + 4 + 16, 24)
    assert alpha(image, (17, 10)) == 0


def test_render_tile_gap_with_stacked_tiles():
    renderer = RasterRenderer(make_tile_set(), RenderOptions(tile_gap=0.25, group_gap=0))
    group = [
        HandTile(tile=II_MAN, placement=TilePlacement.rotated),
        HandTile(tile=II_MAN, placement=TilePlacement.rotated_and_shifted),
    ]
    assert renderer.group_size(group) == (24, 32)


def test_tile_sizes():
    renderer = RasterRenderer(make_tile_set(), NO_GAPS)
    assert renderer.tile_size(HandTile(tile=II_MAN)) == (16, 24)
    assert renderer.tile_size(HandTile(tile=II_MAN, placement=TilePlacement.rotated)) == (24, 16)
    assert renderer.tile_size(HandTile(tile=II_MAN, placement=TilePlacement.rotated_and_shifted)) == (24, 32)


def test_image_size_matches_rendered_image():
    hand = HandParser.parse("123m_4*56p_7*7**77z")
    renderer = RasterRenderer(make_tile_set(), RenderOptions(tile_gap=0.1, group_gap=0.5))
    assert RasterRenderer.render(hand, make_tile_set(), RenderOptions(tile_gap=0.1, group_gap=0.5)).size == (
        renderer.image_size(hand)
    )
