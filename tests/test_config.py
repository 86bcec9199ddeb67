import pytest
from pydantic import ValidationError

from riichi_hand.config import Settings
from riichi_hand.numeric import NumericBase
from riichi_hand.schemas import RenderOptions


def test_defaults(monkeypatch):
    for name in ("NUMERIC_BASE", "LOG_LEVEL", "LOG_FORMAT", "TILE_GAP", "GROUP_GAP"):
        monkeypatch.delenv(f"RIICHI_HAND_{name}", raising=False)
    config = Settings(_env_file=None)
    assert config.numeric_base is NumericBase.int32
    assert config.log_level == "INFO"
    assert config.log_format == "console"
    assert config.tile_gap == 0.0
    assert config.group_gap == pytest.approx(1 / 3)


def test_reads_environment(monkeypatch):
    monkeypatch.setenv("RIICHI_HAND_NUMERIC_BASE", "bigint")
    monkeypatch.setenv("RIICHI_HAND_LOG_FORMAT", "json")
    monkeypatch.setenv("RIICHI_HAND_TILE_GAP", "0.25")
    config = Settings(_env_file=None)
    assert config.numeric_base is NumericBase.bigint
    assert config.log_format == "json"
    assert config.tile_gap == 0.25


def test_rejects_invalid_values(monkeypatch):
    monkeypatch.setenv("RIICHI_HAND_NUMERIC_BASE", "int64")
    with pytest.raises(ValidationError):
        Settings(_env_file=None)
    monkeypatch.delenv("RIICHI_HAND_NUMERIC_BASE")
    monkeypatch.setenv("RIICHI_HAND_GROUP_GAP", "-1")
    with pytest.raises(ValidationError):
        Settings(_env_file=None)


def test_render_options_reject_negative_gaps():
    assert RenderOptions(tile_gap=0.5, group_gap=0).tile_gap == 0.5
    with pytest.raises(ValidationError):
        RenderOptions(tile_gap=-0.1)
