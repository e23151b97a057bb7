import dataclasses

import pytest

from imgloading.ui.overlays.config import (
    DEFAULTS,
    AnchorPosition,
    OverlayConfig,
    merge_options,
    normalize_config,
)


def test_text_becomes_label_over_defaults():
    config = normalize_config("上传中...")
    assert config.text == "上传中..."
    assert dataclasses.replace(config, text=DEFAULTS.text) == DEFAULTS


def test_none_returns_defaults():
    assert normalize_config(None) == DEFAULTS


def test_mapping_accepts_frontend_aliases():
    config = normalize_config({"zIndex": 10, "className": "upload", "position": "bottom-center"})
    assert config.z_index == 10
    assert config.class_name == "upload"
    assert config.anchor is AnchorPosition.BOTTOM_CENTER
    assert config.anchor.vertical == "bottom"
    assert config.anchor.is_centered


def test_mapping_merges_over_custom_defaults():
    defaults = merge_options(DEFAULTS, {"color": "#52c41a", "mask": False})
    config = normalize_config({"text": "同步中"}, defaults)
    assert (config.text, config.color, config.mask) == ("同步中", "#52c41a", False)


def test_full_config_is_kept():
    config = OverlayConfig(text="完整", anchor="top-left")
    normalized = normalize_config(config)
    assert normalized.text == "完整"
    assert normalized.anchor is AnchorPosition.TOP_LEFT


def test_unknown_option_is_rejected():
    with pytest.raises(TypeError):
        normalize_config({"spinner": "dots"})


def test_unsupported_input_type_is_rejected():
    with pytest.raises(TypeError):
        normalize_config(42)


@pytest.mark.parametrize("options", [{"color": "nope"}, {"color": None}, {"anchor": "middle-left"}])
def test_invalid_values_are_rejected(options):
    with pytest.raises(ValueError):
        normalize_config(options)
