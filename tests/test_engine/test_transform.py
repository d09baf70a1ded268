"""Tests for viewBox parsing and the coordinate transform."""

import pytest

from iconbake.engine.transform import DEFAULT_VIEWBOX, ViewBox, ViewBoxTransform, identity, parse_viewbox


@pytest.mark.parametrize(
    "text, expected",
    [
        ("0 0 24 24", ViewBox(0, 0, 24, 24)),
        ("-24 -24 48 48", ViewBox(-24, -24, 48, 48)),
        ("0,0,32,16", ViewBox(0, 0, 32, 16)),
        ("  1 2\n3\t4 ", ViewBox(1, 2, 3, 4)),
    ],
)
def test_parse_viewbox(text, expected):
    assert parse_viewbox(text) == expected


@pytest.mark.parametrize("text", [None, "", "0 0 24", "0 0 24 24 1", "a b c d"])
def test_malformed_viewbox_defaults(text):
    assert parse_viewbox(text) == DEFAULT_VIEWBOX
    assert DEFAULT_VIEWBOX == ViewBox(0, 0, 24, 24)


def test_identity():
    assert identity(3.5, -2) == (3.5, -2)


def test_translation_only_without_size():
    xf = ViewBoxTransform(ViewBox(-24, -24, 48, 48))
    assert xf.scale == 1.0
    assert xf(0, 0) == (24, 24)
    assert xf.output_size == (48, 48)


def test_normalizes_larger_extent():
    xf = ViewBoxTransform(ViewBox(0, 0, 48, 24), size=24)
    assert xf.scale == 0.5
    assert xf(48, 24) == (24, 12)
    assert xf.output_size == (24, 12)


def test_upscale_multiplies_after_scale():
    xf = ViewBoxTransform(ViewBox(0, 0, 24, 24), size=48, upscale=4)
    assert xf.factor == 8
    assert xf(1, 0.5) == (8, 4)
    assert xf.output_size == (192, 192)


def test_upscale_floored_at_one():
    assert ViewBoxTransform(upscale=0).upscale == 1
    assert ViewBoxTransform(upscale=-3).upscale == 1


def test_degenerate_extent_ignores_size():
    xf = ViewBoxTransform(ViewBox(0, 0, 0, 24), size=32)
    assert xf.scale == 1.0
