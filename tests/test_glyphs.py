import numpy as np
import pytest

from imgrid.glyphs import DIGIT_PATTERNS, GLYPH_HEIGHT, GLYPH_WIDTH, digit_mask, label_mask, label_size


def test_every_digit_has_a_5x7_pattern():
    assert sorted(DIGIT_PATTERNS) == list("0123456789")
    for rows in DIGIT_PATTERNS.values():
        assert len(rows) == GLYPH_HEIGHT
        assert all(len(r) == GLYPH_WIDTH for r in rows)


def test_pattern_table_is_read_only():
    with pytest.raises(TypeError):
        DIGIT_PATTERNS["0"] = ()


def test_digit_mask_matches_pattern():
    mask = digit_mask("1")
    assert mask.shape == (GLYPH_HEIGHT, GLYPH_WIDTH)
    assert mask[0].tolist() == [False, False, True, False, False]
    assert mask[6].all()


def test_digit_mask_is_cached_and_frozen():
    assert digit_mask("8") is digit_mask("8")
    with pytest.raises(ValueError):
        digit_mask("8")[0, 0] = True


def test_unknown_character_is_blank():
    assert not digit_mask("x").any()


def test_label_size():
    assert label_size("0", 1) == (9, 11)
    assert label_size("12", 1) == (16, 11)
    assert label_size("123", 3) == (3 * 15 + 2 * 6 + 12, 21 + 12)


def test_label_mask_scales_glyph():
    scale = 3
    mask = label_mask("7", scale)
    pad = 2 * scale
    glyph = mask[pad : pad + GLYPH_HEIGHT * scale, pad : pad + GLYPH_WIDTH * scale]
    expected = np.repeat(np.repeat(digit_mask("7"), scale, axis=0), scale, axis=1)
    np.testing.assert_array_equal(glyph, expected)


def test_label_mask_padding_and_spacing_blank():
    scale = 2
    mask = label_mask("88", scale)
    pad = spacing = 2 * scale
    assert not mask[:pad].any()
    assert not mask[-pad:].any()
    assert not mask[:, :pad].any()
    assert not mask[:, -pad:].any()
    gap = pad + GLYPH_WIDTH * scale
    assert not mask[:, gap : gap + spacing].any()
