import pytest

from chirp_colors import Format, colorize, format_color, hex_to_rgb


def test_hex_to_rgb_black_and_white():
    assert hex_to_rgb("#000000") == (0, 0, 0)
    assert hex_to_rgb("#FFFFFF") == (255, 255, 255)


def test_hex_to_rgb_accepts_lowercase():
    assert hex_to_rgb("#87ceeb") == (135, 206, 235)


def test_format_color_hex_uses_truecolor_sequence():
    assert format_color("#000000") == "\033[38;2;0;0;0m"
    assert format_color("#FFFFFF") == "\033[38;2;255;255;255m"


def test_format_color_passes_raw_sequences_through():
    assert format_color(Format.MAGENTA) == "\033[35m"
    assert format_color("anything") == "anything"


@pytest.mark.parametrize("spec", ["#FFF", "#GGGGGG", "#1234567", "#", "#12 456"])
def test_malformed_hex_is_rejected(spec):
    with pytest.raises(ValueError, match="Invalid hex color"):
        format_color(spec)


def test_colorize_wraps_text_with_reset():
    assert colorize("hi", "#FF0000") == "\033[38;2;255;0;0mhi\033[0m"
