import string


class Format:
    # Formatting Syntax: ESC + CSI + SGR code + [; SGR code]* + m
    #   - ESC character = `\033` (octal) / `\x1b` (hex) / `\u001b` (unicode)
    #   - Control Sequence Introducer (CSI) = `[`
    #   - Select Graphic Rendition (SGR) codes = `31m`, `32m`, etc.
    #   - 24-bit foreground colors use `38;2;<r>;<g>;<b>`
    RED = "\033[31m"
    GREEN = "\033[32m"
    YELLOW = "\033[33m"
    BLUE = "\033[34m"
    MAGENTA = "\033[35m"
    CYAN = "\033[36m"
    WHITE = "\033[37m"
    BOLD = "\033[1m"
    DIM = "\033[2m"
    RESET = "\033[0m"
    TRUECOLOR = "\033[38;2;{};{};{}m"


def is_hex_color(spec):
    return isinstance(spec, str) and spec.startswith("#")


def hex_to_rgb(spec):
    """Splits a `#RRGGBB` string into its red, green and blue channels."""
    digits = spec[1:]
    if len(digits) != 6 or any(c not in string.hexdigits for c in digits):
        raise ValueError(f"Invalid hex color: '{spec}'. Expected the form #RRGGBB.")
    return tuple(int(digits[i : i + 2], 16) for i in (0, 2, 4))


def format_color(spec):
    """Resolves a color specifier to the escape sequence to emit."""
    if is_hex_color(spec):
        return Format.TRUECOLOR.format(*hex_to_rgb(spec))
    return spec


def colorize(text, spec, reset=Format.RESET):
    """Formats text in the given color."""
    return f"{format_color(spec)}{text}{reset}"
