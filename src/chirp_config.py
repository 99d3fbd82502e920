from chirp_colors import Format, hex_to_rgb, is_hex_color

CATEGORIES = ("info", "success", "warning", "error")

DEFAULT_COLORS = {
    "info": Format.CYAN,
    "success": Format.GREEN,
    "warning": Format.YELLOW,
    "error": Format.RED,
    "reset": Format.RESET,
}

DEFAULT_EMOJIS = {
    "info": "📝",
    "success": "✅",
    "warning": "⚠️",
    "error": "❌",
    "group": "📂",
    "loading": "⏳",
}

DEFAULT_ASYNC_OPTIONS = {
    "loading": "Loading...",
    "success": "Completed successfully",
    "error": "Operation failed",
    "loading_icon": "⏳",
    "success_icon": "✅",
    "error_icon": "❌",
    "loading_color": "#87CEEB",
    "success_color": "#98FB98",
    "error_color": "#FF6B6B",
}


def _merge(defaults, overrides, kind):
    merged = dict(defaults)
    for key, value in (overrides or {}).items():
        if key not in defaults:
            valid = ", ".join(defaults)
            raise ValueError(f"Invalid {kind} option: '{key}'. Expected one of: {valid}")
        merged[key] = value
    return merged


def _check_colors(colors):
    for spec in colors.values():
        if is_hex_color(spec):
            hex_to_rgb(spec)


def merge_async_options(options=None):
    """Merges async wrapper options over the defaults, field by field."""
    merged = _merge(DEFAULT_ASYNC_OPTIONS, options, "async")
    _check_colors(
        {key: merged[key] for key in ("loading_color", "success_color", "error_color")}
    )
    return merged


class LoggerConfig:
    def __init__(
        self, indent_size=2, use_colors=True, use_emojis=True, colors=None, emojis=None
    ):
        if isinstance(indent_size, bool) or not isinstance(indent_size, int):
            raise ValueError(f"indent_size must be an integer, got {indent_size!r}")
        if indent_size < 1:
            raise ValueError(f"indent_size must be positive, got {indent_size}")

        self._indent_size = indent_size
        self._use_colors = bool(use_colors)
        self._use_emojis = bool(use_emojis)
        self._colors = _merge(DEFAULT_COLORS, colors, "color")
        self._emojis = _merge(DEFAULT_EMOJIS, emojis, "emoji")
        _check_colors(self._colors)

    @property
    def indent_size(self):
        return self._indent_size

    @property
    def use_colors(self):
        return self._use_colors

    @property
    def use_emojis(self):
        return self._use_emojis

    @property
    def colors(self):
        return dict(self._colors)

    @property
    def emojis(self):
        return dict(self._emojis)

    @property
    def reset(self):
        return self._colors["reset"]

    def color(self, category):
        return self._colors[category]

    def emoji(self, category):
        return self._emojis[category]

    def __repr__(self):
        return (
            f"LoggerConfig(indent_size={self._indent_size}, "
            f"use_colors={self._use_colors}, use_emojis={self._use_emojis})"
        )
