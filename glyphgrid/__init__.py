"""Editor front-end logic: settings, font options, window geometry and cursor animation."""

__version__ = "0.1.0"

__all__ = [
    "animation",
    "blink",
    "cursor",
    "cursor_settings",
    "cursor_vfx",
    "font_options",
    "from_value",
    "running_tracker",
    "settings",
    "window_geometry",
]