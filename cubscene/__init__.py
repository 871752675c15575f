"""XPM texture decoding, X11 colour names, raycaster scene state and text reports."""

__version__ = "0.1.0"