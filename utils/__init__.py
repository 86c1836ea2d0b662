"""utils package – Reusable numeric and drawing helpers."""

from .helpers import sign, clamp, move_toward, draw_text
