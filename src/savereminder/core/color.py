"""RGBA colors and the hex encoding used for persisted preferences."""

from __future__ import annotations

import re
from dataclasses import dataclass

_HEX_RE = re.compile(r"^#?([0-9a-fA-F]{6}|[0-9a-fA-F]{8})$")


def _clamp(value: float, low: float = 0.0, high: float = 1.0) -> float:
    return low if value < low else high if value > high else value


@dataclass(frozen=True, slots=True)
class RGBA:
    """Color with float channels in ``[0, 1]``."""

    r: float
    g: float
    b: float
    a: float = 1.0

    @classmethod
    def parse_hex(cls, text: str) -> RGBA:
        """Parse ``RRGGBBAA`` or ``RRGGBB``, with or without a leading ``#``.

        Raises ``ValueError`` on anything else.
        """

        match = _HEX_RE.match(text.strip()) if isinstance(text, str) else None
        if match is None:
            raise ValueError(f"not an RGBA hex color: {text!r}")
        digits = match.group(1)
        if len(digits) == 6:
            digits += "FF"
        channels = [int(digits[i : i + 2], 16) / 255.0 for i in range(0, 8, 2)]
        return cls(*channels)

    @classmethod
    def parse_hex_or(cls, text: str, fallback: RGBA) -> RGBA:
        try:
            return cls.parse_hex(text)
        except ValueError:
            return fallback

    def to_hex(self) -> str:
        return "".join(
            f"{round(_clamp(c) * 255):02X}" for c in (self.r, self.g, self.b, self.a)
        )

    def with_alpha(self, alpha: float) -> RGBA:
        return RGBA(self.r, self.g, self.b, alpha)


RED = RGBA(1.0, 0.0, 0.0, 1.0)


def lerp(start: RGBA, end: RGBA, t: float) -> RGBA:
    """Linear blend from ``start`` to ``end``; ``t`` is clamped to ``[0, 1]``."""

    t = _clamp(t)
    return RGBA(
        start.r + (end.r - start.r) * t,
        start.g + (end.g - start.g) * t,
        start.b + (end.b - start.b) * t,
        start.a + (end.a - start.a) * t,
    )
