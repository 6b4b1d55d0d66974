"""8-bit RGBA colours and alpha compositing."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Color:
    """An RGBA colour with 8-bit channels."""

    r: int
    g: int
    b: int
    a: int = 255

    def __post_init__(self) -> None:
        for name in ("r", "g", "b", "a"):
            value = getattr(self, name)
            if not 0 <= value <= 255:
                raise ValueError(f"channel {name} out of range 0..255: {value}")


def composite_over(front: Color, back: Color) -> Color:
    """Blend ``front`` over ``back`` using the front colour's alpha."""
    fa, ba = front.a, back.a

    def channel(f: int, b: int) -> int:
        return (f * fa // 255 + b * ba * (255 - fa) // (255 * 255)) & 0xFF

    # The alpha channel is computed in 8-bit arithmetic, wrapping at each step.
    alpha = (fa + ((ba * (255 - fa)) & 0xFF) // 255) & 0xFF
    return Color(
        channel(front.r, back.r),
        channel(front.g, back.g),
        channel(front.b, back.b),
        alpha,
    )