"""Basic chromaparse usage examples.

Run directly with:
    python examples/basic_usage.py
"""
from chromaparse import (
    CompatibilityLevel,
    from_hsl,
    from_hsv,
    parse_at_compatibility_level,
    parse_color,
    parse_legacy,
)


def demonstrate_parsing() -> None:
    # Strict notations give None when they do not fit the grammar.
    for text in ("#6495ed", "#abc", "rgb(100%, 50%, 0%)", "hsla(210, 60%, 40%, 0.5)", "not a color"):
        color = parse_color(text)
        print(f"{text!r:>28} -> {color}")

    # The legacy algorithm turns almost anything into some color.
    for text in ("chucknorris", "#BANANA", "  #abc123  ", "transparent"):
        print(f"{text!r:>28} -> {parse_legacy(text)}")


def demonstrate_levels() -> None:
    for level in CompatibilityLevel:
        print(f"{level.value:>13}: orange -> {parse_at_compatibility_level(level, 'orange')}")


def demonstrate_conversions() -> None:
    accent = from_hsl(200, 70, 45)
    print("HSL(200, 70%, 45%):", accent.to_hex_string(), accent.to_rgb_string())
    print("back to HSL:", tuple(round(c, 1) for c in accent.to_hsl()))
    print("HSV(30, 100%, 100%):", from_hsv(30, 100, 100).to_hex_string(shorten=True))


if __name__ == "__main__":
    demonstrate_parsing()
    demonstrate_levels()
    demonstrate_conversions()
