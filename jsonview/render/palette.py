"""Color palette for the five JSON display roles."""

from __future__ import annotations

from dataclasses import dataclass

from rich.style import Style


@dataclass(frozen=True)
class Palette:
    """Styles applied to each kind of JSON token.

    Punctuation (brackets, commas, colons) is always unstyled.
    """

    null: Style
    boolean: Style
    number: Style
    string: Style
    key: Style


DEFAULT_PALETTE = Palette(
    null=Style(bold=True),
    boolean=Style(color="magenta"),
    number=Style(color="yellow"),
    string=Style(color="green"),
    key=Style(color="red"),
)

PLAIN_PALETTE = Palette(
    null=Style.null(),
    boolean=Style.null(),
    number=Style.null(),
    string=Style.null(),
    key=Style.null(),
)
