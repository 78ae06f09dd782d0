"""Patterns: ordered sequences of literal text and placeholders.

Concatenating the rendered form of every part, in order, yields the full
message text. No separators are inserted between parts.

Python 3.13+. Zero external dependencies.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import TypeIs

from msgvariants.diagnostics import ErrorTemplate, MissingValueError
from msgvariants.model.placeholders import Placeholder

__all__ = [
    "Pattern",
    "PatternPart",
    "TextPart",
]


@dataclass(frozen=True, slots=True)
class TextPart:
    """Literal text segment, rendered verbatim."""

    text: str

    def __post_init__(self) -> None:
        if not isinstance(self.text, str):
            msg = f"TextPart text must be str, got {type(self.text).__name__}"
            raise TypeError(msg)

    @staticmethod
    def guard(part: object) -> TypeIs["TextPart"]:
        """Type guard for TextPart."""
        return isinstance(part, TextPart)

    def __str__(self) -> str:
        return self.text


type PatternPart = TextPart | Placeholder


@dataclass(frozen=True, slots=True)
class Pattern:
    """Renderable template of one message variant.

    The pattern exclusively owns its parts; they are stored as a tuple so
    the order is fixed once constructed.

    Example:
        >>> pattern = Pattern.of(Placeholder("COUNT"), " item selected.")
        >>> pattern.render({"COUNT": "1"})
        '1 item selected.'
        >>> str(pattern)
        '[{COUNT} item selected.]'
    """

    parts: tuple[PatternPart, ...]

    def __post_init__(self) -> None:
        if not isinstance(self.parts, tuple):
            object.__setattr__(self, "parts", tuple(self.parts))
        for part in self.parts:
            if not isinstance(part, (TextPart, Placeholder)):
                msg = f"Pattern parts must be TextPart or Placeholder, got {type(part).__name__}"
                raise TypeError(msg)

    @staticmethod
    def of(*parts: PatternPart | str) -> "Pattern":
        """Build a pattern, wrapping plain strings as TextPart."""
        return Pattern(
            tuple(TextPart(part) if isinstance(part, str) else part for part in parts)
        )

    @property
    def placeholders(self) -> tuple[Placeholder, ...]:
        """Placeholders in pattern order, repeats included."""
        return tuple(part for part in self.parts if isinstance(part, Placeholder))

    @property
    def placeholder_ids(self) -> tuple[str, ...]:
        """Distinct placeholder ids in order of first appearance."""
        return tuple(dict.fromkeys(part.id for part in self.placeholders))

    def render(self, values: Mapping[str, str] | None = None) -> str:
        """Substitute interpolation values into the pattern.

        Each TextPart contributes its text. Each Placeholder contributes
        ``values[id]`` when present, otherwise its default text. An empty
        string is a legitimate value and is substituted as-is.

        Args:
            values: Interpolation values keyed by placeholder id

        Returns:
            The rendered text

        Raises:
            MissingValueError: If a placeholder has neither a supplied
                value nor default text
        """
        supplied: Mapping[str, str] = values if values is not None else {}
        chunks: list[str] = []
        for part in self.parts:
            if TextPart.guard(part):
                chunks.append(part.text)
            elif part.id in supplied:
                chunks.append(supplied[part.id])
            elif part.default_text is not None:
                chunks.append(part.default_text)
            else:
                raise MissingValueError(
                    ErrorTemplate.missing_value(part.id), placeholder_id=part.id
                )
        return "".join(chunks)

    def __str__(self) -> str:
        return "[" + "".join(str(part) for part in self.parts) + "]"
