"""
screensync.elements - Screenplay element types and document model.

ElementCategory values are the Final Draft paragraph type labels; editor
keys are the short names the editing surface uses for buttons and CSS
classes.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from enum import Enum


class ElementCategory(str, Enum):
    """Semantic role of a screenplay line."""

    SCENE_HEADING = "Scene Heading"
    ACTION = "Action"
    CHARACTER = "Character"
    DIALOGUE = "Dialogue"
    PARENTHETICAL = "Parenthetical"
    TRANSITION = "Transition"

    @property
    def label(self) -> str:
        return self.value

    @property
    def display_name(self) -> str:
        return self.value

    @property
    def editor_key(self) -> str:
        return EDITOR_KEYS[self]

    @classmethod
    def from_editor_key(cls, key: str) -> ElementCategory:
        """Resolve an editor key ("scene", "dialogue", ...); unknown keys are Action."""
        for element, element_key in EDITOR_KEYS.items():
            if element_key == key:
                return element
        return cls.ACTION


EDITOR_KEYS: dict[ElementCategory, str] = {
    ElementCategory.SCENE_HEADING: "scene",
    ElementCategory.ACTION: "action",
    ElementCategory.CHARACTER: "character",
    ElementCategory.DIALOGUE: "dialogue",
    ElementCategory.PARENTHETICAL: "parenthetical",
    ElementCategory.TRANSITION: "transition",
}


def clean_lines(lines: Iterable[str]) -> list[str]:
    """Trim lines and drop blank ones, including lines of only non-breaking spaces."""
    cleaned = []
    for line in lines:
        text = line.strip()
        if text:
            cleaned.append(text)
    return cleaned


@dataclass(frozen=True)
class Line:
    """A trimmed, non-empty line of screenplay text and its element."""

    text: str
    element: ElementCategory

    def __post_init__(self) -> None:
        if not self.text or self.text != self.text.strip():
            raise ValueError("Line text must be trimmed and non-empty")


@dataclass
class Screenplay:
    """A title plus the ordered, classified lines of a screenplay."""

    title: str
    lines: list[Line] = field(default_factory=list)

    @classmethod
    def from_lines(cls, title: str, lines: Iterable[str]) -> Screenplay:
        """Build a screenplay by classifying each non-blank line."""
        from screensync.classify import classify

        return cls(title=title, lines=[Line(text, classify(text)) for text in clean_lines(lines)])

    @classmethod
    def from_text(cls, title: str, content: str) -> Screenplay:
        """Build a screenplay from a multi-line text snapshot."""
        return cls.from_lines(title, content.split("\n"))

    def count(self, element: ElementCategory) -> int:
        return sum(1 for line in self.lines if line.element == element)

    @property
    def characters(self) -> list[str]:
        """Distinct character cues in order of first appearance."""
        seen: list[str] = []
        for line in self.lines:
            if line.element == ElementCategory.CHARACTER and line.text not in seen:
                seen.append(line.text)
        return seen
