"""
screensync.editor - View state for an interactive editing surface.

The presentation layer owns one EditorState per open editor and calls
reclassify() after each text change and cycle() on Tab.
"""

from __future__ import annotations

from screensync.classify import match_element
from screensync.elements import ElementCategory

ELEMENT_CYCLE = (
    ElementCategory.ACTION,
    ElementCategory.CHARACTER,
    ElementCategory.DIALOGUE,
    ElementCategory.PARENTHETICAL,
)

UPPERCASE_ELEMENTS = frozenset(
    {ElementCategory.SCENE_HEADING, ElementCategory.CHARACTER, ElementCategory.TRANSITION}
)


class EditorState:
    """Current element of an editor, updated by explicit calls."""

    def __init__(self, current: ElementCategory = ElementCategory.ACTION) -> None:
        self.current = current

    @property
    def display_name(self) -> str:
        return self.current.display_name

    def set_current(self, element: ElementCategory | str) -> ElementCategory:
        """Select an element by category or editor key."""
        if not isinstance(element, ElementCategory):
            element = ElementCategory.from_editor_key(element)
        self.current = element
        return self.current

    def cycle(self) -> ElementCategory:
        """Advance to the next element in the Tab cycle."""
        if self.current in ELEMENT_CYCLE:
            index = (ELEMENT_CYCLE.index(self.current) + 1) % len(ELEMENT_CYCLE)
        else:
            index = 0
        self.current = ELEMENT_CYCLE[index]
        return self.current

    def reclassify(self, text: str) -> ElementCategory:
        """Reclassify the edited line; keeps the current element when nothing matches."""
        stripped = text.strip()
        if stripped:
            matched = match_element(stripped)
            if matched is not None:
                self.current = matched
        return self.current


def format_element_text(text: str, element: ElementCategory) -> str:
    """Apply the element's casing convention to a line of text."""
    if element in UPPERCASE_ELEMENTS:
        return text.upper()
    return text
