"""
screensync.classify - Heuristic screenplay line classifier.

First-match-wins rule chain: scene heading, transition, parenthetical,
character. Lines matching none of them are action. The same rules drive
both export and the interactive editor.
"""

from __future__ import annotations

from screensync.elements import ElementCategory

SCENE_PREFIXES = ("INT.", "EXT.", "FADE IN", "FADE OUT")
TRANSITION_CUES = ("CUT TO:", "DISSOLVE TO:", "FADE TO:")
TRANSITION_SUFFIX = "TO:"

CHARACTER_MAX_LENGTH = 30
CHARACTER_MAX_WORDS = 3


def is_scene_heading(line: str) -> bool:
    return line.upper().startswith(SCENE_PREFIXES)


def is_transition(line: str) -> bool:
    upper = line.upper()
    return any(cue in upper for cue in TRANSITION_CUES) or upper.endswith(TRANSITION_SUFFIX)


def is_parenthetical(line: str) -> bool:
    return line.startswith("(") and line.endswith(")")


def is_character(line: str) -> bool:
    """Short all-caps cue of at most three words, with no '.' or '('."""
    return (
        len(line) > 0
        and line == line.upper()
        and len(line) < CHARACTER_MAX_LENGTH
        and "." not in line
        and "(" not in line
        and len(line.split()) <= CHARACTER_MAX_WORDS
    )


RULES = (
    (is_scene_heading, ElementCategory.SCENE_HEADING),
    (is_transition, ElementCategory.TRANSITION),
    (is_parenthetical, ElementCategory.PARENTHETICAL),
    (is_character, ElementCategory.CHARACTER),
)


def match_element(line: str) -> ElementCategory | None:
    """Return the first matching element for a trimmed line, or None.

    Args:
        line: A single trimmed line of text

    Returns:
        Matching ElementCategory, or None when no rule applies
    """
    for rule, element in RULES:
        if rule(line):
            return element
    return None


def classify(line: str) -> ElementCategory:
    """Classify a trimmed, non-empty line; defaults to Action."""
    return match_element(line) or ElementCategory.ACTION
