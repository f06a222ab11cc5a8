"""
screensync.export.fdx - Final Draft XML generator.

Generates .fdx documents with a fixed skeleton: a FADE IN: scene heading,
one paragraph per screenplay line, a FADE OUT. transition, then the
title page.
"""

from __future__ import annotations

from collections.abc import Sequence

from screensync.classify import classify
from screensync.elements import ElementCategory, Line, Screenplay, clean_lines

OPENING = Line("FADE IN:", ElementCategory.SCENE_HEADING)
CLOSING = Line("FADE OUT.", ElementCategory.TRANSITION)

XML_ESCAPES = (
    ("&", "&amp;"),
    ("<", "&lt;"),
    (">", "&gt;"),
    ('"', "&quot;"),
    ("'", "&apos;"),
)


def escape_xml(text: str) -> str:
    """Escape XML special characters, ampersand first.

    Args:
        text: Raw user text

    Returns:
        Text safe for element content and attribute values
    """
    for char, entity in XML_ESCAPES:
        text = text.replace(char, entity)
    return text


def paragraph_xml(line: Line, indent: str = "    ") -> list[str]:
    """Render one screenplay line as a Paragraph/ScriptElement node."""
    return [
        f"{indent}<Paragraph>",
        f'{indent}  <ScriptElement Type="{line.element.label}">',
        f"{indent}    <Text>{escape_xml(line.text)}</Text>",
        f"{indent}  </ScriptElement>",
        f"{indent}</Paragraph>",
    ]


def generate_fdx(title: str, lines: Sequence[Line]) -> str:
    """Generate a Final Draft document from already-classified lines.

    Args:
        title: Screenplay title for the title page
        lines: Classified lines in script order

    Returns:
        FDX content as string
    """
    out = [
        '<?xml version="1.0" encoding="UTF-8"?>',
        '<FinalDraft DocumentType="Script" Template="No" Version="1">',
        "  <Content>",
    ]

    for line in (OPENING, *lines, CLOSING):
        out.extend(paragraph_xml(line))

    out.extend(
        [
            "  </Content>",
            "  <TitlePage>",
            "    <Content>",
            '      <Paragraph Alignment="Center">',
            f'        <Text Style="Bold+Underline">{escape_xml(title)}</Text>',
            "      </Paragraph>",
            "    </Content>",
            "  </TitlePage>",
            "</FinalDraft>",
        ]
    )

    return "\n".join(out)


def serialize(title: str, lines: Sequence[str]) -> str:
    """Classify raw lines and serialize them to FDX.

    Blank lines, including lines of only non-breaking spaces, are dropped.
    """
    classified = [Line(text, classify(text)) for text in clean_lines(lines)]
    return generate_fdx(title, classified)


def serialize_text(title: str, content: str) -> str:
    """Serialize a multi-line text snapshot to FDX."""
    return serialize(title, content.split("\n"))


def serialize_screenplay(screenplay: Screenplay) -> str:
    """Serialize a screenplay, keeping each line's assigned element."""
    return generate_fdx(screenplay.title, screenplay.lines)
