"""Plain-text document structure shared by the renderers."""

import re

from pydantic import BaseModel

from samarthaa.errors import ValidationError

DISCLAIMER = "Disclaimer: This document is AI-generated and must be reviewed by a qualified legal professional."
HEADING_RE = re.compile(r"^\d+(\.\d+)*\.")


class DocumentOutline(BaseModel):
    """Generated text split into a title and body lines."""

    title: str
    lines: list[str]


def is_heading(line: str) -> bool:
    """Numbered headings such as '1.' or '2.1.' start a section."""
    return bool(HEADING_RE.match(line))


def outline_document(content: str) -> DocumentOutline:
    """Split generated text into title (first non-empty line) and remaining lines.

    Raises:
        ValidationError: If content has no text
    """
    lines = [line.strip() for line in content.split("\n")]
    lines = [line for line in lines if line]
    if not lines:
        raise ValidationError("No content provided")
    return DocumentOutline(title=lines[0], lines=lines[1:])
