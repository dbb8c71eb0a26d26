"""Structured ledger template.

A template file is plain text (normally HTML) containing ``{{token}}``
placeholders and named optional regions delimited by
``<!--{{NAME_START}}-->`` and ``<!--{{NAME_END}}-->``. The text is parsed
once into an ordered list of segments; rendering walks the segments and keeps
or drops each named region according to a flag, so region handling never
depends on searching the output text.
"""

import logging
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional, Union

from ledgerbook.domain.errors import (
    TemplateError,
    TemplateNotFoundError,
    template_not_found,
    unpaired_section_marker,
)

logger = logging.getLogger(__name__)

ENTITY_SECTION = "ENTITY_SECTION"
SUMMARY_SECTION = "SUMMARY_SECTION"
FOOTER_SECTION = "FOOTER_SECTION"

DEFAULT_TEMPLATE_PATH = Path(__file__).parent / "templates" / "ledger_template.html"

_MARKER_RE = re.compile(r"<!--\{\{([A-Z0-9_]+)_(START|END)\}\}-->")
_TOKEN_RE = re.compile(r"\{\{([a-z0-9_]+)\}\}")


@dataclass(frozen=True)
class Section:
    """Named optional region of a template."""

    name: str
    text: str


Segment = Union[str, Section]


def substitute(text: str, values: Mapping[str, str]) -> str:
    """Replace ``{{token}}`` placeholders; unknown tokens are left as-is."""

    def replace(match: re.Match) -> str:
        token = match.group(1)
        if token in values:
            return values[token]
        return match.group(0)

    return _TOKEN_RE.sub(replace, text)


class LedgerTemplate:
    """Parsed ledger template."""

    def __init__(self, segments: tuple[Segment, ...]):
        self.segments = segments

    @classmethod
    def parse(cls, text: str) -> "LedgerTemplate":
        """Parse template text into segments.

        Raises:
            TemplateError: If a section marker is unpaired or sections nest
        """
        segments: list[Segment] = []
        position = 0
        open_name: Optional[str] = None
        open_at = 0

        for match in _MARKER_RE.finditer(text):
            name, edge = match.group(1), match.group(2)
            if edge == "START":
                if open_name is not None:
                    raise TemplateError(unpaired_section_marker(open_name))
                if match.start() > position:
                    segments.append(text[position : match.start()])
                open_name = name
                open_at = match.end()
            else:
                if open_name != name:
                    raise TemplateError(unpaired_section_marker(name))
                segments.append(Section(name, text[open_at : match.start()]))
                open_name = None
            position = match.end()

        if open_name is not None:
            raise TemplateError(unpaired_section_marker(open_name))
        if position < len(text):
            segments.append(text[position:])

        return cls(tuple(segments))

    @property
    def section_names(self) -> tuple[str, ...]:
        return tuple(seg.name for seg in self.segments if isinstance(seg, Section))

    def render(self, values: Mapping[str, str], include: Mapping[str, bool]) -> str:
        """Render the template.

        Args:
            values: Token values keyed by token name (without braces)
            include: Section inclusion flags; sections not listed are kept

        Returns:
            Rendered text
        """
        parts = []
        for segment in self.segments:
            if isinstance(segment, Section):
                if not include.get(segment.name, True):
                    continue
                parts.append(substitute(segment.text, values))
            else:
                parts.append(substitute(segment, values))
        return "".join(parts)


def load_template(path: Optional[Union[str, Path]] = None) -> LedgerTemplate:
    """Load and parse a ledger template.

    Args:
        path: Template file; the packaged default template when None

    Returns:
        Parsed LedgerTemplate

    Raises:
        TemplateNotFoundError: If the template cannot be read
    """
    template_path = Path(path) if path is not None else DEFAULT_TEMPLATE_PATH
    try:
        text = template_path.read_text(encoding="utf-8")
    except OSError as e:
        raise TemplateNotFoundError(template_not_found(str(template_path))) from e

    logger.debug("Loaded ledger template (%d characters)", len(text))
    return LedgerTemplate.parse(text)
