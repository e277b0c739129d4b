"""
Section kinds of a component block.

A component block holds exactly six sections: three type sections
(``type Message``, ``type Props``, ``type State``) and three function
sections (``fn create``, ``fn update``, ``fn view``).
"""

from __future__ import annotations

from enum import StrEnum


class SectionKind(StrEnum):
    """The six recognized sections, valued by their reserved names."""

    MESSAGE = "Message"
    PROPS = "Props"
    STATE = "State"
    UPDATE = "update"
    CREATE = "create"
    VIEW = "view"

    @property
    def keyword(self) -> str:
        """Keyword that introduces the section ('type' or 'fn')."""
        return "type" if self in TYPE_SECTIONS else "fn"

    @property
    def label(self) -> str:
        """Human-readable label used in diagnostics, e.g. 'type Props'."""
        return f"{self.keyword} {self.value}"


TYPE_SECTIONS = (SectionKind.MESSAGE, SectionKind.PROPS, SectionKind.STATE)
FUNCTION_SECTIONS = (SectionKind.UPDATE, SectionKind.CREATE, SectionKind.VIEW)

# Order in which missing sections are reported.
REQUIRED_SECTIONS = TYPE_SECTIONS + FUNCTION_SECTIONS


def format_allowed(kinds: tuple[SectionKind, ...]) -> str:
    """
    Join section labels for an 'only allowed params' message.

    >>> format_allowed(TYPE_SECTIONS)
    'type Message, type Props, type State'
    >>> format_allowed(FUNCTION_SECTIONS)
    'fn update, fn create or fn view'
    """
    labels = [kind.label for kind in kinds]
    if all(kind in TYPE_SECTIONS for kind in kinds):
        return ", ".join(labels)
    return ", ".join(labels[:-1]) + " or " + labels[-1]
