"""Documentation records attached to declarations."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class DocElement:
    """One tagged entry of a structured documentation block."""

    name: str
    description: str = ""


@dataclass(frozen=True, slots=True)
class DocumentationRecord:
    """Parsed documentation of a paragraph or data item.

    ``summary`` is the single-space join of the extracted summary fragments.
    """

    summary: str = ""
    parameters: tuple[DocElement, ...] = ()
    returns: tuple[DocElement, ...] = ()
    throws: tuple[DocElement, ...] = ()

    @property
    def is_empty(self) -> bool:
        return not (self.summary or self.parameters or self.returns or self.throws)

    @property
    def has_elements(self) -> bool:
        return bool(self.parameters or self.returns or self.throws)

    def elements_as_markdown(self) -> str:
        """Render the tagged elements as markdown, one paragraph per element."""
        sections: list[str] = []
        for tag, elements in (
            ("@param", self.parameters),
            ("@return", self.returns),
            ("@throws", self.throws),
        ):
            for element in elements:
                line = f"*{tag}* `{element.name}`"
                if element.description:
                    line += f" - {element.description}"
                sections.append(line)
        return "\n\n".join(sections)

    def to_markdown(self) -> str:
        """Summary followed by the tagged elements."""
        parts = [part for part in (self.summary.strip(), self.elements_as_markdown()) if part]
        return "\n\n".join(parts)


EMPTY_DOCUMENTATION = DocumentationRecord()
