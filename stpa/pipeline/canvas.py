from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Tuple

from ..models import FontSpec


@dataclass(frozen=True)
class LayoutField:
    """One positioned piece of text. Coordinates are mm from the top-left corner."""

    label: str
    text: str
    x: float
    y: float
    width: float
    font: FontSpec
    terminator: str = ""
    align: str = "L"
    underline: bool = False


@dataclass(frozen=True)
class PageDescription:
    page_size: Tuple[float, float]
    fields: Tuple[LayoutField, ...]
    warnings: Tuple[str, ...]
    template_path: Optional[Path] = None
    document_number: str = ""

    def find(self, label: str) -> List[LayoutField]:
        return [f for f in self.fields if f.label == label]

    def text_of(self, label: str) -> str:
        return "\n".join(f.text for f in self.find(label))


@dataclass
class PageCanvas:
    page_size: Tuple[float, float]
    y: float = 0.0
    fields: List[LayoutField] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)

    def draw(
        self,
        label: str,
        text: str,
        x: float,
        width: float,
        font: FontSpec,
        y: Optional[float] = None,
        terminator: str = "",
        align: str = "L",
        underline: bool = False,
    ) -> LayoutField:
        item = LayoutField(
            label=label,
            text=text,
            x=x,
            y=self.y if y is None else y,
            width=width,
            font=font,
            terminator=terminator,
            align=align,
            underline=underline,
        )
        self.fields.append(item)
        return item

    def draw_lines(
        self,
        label: str,
        lines: List[str],
        x: float,
        width: float,
        font: FontSpec,
        terminator: str = "",
        align: str = "L",
    ) -> None:
        """Draw lines top to bottom from the cursor and move the cursor below them."""
        last = len(lines) - 1
        for i, line in enumerate(lines):
            self.draw(label, line, x, width, font, terminator=terminator if i == last else "", align=align)
            self.advance(font.line_height)

    def advance(self, dy: float) -> float:
        self.y += dy
        return self.y

    def move_to(self, y: float) -> None:
        self.y = y

    def warn(self, message: str) -> None:
        self.warnings.append(message)

    def finish(self, template_path: Optional[Path] = None, document_number: str = "") -> PageDescription:
        return PageDescription(
            page_size=self.page_size,
            fields=tuple(self.fields),
            warnings=tuple(self.warnings),
            template_path=template_path,
            document_number=document_number,
        )
