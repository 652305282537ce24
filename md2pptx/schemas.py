# md2pptx/schemas.py
from typing import Annotated, Any, Dict, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class Hyperlink(BaseModel):
    model_config = ConfigDict(frozen=True)

    url: str
    tooltip: str


class RunStyle(BaseModel):
    model_config = ConfigDict(frozen=True)

    bold: bool = False
    italic: bool = False
    monospace: bool = False
    hyperlink: Optional[Hyperlink] = None
    is_bullet: bool = False
    breaks_line: bool = False


class StyledRun(BaseModel):
    model_config = ConfigDict(frozen=True)

    text: str
    style: RunStyle = RunStyle()


class TextBlock(BaseModel):
    type: Literal["text_block"] = "text_block"
    runs: List[StyledRun]

    @property
    def line_count(self) -> int:
        return 1 + sum(1 for run in self.runs if run.style.breaks_line)


class Image(BaseModel):
    type: Literal["image"] = "image"
    href: str
    alt: str = ""


class Table(BaseModel):
    type: Literal["table"] = "table"
    headers: List[str]
    rows: List[List[str]]


ShapeKind = Literal["rectangle", "oval", "ellipse", "line", "triangle"]


class Shape(BaseModel):
    type: Literal["shape"] = "shape"
    kind: ShapeKind
    options: Dict[str, Any] = Field(default_factory=dict)


class ColumnBreak(BaseModel):
    type: Literal["column_break"] = "column_break"


SlideElement = Annotated[
    Union[TextBlock, Image, Table, Shape, ColumnBreak],
    Field(discriminator="type"),
]


class Slide(BaseModel):
    title: str
    elements: List[SlideElement] = Field(default_factory=list)
    notes: Optional[str] = None


class Box(BaseModel):
    model_config = ConfigDict(frozen=True)

    x: float
    y: float
    width: float
    height: float


class PositionedElement(BaseModel):
    model_config = ConfigDict(frozen=True)

    element: SlideElement
    x: float
    y: float
    width: float
    height: float
    column: int = 0


class PlacedSlide(BaseModel):
    model_config = ConfigDict(frozen=True)

    title: str
    title_box: Box
    notes: Optional[str] = None
    elements: List[PositionedElement] = Field(default_factory=list)
