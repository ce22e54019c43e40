"""Wire format of a sketched graph answer, as sent by the drawing tool."""

from __future__ import annotations

from pydantic import BaseModel, Field


class WirePoint(BaseModel):
    ind: int = Field(default=0, description="Index of the point in the stroke")
    x: float
    y: float


class Symbol(BaseModel):
    text: str
    x: float
    y: float


class Curve(BaseModel):
    pts: list[WirePoint] = Field(default_factory=list, description="Sampled points along the stroke")
    min_x: float = Field(default=0.0, alias="minX")
    max_x: float = Field(default=0.0, alias="maxX")
    min_y: float = Field(default=0.0, alias="minY")
    max_y: float = Field(default=0.0, alias="maxY")
    end_pt: list[WirePoint] = Field(default_factory=list, alias="endPt")
    # Axis crossings computed by the drawing tool; passed through unused
    inter_x: list[WirePoint] = Field(default_factory=list, alias="interX")
    inter_y: list[WirePoint] = Field(default_factory=list, alias="interY")
    maxima: list[WirePoint] = Field(default_factory=list)
    minima: list[WirePoint] = Field(default_factory=list)
    color_idx: int = Field(default=0, alias="colorIdx")

    model_config = {"populate_by_name": True}


class GraphAnswer(BaseModel):
    canvas_width: int = Field(default=0, alias="canvasWidth")
    canvas_height: int = Field(default=0, alias="canvasHeight")
    curves: list[Curve] = Field(default_factory=list)
    free_symbols: list[Symbol] = Field(default_factory=list, alias="freeSymbols")

    model_config = {"populate_by_name": True}
