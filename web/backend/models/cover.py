"""
Cover data models for the BindMaster API

Request and response bodies for layout, preview, export and the print expert.
"""

from dataclasses import asdict
from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, Field

from bindmaster.config.presets import PRESETS, DEFAULT_PRESET
from bindmaster.config.units import Unit
from bindmaster.cover.dimensions import CoverDimensions
from bindmaster.cover.layout import CoverSpecs

_DEFAULTS = PRESETS[DEFAULT_PRESET]


class DimensionsIn(BaseModel):
    """Dimension model as entered in the form"""
    unit: Unit = Field(default=Unit(_DEFAULTS["unit"]), description="mm, cm or in")
    board_width: float = Field(default=_DEFAULTS["board_width"], description="Width of each board")
    board_height: float = Field(default=_DEFAULTS["board_height"], description="Height of each board")
    spine_width: float = Field(default=_DEFAULTS["spine_width"], description="Width of the spine panel")
    hinge_gap: float = Field(default=_DEFAULTS["hinge_gap"], description="Gap between board and spine")
    turn_in: float = Field(default=_DEFAULTS["turn_in"], description="Wrap-around margin on all sides")
    bleed: float = Field(default=_DEFAULTS["bleed"], description="Print margin beyond the trim box")

    class Config:
        json_schema_extra = {
            "example": {
                "unit": "mm",
                "board_width": 153,
                "board_height": 216,
                "spine_width": 20,
                "hinge_gap": 7,
                "turn_in": 18,
                "bleed": 5,
            }
        }

    def to_dimensions(self) -> CoverDimensions:
        return CoverDimensions(
            board_width=self.board_width,
            board_height=self.board_height,
            spine_width=self.spine_width,
            hinge_gap=self.hinge_gap,
            turn_in=self.turn_in,
            bleed=self.bleed,
            unit=self.unit,
        )


class SpecsOut(BaseModel):
    total_width: float
    total_height: float
    spine_start: float
    spine_end: float
    front_board_start: float
    back_board_end: float

    @classmethod
    def from_specs(cls, specs: CoverSpecs) -> "SpecsOut":
        return cls(**asdict(specs))


class AnnotationOut(BaseModel):
    type: str = Field(..., description="Primitive name, e.g. DimensionLine")
    data: Dict[str, Any] = Field(default_factory=dict)

    @classmethod
    def from_annotation(cls, annotation) -> "AnnotationOut":
        return cls(type=type(annotation).__name__, data=asdict(annotation))


class LayoutResponse(BaseModel):
    success: bool
    unit: Unit
    specs: SpecsOut
    page_width: float = Field(..., description="Trim width plus bleed on both sides")
    page_height: float = Field(..., description="Trim height plus bleed on both sides")
    annotations: List[AnnotationOut] = []


class InstructionsResponse(BaseModel):
    success: bool
    instructions: str


class PreviewRequest(BaseModel):
    dimensions: DimensionsIn = Field(default_factory=DimensionsIn)
    container_width: Optional[float] = Field(None, description="Container width in px")
    container_height: Optional[float] = Field(None, description="Container height in px")


class ExportResponse(BaseModel):
    """Response with export status"""
    success: bool
    message: str
    file_path: str = ""
    download_url: str = ""


class ChatTurn(BaseModel):
    role: Literal["user", "assistant", "model"] = Field(..., description="\"model\" is an alias of \"assistant\"")
    text: str


class AskRequest(BaseModel):
    question: str = Field(..., description="New user question")
    history: List[ChatTurn] = Field(default_factory=list, description="Prior turns, oldest first")
    dimensions: Optional[DimensionsIn] = Field(None, description="Used to build context when no context is given")
    context: Optional[str] = Field(None, description="Free-text layout context")


class AskResponse(BaseModel):
    success: bool
    answer: str


class ScriptResponse(BaseModel):
    success: bool
    script: str
