"""Data models for the BindMaster API"""

from web.backend.models.cover import (
    AnnotationOut,
    AskRequest,
    AskResponse,
    ChatTurn,
    DimensionsIn,
    ExportResponse,
    InstructionsResponse,
    LayoutResponse,
    PreviewRequest,
    ScriptResponse,
    SpecsOut,
)

__all__ = [
    "AnnotationOut",
    "AskRequest",
    "AskResponse",
    "ChatTurn",
    "DimensionsIn",
    "ExportResponse",
    "InstructionsResponse",
    "LayoutResponse",
    "PreviewRequest",
    "ScriptResponse",
    "SpecsOut",
]
