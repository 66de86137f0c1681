"""
AI API endpoints

Print expert Q&A and InDesign script generation.
"""

from fastapi import APIRouter, Depends

from bindmaster.ai.print_expert import (
    EMPTY_ANSWER_MESSAGE,
    OFFLINE_MESSAGE,
    SCRIPT_EMPTY_MESSAGE,
    SCRIPT_ERROR_MESSAGE,
    ChatMessage,
    PrintExpert,
)
from bindmaster.cover.instructions import context_string
from bindmaster.cover.layout import compute_specs
from web.backend.models.cover import AskRequest, AskResponse, DimensionsIn, ScriptResponse

router = APIRouter()

_expert = None


def get_expert() -> PrintExpert:
    """Shared PrintExpert, created on first use"""
    global _expert
    if _expert is None:
        _expert = PrintExpert()
    return _expert


@router.post("/ask", response_model=AskResponse)
async def ask_print_expert(request: AskRequest, expert: PrintExpert = Depends(get_expert)):
    """
    Ask the print expert a question.

    Context comes from the request, or is built from the dimensions.
    """
    context = request.context
    if context is None:
        dims = (request.dimensions or DimensionsIn()).to_dimensions()
        context = context_string(dims, compute_specs(dims))

    history = [ChatMessage(turn.role, turn.text) for turn in request.history]
    answer = await expert.ask(request.question, context, history=history)
    return AskResponse(success=answer not in (OFFLINE_MESSAGE, EMPTY_ANSWER_MESSAGE), answer=answer)


@router.post("/script", response_model=ScriptResponse)
async def generate_script(request: DimensionsIn, expert: PrintExpert = Depends(get_expert)):
    """Generate an InDesign (.jsx) setup script for the current layout"""
    dims = request.to_dimensions()
    script = await expert.generate_script(dims, compute_specs(dims))
    return ScriptResponse(success=script not in (SCRIPT_ERROR_MESSAGE, SCRIPT_EMPTY_MESSAGE), script=script)
