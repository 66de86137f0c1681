"""
Print expert: prepress Q&A and InDesign script drafting.

Talks to an OpenAI-compatible endpoint (OpenRouter by default). Output is
opaque text; nothing here feeds back into layout or rendering. Failures
never raise: they come back as fixed fallback strings.
"""

import asyncio
import re
from dataclasses import dataclass
from typing import List, Literal, Optional

from openai import AsyncOpenAI

from bindmaster.config.logging_config import setup_logger
from bindmaster.config.settings import Settings, load_settings
from bindmaster.cover.annotations import format_value
from bindmaster.cover.dimensions import CoverDimensions
from bindmaster.cover.layout import CoverSpecs

logger = setup_logger(__name__)

OFFLINE_MESSAGE = "I am currently offline. Please check your connection."
EMPTY_ANSWER_MESSAGE = "I apologize, I could not generate a response at this time."
SCRIPT_ERROR_MESSAGE = "// Error generating script. Please try again."
SCRIPT_EMPTY_MESSAGE = "// Error: No response text generated."

GREETING = (
    "Hello! I am your prepress assistant. Ask me about paper grain, glue types, "
    "or specific InDesign settings."
)

SYSTEM_PROMPT = """You are a master bookbinder and prepress engineer.
Answer questions about paper grain, glue types (PVA vs Animal), cover materials, and InDesign setup.
Keep answers technical, concise, and professional.
Context: {context}"""

_FENCE_RE = re.compile(r"```[a-zA-Z]*")

# "model" is accepted as an alias of "assistant"
Role = Literal["user", "assistant", "model"]


@dataclass(frozen=True)
class ChatMessage:
    role: Role
    text: str


def strip_code_fences(text: str) -> str:
    """Drop markdown fence markers (``` or ```javascript) around generated code."""
    return _FENCE_RE.sub("", text).strip()


def build_script_prompt(dims: CoverDimensions, specs: CoverSpecs) -> str:
    u = dims.unit.value
    v = format_value
    return f"""
Create a valid Adobe InDesign (.jsx) ExtendScript to create a new document for a hardcover book cover wrap.

Parameters:
- Unit: {u}
- Document Width (Trim): {v(specs.total_width)}
- Document Height (Trim): {v(specs.total_height)}
- Margins (Turn-in): {v(dims.turn_in)} (Top, Bottom, Left, Right)
- Bleed: {v(dims.bleed)} (Top, Bottom, Left, Right)

The script should:
1. Create a new document with the specified width, height, and bleed settings.
2. Set view preferences to {u}.
3. Add vertical guides at these X coordinates to mark the spine and hinges:
   - {v(specs.back_board_end)} (End of Back Cover)
   - {v(specs.spine_start)} (Start of Spine)
   - {v(specs.spine_end)} (End of Spine)
   - {v(specs.front_board_start)} (Start of Front Cover)
4. Add horizontal guides for the turn-ins:
   - {v(dims.turn_in)}
   - {v(specs.total_height - dims.turn_in)}
5. Name the layer "Dieline".
6. Draw a rectangle representing the Spine and the two Boards on the Dieline layer (no fill, magenta stroke).
7. Alert the user that the setup is complete.

Output ONLY the raw code string, no markdown code blocks, no explanation.
"""


class PrintExpert:
    """Stateless request helpers around one AsyncOpenAI client"""

    def __init__(self, settings: Optional[Settings] = None, client: Optional[AsyncOpenAI] = None):
        self.settings = settings or load_settings()
        self.client = client or AsyncOpenAI(
            base_url=self.settings.base_url,
            api_key=self.settings.api_key or "missing-key",
        )

    async def _complete(self, messages: List[dict]) -> Optional[str]:
        response = await asyncio.wait_for(
            self.client.chat.completions.create(
                model=self.settings.model,
                messages=messages,
                max_tokens=self.settings.max_tokens,
                temperature=0.3,
            ),
            timeout=self.settings.timeout_s,
        )
        return response.choices[0].message.content

    async def ask(self, question: str, context: str, history: Optional[List[ChatMessage]] = None) -> str:
        """
        Answer a prepress question.

        Args:
            question: New user question
            context: Free-text description of the current layout
            history: Prior turns, oldest first

        Returns:
            Answer text, or a fallback message on failure
        """
        messages = [{"role": "system", "content": SYSTEM_PROMPT.format(context=context)}]
        for msg in history or []:
            messages.append({"role": "user" if msg.role == "user" else "assistant", "content": msg.text})
        messages.append({"role": "user", "content": question})

        try:
            content = await self._complete(messages)
        except asyncio.TimeoutError:
            logger.warning("Print expert timed out after %ss", self.settings.timeout_s)
            return OFFLINE_MESSAGE
        except Exception as e:
            logger.warning("Print expert request failed: %s", e)
            return OFFLINE_MESSAGE
        return content or EMPTY_ANSWER_MESSAGE

    async def generate_script(self, dims: CoverDimensions, specs: CoverSpecs) -> str:
        """Draft an InDesign ExtendScript that sets up the document and guides."""
        messages = [{"role": "user", "content": build_script_prompt(dims, specs)}]
        try:
            content = await self._complete(messages)
        except asyncio.TimeoutError:
            logger.warning("Script generation timed out after %ss", self.settings.timeout_s)
            return SCRIPT_ERROR_MESSAGE
        except Exception as e:
            logger.warning("Script generation failed: %s", e)
            return SCRIPT_ERROR_MESSAGE
        if not content:
            return SCRIPT_EMPTY_MESSAGE
        return strip_code_fences(content)


class ExpertConversation:
    """
    Chat transcript with at most one applied response per turn.

    Each send() takes a generation number; a reply whose generation is no
    longer the latest is dropped instead of appended.
    """

    def __init__(self, expert: PrintExpert, greeting: str = GREETING):
        self.expert = expert
        self.messages: List[ChatMessage] = [ChatMessage("assistant", greeting)] if greeting else []
        self._generation = 0
        self._pending = 0

    @property
    def loading(self) -> bool:
        return self._pending > 0

    async def send(self, question: str, context: str) -> Optional[str]:
        """
        Ask a question in this conversation.

        Returns:
            The applied answer, or None when the question was blank or a
            newer request superseded this one
        """
        if not question.strip():
            return None

        history = list(self.messages)
        self.messages.append(ChatMessage("user", question))
        self._generation += 1
        generation = self._generation
        self._pending += 1
        try:
            answer = await self.expert.ask(question, context, history=history)
        finally:
            self._pending -= 1

        if generation != self._generation:
            logger.debug("Discarding stale answer for generation %d (latest %d)", generation, self._generation)
            return None
        self.messages.append(ChatMessage("assistant", answer))
        return answer
