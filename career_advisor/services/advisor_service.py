"""
Service layer for the career advisor
Validates requests, renders prompts, calls the model and shapes the reply
"""
import asyncio
from typing import Dict, Optional, Union

from career_advisor.config.llm_config import (
    CHAT_GENERATION,
    FORM_ADVICE_GENERATION,
    LEARNING_PATH_GENERATION,
    PROMPT_TEST_GENERATION,
    PROMPT_TEST_STYLES,
)
from career_advisor.core.errors import ModelError, ModelErrorKind
from career_advisor.core.logging import get_logger
from career_advisor.models.advice import AdviceRequest, AdviceResult, InputVerdict
from career_advisor.models.chat import ChatRequest, ChatResponse
from career_advisor.models.generation import GenerationConfig
from career_advisor.models.learning_path import LearningPathRequest, LearningPathResponse
from career_advisor.prompts import (
    build_chat_context,
    render_advice_prompt,
    render_learning_path_prompt,
)
from career_advisor.services.classifier import validate_interests
from career_advisor.services.messages import (
    EMPTY_CAREER_MESSAGE,
    EMPTY_CHAT_MESSAGE,
    ERROR_STYLE_TAG,
    Endpoint,
    map_error,
    validation_message,
)
from career_advisor.services.model_invoker import ModelInvoker

logger = get_logger(__name__)


class AdvisorRelay:
    """Stateless relay between the HTTP handlers and the text-generation model"""

    def __init__(self, invoker: ModelInvoker, timeout: float = 30.0, prompt_test_delay: float = 1.0):
        """
        Initialize the relay

        Args:
            invoker: Model invoker used for every outbound call
            timeout: Seconds to wait for one model call
            prompt_test_delay: Pause between calls of the prompt comparison
        """
        self.invoker = invoker
        self.timeout = timeout
        self.prompt_test_delay = prompt_test_delay

    async def call_model(self, prompt: str, config: Optional[GenerationConfig]) -> str:
        """
        Send one prompt to the model

        Cancelling the calling task cancels the outbound call too.

        Raises:
            ModelError: On any provider failure or timeout
        """
        try:
            return await asyncio.wait_for(self.invoker.invoke(prompt, config), timeout=self.timeout)
        except asyncio.TimeoutError as e:
            raise ModelError(ModelErrorKind.TIMEOUT, f"Model call timed out after {self.timeout}s") from e
        except ModelError:
            raise
        except Exception as e:
            raise ModelError.from_exception(e) from e

    async def advise(self, request: AdviceRequest) -> AdviceResult:
        """
        Produce career advice for the form flow

        Args:
            request: Submitted form fields

        Returns:
            AdviceResult with the model text, or a canned message tagged "error"
        """
        verdict = validate_interests(request.interests)
        if verdict is not InputVerdict.OK:
            logger.info("advice_request_rejected", verdict=verdict.value)
            return AdviceResult(text=validation_message(verdict), style_tag=ERROR_STYLE_TAG)

        prompt = render_advice_prompt(
            request.prompt_style,
            request.interests,
            experience=request.experience,
            location=request.location,
        )

        try:
            text = await self.call_model(prompt, FORM_ADVICE_GENERATION)
        except ModelError as e:
            logger.error("advice_generation_failed", error_kind=e.kind.value, status=e.status, error=str(e))
            return AdviceResult(text=map_error(e.kind, Endpoint.ADVICE), style_tag=ERROR_STYLE_TAG)

        logger.info("advice_generated", prompt_style=request.prompt_style, response_length=len(text))
        return AdviceResult(text=text, style_tag=request.prompt_style)

    async def chat(self, request: ChatRequest) -> ChatResponse:
        """
        Answer one chat message, using the last few turns as context

        Args:
            request: Message plus client-side history

        Returns:
            ChatResponse; error is True only when the model call failed
        """
        if not request.message.strip():
            return ChatResponse(response=EMPTY_CHAT_MESSAGE, error=False)

        context = build_chat_context(request.message, request.conversation_history)

        try:
            text = await self.call_model(context, CHAT_GENERATION)
        except ModelError as e:
            logger.error("chat_generation_failed", error_kind=e.kind.value, status=e.status, error=str(e))
            return ChatResponse(response=map_error(e.kind, Endpoint.CHAT), error=True)

        logger.info("chat_reply_generated",
                    history_turns=len(request.conversation_history),
                    response_length=len(text))
        return ChatResponse(response=text, error=False)

    async def learning_path(self, request: LearningPathRequest) -> Union[LearningPathResponse, ChatResponse]:
        """
        Generate a 5-step learning roadmap

        Returns:
            LearningPathResponse on success, otherwise a ChatResponse-shaped
            fallback with error set
        """
        if not request.target_career.strip():
            return ChatResponse(response=EMPTY_CAREER_MESSAGE, error=True)

        prompt = render_learning_path_prompt(request)

        try:
            text = await self.call_model(prompt, LEARNING_PATH_GENERATION)
        except ModelError as e:
            logger.error("learning_path_generation_failed", error_kind=e.kind.value, status=e.status, error=str(e))
            return ChatResponse(response=map_error(e.kind, Endpoint.LEARNING_PATH), error=True)

        logger.info("learning_path_generated", target_career=request.target_career)
        return LearningPathResponse(learning_path=text, error=False)

    async def compare_prompt_styles(self, interests: str) -> Dict[str, str]:
        """
        Run the same interests through several prompt styles

        Calls are sequential with a pause after each success to stay under
        provider rate limits. A failed style reports "Error: <message>".
        """
        results = {}
        for style in PROMPT_TEST_STYLES:
            try:
                prompt = render_advice_prompt(style, interests)
                results[style] = await self.call_model(prompt, PROMPT_TEST_GENERATION)
                await asyncio.sleep(self.prompt_test_delay)
            except ModelError as e:
                logger.warning("prompt_style_test_failed", style=style, error_kind=e.kind.value)
                results[style] = f"Error: {e}"
        return results
