"""
Model invokers

An invoker turns a rendered prompt plus generation parameters into the model's
text. Every provider failure is re-raised as ModelError so callers only need to
handle one exception type.
"""

from typing import Optional, Protocol

from google import genai
from google.genai import types
from langchain_core.language_models import BaseChatModel
from langchain_core.output_parsers import StrOutputParser

from career_advisor.core.errors import ModelError
from career_advisor.core.logging import get_logger
from career_advisor.models.generation import GenerationConfig

logger = get_logger(__name__)


class ModelInvoker(Protocol):
    """Anything that can send one prompt to a text-generation model"""

    async def invoke(self, prompt: str, config: Optional[GenerationConfig] = None) -> str:
        ...


class GeminiInvoker:
    """Invoker backed by the google-genai async client"""

    def __init__(self, api_key: Optional[str], model: str):
        self.api_key = api_key
        self.model = model
        self._client = None

    @property
    def client(self) -> genai.Client:
        # Built on first use so a missing key only fails the request that needs it
        if self._client is None:
            self._client = genai.Client(api_key=self.api_key)
        return self._client

    @staticmethod
    def build_config(config: Optional[GenerationConfig]) -> Optional[types.GenerateContentConfig]:
        if config is None:
            return None
        return types.GenerateContentConfig(
            temperature=config.temperature,
            top_p=config.top_p,
            top_k=config.top_k,
            max_output_tokens=config.max_output_tokens,
            stop_sequences=config.stop_sequences,
        )

    async def invoke(self, prompt: str, config: Optional[GenerationConfig] = None) -> str:
        logger.debug("gemini_generate_content", model=self.model, prompt_length=len(prompt))
        try:
            response = await self.client.aio.models.generate_content(
                model=self.model,
                contents=prompt,
                config=self.build_config(config),
            )
        except Exception as e:
            raise ModelError.from_exception(e) from e
        return response.text or ""


class LangChainInvoker:
    """
    Invoker backed by any LangChain chat model.

    Sampling parameters are bound per call, so one model instance serves every
    endpoint. top_k is dropped because OpenAI-compatible APIs reject it.
    """

    def __init__(self, llm: BaseChatModel):
        self.llm = llm

    @staticmethod
    def bind_kwargs(config: Optional[GenerationConfig]) -> dict:
        if config is None:
            return {}
        kwargs = {
            "temperature": config.temperature,
            "top_p": config.top_p,
            "max_tokens": config.max_output_tokens,
            "stop": config.stop_sequences,
        }
        return {key: value for key, value in kwargs.items() if value is not None}

    async def invoke(self, prompt: str, config: Optional[GenerationConfig] = None) -> str:
        logger.debug("langchain_invoke", model=type(self.llm).__name__, prompt_length=len(prompt))
        chain = self.llm.bind(**self.bind_kwargs(config)) | StrOutputParser()
        try:
            return await chain.ainvoke(prompt)
        except Exception as e:
            raise ModelError.from_exception(e) from e
