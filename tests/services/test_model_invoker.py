# tests/services/test_model_invoker.py
import pytest
from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock
from conftest import ProviderError

from career_advisor.core.errors import ModelError, ModelErrorKind
from career_advisor.config.llm_config import CHAT_GENERATION, FORM_ADVICE_GENERATION


def test_gemini_build_config():
    """Test generation parameters map onto GenerateContentConfig"""
    from career_advisor.services.model_invoker import GeminiInvoker

    config = GeminiInvoker.build_config(FORM_ADVICE_GENERATION)

    assert config.temperature == 0.7
    assert config.top_p == 0.8
    assert config.top_k == 40
    assert config.max_output_tokens == 2048
    assert config.stop_sequences == ["END_OF_RESPONSE"]
    assert GeminiInvoker.build_config(None) is None

@pytest.mark.asyncio
async def test_gemini_invoke_returns_text():
    """Test the prompt and model name reach the SDK and text comes back"""
    from career_advisor.services.model_invoker import GeminiInvoker

    invoker = GeminiInvoker(api_key="test-key", model="gemini-2.0-flash")
    client = MagicMock()
    client.aio.models.generate_content = AsyncMock(return_value=SimpleNamespace(text="Become a nurse."))
    invoker._client = client

    text = await invoker.invoke("prompt text", CHAT_GENERATION)

    assert text == "Become a nurse."
    kwargs = client.aio.models.generate_content.await_args.kwargs
    assert kwargs["model"] == "gemini-2.0-flash"
    assert kwargs["contents"] == "prompt text"
    assert kwargs["config"].temperature == 0.8

@pytest.mark.asyncio
async def test_gemini_invoke_empty_text():
    """Test a response without text becomes an empty string"""
    from career_advisor.services.model_invoker import GeminiInvoker

    invoker = GeminiInvoker(api_key="test-key", model="gemini-2.0-flash")
    invoker._client = MagicMock()
    invoker._client.aio.models.generate_content = AsyncMock(return_value=SimpleNamespace(text=None))

    assert await invoker.invoke("prompt") == ""

@pytest.mark.asyncio
async def test_gemini_invoke_wraps_sdk_errors():
    """Test a google-genai client error becomes a classified ModelError"""
    from google.genai import errors
    from career_advisor.services.model_invoker import GeminiInvoker

    invoker = GeminiInvoker(api_key="test-key", model="gemini-2.0-flash")
    invoker._client = MagicMock()
    invoker._client.aio.models.generate_content = AsyncMock(side_effect=errors.ClientError(
        429, {"error": {"code": 429, "message": "quota exceeded", "status": "RESOURCE_EXHAUSTED"}}
    ))

    with pytest.raises(ModelError) as excinfo:
        await invoker.invoke("prompt")

    assert excinfo.value.kind == ModelErrorKind.RATE_LIMITED
    assert excinfo.value.status == 429

def test_langchain_bind_kwargs_drops_top_k():
    """Test OpenAI-style kwargs are built without top_k"""
    from career_advisor.services.model_invoker import LangChainInvoker

    assert LangChainInvoker.bind_kwargs(FORM_ADVICE_GENERATION) == {
        "temperature": 0.7,
        "top_p": 0.8,
        "max_tokens": 2048,
        "stop": ["END_OF_RESPONSE"],
    }
    assert LangChainInvoker.bind_kwargs(CHAT_GENERATION) == {
        "temperature": 0.8,
        "top_p": 0.9,
        "max_tokens": 1024,
    }
    assert LangChainInvoker.bind_kwargs(None) == {}

@pytest.mark.asyncio
async def test_langchain_invoke_returns_text():
    """Test a LangChain chat model reply is parsed to a string"""
    from langchain_core.language_models.fake_chat_models import FakeListChatModel
    from career_advisor.services.model_invoker import LangChainInvoker

    invoker = LangChainInvoker(FakeListChatModel(responses=["Try UX research."]))

    assert await invoker.invoke("prompt", None) == "Try UX research."

@pytest.mark.asyncio
async def test_langchain_invoke_wraps_errors():
    """Test failures inside the chain surface as ModelError"""
    from langchain_core.runnables import RunnableLambda
    from career_advisor.services.model_invoker import LangChainInvoker

    def fail(_):
        raise ProviderError(403, "forbidden")

    llm = MagicMock()
    llm.bind.return_value = RunnableLambda(fail)
    invoker = LangChainInvoker(llm)

    with pytest.raises(ModelError) as excinfo:
        await invoker.invoke("prompt", CHAT_GENERATION)

    assert excinfo.value.kind == ModelErrorKind.FORBIDDEN
    llm.bind.assert_called_once_with(temperature=0.8, top_p=0.9, max_tokens=1024)

@pytest.mark.asyncio
async def test_gemini_invoke_without_api_key(monkeypatch):
    """Test a missing key surfaces as an UNKNOWN error on the call itself"""
    from career_advisor.services.model_invoker import GeminiInvoker

    for name in ("GOOGLE_API_KEY", "GEMINI_API_KEY", "GOOGLE_GENAI_USE_VERTEXAI"):
        monkeypatch.delenv(name, raising=False)
    invoker = GeminiInvoker(api_key=None, model="gemini-2.0-flash")

    with pytest.raises(ModelError) as excinfo:
        await invoker.invoke("prompt", CHAT_GENERATION)

    assert excinfo.value.kind == ModelErrorKind.UNKNOWN
