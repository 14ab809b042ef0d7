# tests/services/test_advisor_service.py
import asyncio
import pytest
from unittest.mock import patch, AsyncMock
from conftest import FakeInvoker, ProviderError

from career_advisor.core.errors import ModelError, ModelErrorKind
from career_advisor.models import AdviceRequest, ChatRequest, LearningPathRequest
from career_advisor.services.advisor_service import AdvisorRelay
from career_advisor.services.messages import ERROR_MESSAGES, Endpoint, TIMEOUT_MESSAGE


@pytest.mark.asyncio
async def test_advise_empty_interests_skips_model():
    """Test blank interests never reach the model"""
    invoker = FakeInvoker()
    relay = AdvisorRelay(invoker)

    result = await relay.advise(AdviceRequest(interests="   "))

    assert result.style_tag == "error"
    assert result.text.startswith("🤔 Please tell me about your interests")
    assert invoker.calls == []

@pytest.mark.asyncio
async def test_advise_short_and_off_topic_skip_model():
    """Test TOO_SHORT and OFF_TOPIC verdicts never reach the model"""
    invoker = FakeInvoker()
    relay = AdvisorRelay(invoker)

    short = await relay.advise(AdviceRequest(interests="art"))
    off_topic = await relay.advise(AdviceRequest(interests="hey, how are you doing?"))

    assert short.text.startswith("💭 Could you share more details")
    assert off_topic.text.startswith("👋 Hi there! I'm an AI career advisor")
    assert short.is_error and off_topic.is_error
    assert invoker.calls == []

@pytest.mark.asyncio
async def test_advise_passes_model_text_through():
    """Test successful model text is returned verbatim with the style tag"""
    invoker = FakeInvoker(reply="**1. Data Analyst**\n- Description: ...")
    relay = AdvisorRelay(invoker)

    result = await relay.advise(AdviceRequest(
        interests="I enjoy statistics and computer science",
        experience="intermediate",
        promptStyle="expert",
    ))

    assert result.text == "**1. Data Analyst**\n- Description: ..."
    assert result.style_tag == "expert"
    prompt, config = invoker.calls[0]
    assert "CAREER STAGE: intermediate level" in prompt
    assert config.temperature == 0.7
    assert config.top_k == 40
    assert config.stop_sequences == ["END_OF_RESPONSE"]

@pytest.mark.asyncio
async def test_advise_unknown_style_uses_structured_but_echoes_tag():
    """Test an unknown style renders structured and keeps the submitted tag"""
    invoker = FakeInvoker()
    relay = AdvisorRelay(invoker)

    result = await relay.advise(AdviceRequest(interests="I love design work", promptStyle="fancy"))

    assert result.style_tag == "fancy"
    assert invoker.calls[0][0].startswith("\nYou are a senior career counselor")

@pytest.mark.asyncio
@pytest.mark.parametrize("status, kind", [
    (429, ModelErrorKind.RATE_LIMITED),
    (400, ModelErrorKind.BAD_REQUEST),
    (403, ModelErrorKind.FORBIDDEN),
    (503, ModelErrorKind.UNKNOWN),
])
async def test_advise_maps_model_errors(status, kind):
    """Test each provider failure becomes the advice page's message"""
    relay = AdvisorRelay(FakeInvoker(error=ProviderError(status)))

    result = await relay.advise(AdviceRequest(interests="I love coding and want a career in tech"))

    assert result.style_tag == "error"
    assert result.text == ERROR_MESSAGES[Endpoint.ADVICE][kind]

@pytest.mark.asyncio
async def test_call_model_times_out():
    """Test a slow model surfaces as a TIMEOUT model error"""
    relay = AdvisorRelay(FakeInvoker(delay=1), timeout=0.01)

    with pytest.raises(ModelError) as excinfo:
        await relay.call_model("prompt", None)

    assert excinfo.value.kind == ModelErrorKind.TIMEOUT

@pytest.mark.asyncio
async def test_advise_timeout_message():
    """Test a timeout renders the timeout message"""
    relay = AdvisorRelay(FakeInvoker(delay=1), timeout=0.01)

    result = await relay.advise(AdviceRequest(interests="I love coding and want a career in tech"))

    assert result.text == TIMEOUT_MESSAGE

@pytest.mark.asyncio
async def test_call_model_propagates_cancellation():
    """Test cancelling the caller cancels the outbound call"""
    invoker = FakeInvoker(delay=10)
    relay = AdvisorRelay(invoker, timeout=30)

    task = asyncio.create_task(relay.call_model("prompt", None))
    await asyncio.sleep(0.01)
    task.cancel()

    with pytest.raises(asyncio.CancelledError):
        await task

@pytest.mark.asyncio
async def test_chat_empty_message_is_not_an_error():
    """Test an empty chat message gets a prompt to share more"""
    invoker = FakeInvoker()
    relay = AdvisorRelay(invoker)

    reply = await relay.chat(ChatRequest(message="  "))

    assert reply.error is False
    assert reply.response == "🤔 Please share something about your career interests or ask me anything!"
    assert invoker.calls == []

@pytest.mark.asyncio
async def test_chat_sends_context_with_chat_settings():
    """Test chat uses the conversation context and chat sampling"""
    invoker = FakeInvoker(reply="Sure, let's talk about nursing.")
    relay = AdvisorRelay(invoker)

    reply = await relay.chat(ChatRequest(
        message="Tell me about nursing",
        conversationHistory=[{"role": "user", "content": "hi"}, {"role": "assistant", "content": "Hello!"}],
    ))

    assert reply.response == "Sure, let's talk about nursing."
    assert reply.error is False
    prompt, config = invoker.calls[0]
    assert "Previous conversation:\nuser: hi\nassistant: Hello!\n\n" in prompt
    assert prompt.endswith("User: Tell me about nursing\nAssistant:")
    assert config.temperature == 0.8
    assert config.max_output_tokens == 1024

@pytest.mark.asyncio
async def test_chat_rate_limited():
    """Test a rate-limited chat returns the chat wording with error set"""
    relay = AdvisorRelay(FakeInvoker(error=ProviderError(429)))

    reply = await relay.chat(ChatRequest(message="What jobs suit a biology degree?"))

    assert reply.error is True
    assert reply.response == "I'm getting too many messages right now. Please wait a moment and try again!"

@pytest.mark.asyncio
async def test_chat_forbidden_uses_generic_message():
    """Test chat has no dedicated 403 wording"""
    relay = AdvisorRelay(FakeInvoker(error=ProviderError(403)))

    reply = await relay.chat(ChatRequest(message="What jobs suit a biology degree?"))

    assert reply.response == "Sorry, I'm having trouble right now. Please try again!"

@pytest.mark.asyncio
async def test_learning_path_requires_target_career():
    """Test a blank career is rejected without a model call"""
    invoker = FakeInvoker()
    relay = AdvisorRelay(invoker)

    result = await relay.learning_path(LearningPathRequest(targetCareer=" "))

    assert result.model_dump(by_alias=True) == {
        "response": "Please specify what career you're interested in!",
        "error": True,
    }
    assert invoker.calls == []

@pytest.mark.asyncio
async def test_learning_path_success():
    """Test the roadmap comes back under learningPath"""
    invoker = FakeInvoker(reply="🎯 LEARNING PATH OVERVIEW ...")
    relay = AdvisorRelay(invoker)

    result = await relay.learning_path(LearningPathRequest(targetCareer="Cloud Engineer", budget="free"))

    assert result.model_dump(by_alias=True) == {
        "learningPath": "🎯 LEARNING PATH OVERVIEW ...",
        "error": False,
    }
    assert invoker.calls[0][1].top_k is None

@pytest.mark.asyncio
async def test_learning_path_rate_limited():
    """Test learning path rate-limit wording"""
    relay = AdvisorRelay(FakeInvoker(error=ProviderError(429)))

    result = await relay.learning_path(LearningPathRequest(targetCareer="Cloud Engineer"))

    assert result.model_dump(by_alias=True) == {
        "response": "Too many requests. Please wait a moment and try again!",
        "error": True,
    }

@pytest.mark.asyncio
async def test_compare_prompt_styles_runs_three_styles_in_order():
    """Test the comparison calls structured, expert, conversational with pauses"""
    invoker = FakeInvoker(reply="text")
    relay = AdvisorRelay(invoker, prompt_test_delay=1.0)

    with patch("career_advisor.services.advisor_service.asyncio.sleep", new=AsyncMock()) as sleep:
        results = await relay.compare_prompt_styles("web development and design")

    assert list(results) == ["structured", "expert", "conversational"]
    assert set(results.values()) == {"text"}
    assert len(invoker.calls) == 3
    assert "CAREER STAGE: entry level" in invoker.calls[1][0]
    assert all(config is None for _, config in invoker.calls)
    assert sleep.await_count == 3
    sleep.assert_awaited_with(1.0)

@pytest.mark.asyncio
async def test_compare_prompt_styles_reports_errors_per_style():
    """Test a failing call reports its message instead of text"""
    relay = AdvisorRelay(FakeInvoker(error=ProviderError(500, "upstream exploded")), prompt_test_delay=0)

    results = await relay.compare_prompt_styles("art")

    assert results == {
        "structured": "Error: upstream exploded",
        "expert": "Error: upstream exploded",
        "conversational": "Error: upstream exploded",
    }
