from langchain_openai import ChatOpenAI
from career_advisor.config.settings import Settings
from career_advisor.core.logging import get_logger
from career_advisor.services.model_invoker import GeminiInvoker, LangChainInvoker

logger = get_logger(__name__)


def _api_key(settings: Settings):
    return settings.api_key.get_secret_value() if settings.api_key else None


# Use a factory functions to create model invokers

def create_gemini_invoker(settings: Settings):
    logger.info("creating_gemini_invoker", model=settings.llm_model)
    return GeminiInvoker(api_key=_api_key(settings), model=settings.llm_model)

def create_openai_invoker(settings: Settings):
    logger.info("creating_openai_invoker",
        model=settings.llm_model,
        base_url=settings.openai_base_url or "default",
        api_key_configured=settings.api_key is not None
    )

    llm = ChatOpenAI(
        base_url=settings.openai_base_url,
        # Placeholder keeps startup working; the call itself is rejected later
        api_key=_api_key(settings) or "not-set",
        model=settings.llm_model,
        timeout=settings.llm_timeout_seconds,
        max_retries=0
    )
    return LangChainInvoker(llm)


# Create a registry of available providers
LLM_REGISTRY = {
    "gemini": create_gemini_invoker,
    "openai": create_openai_invoker,
}

def list_providers() -> list[str]:
    """List all registered provider names"""
    return list(LLM_REGISTRY.keys())

# Function to initialize the configured provider
def initialize_invoker(settings: Settings):
    """
    Create the invoker for settings.llm_provider

    Raises:
        KeyError: If the provider is not registered
    """
    provider = settings.llm_provider.lower().strip()
    if provider not in LLM_REGISTRY:
        raise KeyError(f"LLM provider '{settings.llm_provider}' not registered")

    invoker = LLM_REGISTRY[provider](settings)
    logger.info("llm_initialized", provider=provider)
    return invoker
