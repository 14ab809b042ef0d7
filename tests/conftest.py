# tests/conftest.py
import asyncio
import pytest

from career_advisor.app import create_app
from career_advisor.config.settings import Settings


class FakeInvoker:
    """Stands in for the external model; records every prompt it receives"""

    def __init__(self, reply="Mock career advice", error=None, delay=0.0):
        self.reply = reply
        self.error = error
        self.delay = delay
        self.calls = []

    async def invoke(self, prompt, config=None):
        self.calls.append((prompt, config))
        if self.delay:
            await asyncio.sleep(self.delay)
        if self.error is not None:
            raise self.error
        return self.reply


class ProviderError(Exception):
    """Mimics an SDK exception carrying an HTTP status"""

    def __init__(self, status_code, message="provider failure"):
        super().__init__(message)
        self.status_code = status_code


@pytest.fixture
def settings():
    return Settings(
        _env_file=None,
        api_key=None,
        log_to_console=False,
        log_file=None,
        prompt_test_delay_seconds=0,
        llm_timeout_seconds=5,
    )


@pytest.fixture
def invoker():
    return FakeInvoker()


@pytest.fixture
def app(settings, invoker):
    return create_app(settings=settings, invoker=invoker)


@pytest.fixture
def client(app):
    return app.test_client()
