#!/usr/bin/env python3
"""
Career Advisor CLI - Interactive chat against a running advisor server
"""
import asyncio
import sys
import httpx
from rich.console import Console
from rich.prompt import Prompt

from advisor_cli.config import Config
from advisor_cli.state import state
from advisor_cli.display import (
    show_header,
    show_error,
    show_info,
    show_reply,
    display_health,
)
from advisor_cli.api_client import APIClient
from advisor_cli.models import ChatRequest, LearningPathRequest

console = Console()

HELP_TEXT = "Commands: 'path' learning path, 'health' server status, 'clear' reset chat, 'exit' quit"


def show_http_error(error: Exception, config: Config):
    """Translate transport errors into a short message"""
    if isinstance(error, httpx.HTTPStatusError):
        if error.response.status_code >= 500:
            show_error("Server error - please try again later")
        else:
            show_error(f"HTTP {error.response.status_code}: {error.response.text}")
    elif isinstance(error, httpx.ConnectError):
        show_error(f"Cannot connect to API at {config.api_base_url}")
        show_info("Make sure the server is running (career-advisor)")
    elif isinstance(error, httpx.TimeoutException):
        show_error("Request timed out - the model may be busy")
    else:
        show_error(f"Unexpected error: {error}")


async def send_message(client: APIClient, message: str):
    """Send one chat message and record the exchange"""
    request = ChatRequest(message=message, conversation_history=state.history)
    reply = await client.chat(request)
    show_reply(reply.response, is_error=reply.error)
    # Failed replies stay out of the context sent next time
    if not reply.error:
        state.record_exchange(message, reply.response)


async def learning_path_menu(client: APIClient):
    """Collect learning path fields and print the roadmap"""
    show_header("Learning Path")

    target = console.input("[cyan]Target career:[/cyan] ").strip()
    if not target:
        show_error("Target career cannot be empty")
        return

    skills = console.input("[cyan]Current skills (optional):[/cyan] ").strip()
    timeline = console.input("[cyan]Time commitment:[/cyan] ").strip()
    learning_style = console.input("[cyan]Learning style:[/cyan] ").strip()
    budget = console.input("[cyan]Budget:[/cyan] ").strip()

    request = LearningPathRequest(
        target_career=target,
        current_skills=skills or None,
        timeline=timeline or None,
        learning_style=learning_style or None,
        budget=budget or None,
    )

    show_info("Building your learning path...")
    result = await client.learning_path(request)
    show_reply(result.text, is_error=result.error)


async def chat_loop(config: Config):
    """Read messages until the user quits"""
    client = APIClient(config)
    show_header("AI Career Advisor")
    console.print(f"[dim]{HELP_TEXT}[/dim]\n")

    while True:
        try:
            message = Prompt.ask("\n[bold cyan]You[/bold cyan]").strip()
        except (KeyboardInterrupt, EOFError):
            console.print("\n\n[yellow]Goodbye![/yellow]")
            break

        if not message:
            continue

        command = message.lower()
        if command in ('exit', 'quit', 'q'):
            console.print("\n[yellow]Goodbye![/yellow]")
            break

        try:
            if command == 'clear':
                state.clear()
                show_info("Conversation cleared")
            elif command == 'health':
                display_health(await client.health(), state.turn_count)
            elif command == 'path':
                await learning_path_menu(client)
            else:
                await send_message(client, message)
        except (httpx.HTTPError, ValueError) as e:
            show_http_error(e, config)


def main():
    """Main entry point"""
    config = Config.load()
    try:
        asyncio.run(chat_loop(config))
    except KeyboardInterrupt:
        console.print("\n[yellow]Interrupted by user[/yellow]")
    return 0


if __name__ == "__main__":
    sys.exit(main())
