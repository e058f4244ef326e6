"""Observability configuration using Logfire.

Usage:
    import logfire

    logfire.info("Vote transition applied", action="create")

    with logfire.span("list_questions.execute", mode="tag"):
        ...
"""

from typing import Optional

import httpx
import logfire

from ask.config import Settings


def configure_logfire(settings: Settings, console: bool = True) -> None:
    """Configure Logfire for observability.

    Telemetry goes to Logfire cloud only when explicitly enabled or when a
    token is configured; otherwise it stays on the console.

    Args:
        settings: Application settings
        console: Whether to print spans and logs to the console
    """
    # Priority: explicit setting > token presence > default (False)
    if settings.observability.send_to_logfire is not None:
        send_to_logfire = settings.observability.send_to_logfire
    elif settings.observability.logfire_token:
        send_to_logfire = True
    else:
        send_to_logfire = False

    config_kwargs = {
        "service_name": "ask-forum",
        "service_version": "0.1.0",
        "environment": settings.environment,
        "send_to_logfire": send_to_logfire,
        "console": logfire.ConsoleOptions(
            colors="auto",
            span_style="show-parents",
            include_timestamps=True,
            verbose=settings.debug,
        )
        if console
        else False,
    }

    if settings.observability.logfire_token:
        config_kwargs["token"] = settings.observability.logfire_token

    logfire.configure(**config_kwargs)

    logfire.info(
        "Observability configured",
        environment=settings.environment,
        debug=settings.debug,
        send_to_logfire=send_to_logfire,
        has_token=bool(settings.observability.logfire_token),
    )


def instrument_httpx(client: Optional[httpx.AsyncClient] = None) -> None:
    """Instrument httpx with Logfire.

    Traces outbound requests to the forum backend: method, URL, status and
    latency.

    Args:
        client: Client to instrument (all clients when omitted)
    """
    if client is None:
        logfire.instrument_httpx()
    else:
        logfire.instrument_httpx(client)
    logfire.info("httpx instrumented")
