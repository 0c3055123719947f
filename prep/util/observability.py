"""Observability configuration using Logfire.

Usage:
    import logfire

    logfire.info("User synced", external_id=external_id)

    with logfire.span("create_course", user_id=str(user_id)):
        ...
"""

import logfire
from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncEngine

from prep.config import Settings

# Attribute names redacted on top of logfire defaults
SCRUB_PATTERNS = ["bearer", "__session", "clerk"]


def configure_logfire(settings: Settings) -> None:
    """Configure Logfire for observability.

    Telemetry is sent to Logfire cloud when OBSERVABILITY__SEND_TO_LOGFIRE
    is true, or when it is unset and OBSERVABILITY__LOGFIRE_TOKEN is present.
    Otherwise output stays on the console.

    Args:
        settings: Application settings
    """
    if settings.observability.send_to_logfire is not None:
        send_to_logfire = settings.observability.send_to_logfire
    else:
        send_to_logfire = bool(settings.observability.logfire_token)

    config_kwargs = {
        "service_name": "prep-api",
        "scrubbing": logfire.ScrubbingOptions(extra_patterns=SCRUB_PATTERNS),
        "service_version": "0.1.0",
        "environment": settings.environment,
        "send_to_logfire": send_to_logfire,
        "console": logfire.ConsoleOptions(
            colors="auto",
            span_style="show-parents",
            include_timestamps=True,
            verbose=settings.debug,
        ),
    }

    if settings.observability.logfire_token:
        config_kwargs["token"] = settings.observability.logfire_token

    logfire.configure(**config_kwargs)

    logfire.info(
        "Observability configured",
        environment=settings.environment,
        debug=settings.debug,
        send_to_logfire=send_to_logfire,
    )


def instrument_fastapi(app: FastAPI) -> None:
    """Trace HTTP requests handled by the app, except health checks.

    Args:
        app: FastAPI application instance
    """

    def _map_request_attributes(request, attributes):
        # Drop the parsed body, it may carry profile fields
        result = {k: v for k, v in attributes.items() if k != "values"}
        result["path"] = request.url.path
        return result

    # Session cookies and bearer tokens must not end up in traces
    logfire.instrument_fastapi(
        app,
        capture_headers=False,
        request_attributes_mapper=_map_request_attributes,
        excluded_urls="/health",
    )
    logfire.info("FastAPI instrumented")


def instrument_sqlalchemy(engine: AsyncEngine) -> None:
    """Trace SQL queries issued through the engine.

    Args:
        engine: SQLAlchemy async engine
    """
    logfire.instrument_sqlalchemy(
        engine=engine.sync_engine,
        enable_commenter=True,
    )
    logfire.info("SQLAlchemy instrumented")


def instrument_httpx() -> None:
    """Trace outbound HTTP requests (identity provider, LeetCode)."""
    logfire.instrument_httpx()
    logfire.info("httpx instrumented")
