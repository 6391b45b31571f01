"""Observability configuration using Logfire.

Service objects open one span per run and log failures, so configuring
Logfire is all that is needed to see every service invocation:

    import logfire

    logfire.info("Domain registered", fqdn=fqdn, domain_id=domain_id)

    with logfire.span("checkout", cart_item_id=item_id):
        ...
"""

import logfire

from storefront.config import Settings


def configure_logfire(settings: Settings) -> None:
    """Configure Logfire for observability.

    - Development: local-only unless a token is provided, rich console output
    - Production: cloud sending when a token is provided

    Args:
        settings: Application settings
    """
    # Priority: explicit setting > token presence > default (False)
    if settings.observability.send_to_logfire is not None:
        send_to_logfire = settings.observability.send_to_logfire
    elif settings.observability.logfire_token:
        send_to_logfire = True
    else:
        send_to_logfire = False

    config_kwargs = {
        "service_name": "storefront-services",
        "service_version": "1.0.0",
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
        has_token=bool(settings.observability.logfire_token),
    )


def instrument_httpx() -> None:
    """Instrument httpx so registrar requests show up as child spans."""
    logfire.instrument_httpx()
    logfire.info("httpx instrumented")
