#!/usr/bin/env python3
"""Run a domain checkout against the configured registrar.

Reads a JSON document describing the checkout:

    {
        "account_id": "0b6f...",
        "service": {"id": "5c1e...", "name": "Domain", "data": {}},
        "shopping_cart_item": {
            "id": "91aa...",
            "data": {"meta": {"domain": "example.com"}},
            "order_item": {"id": "77d0...", "renewable_service_id": "5c1e..."}
        },
        "contact": {"data": {"id": "contact-42"}}
    }

Prints the updated renewable service, or the errors payload on failure.
"""

import argparse
import json
import sys
from pathlib import Path
from uuid import UUID

import logfire

from storefront.application.service import ServiceError
from storefront.application.service.factory import ServiceFactory
from storefront.config import Settings
from storefront.domain.model import RenewableService
from storefront.domain.repository import RenewableServiceRepository
from storefront.domain.value import AccountId
from storefront.util.di.container import create_container
from storefront.util.logging import get_logger, setup_logging
from storefront.util.observability import configure_logfire, instrument_httpx


logger = get_logger(__name__)


def main() -> int:
    """Run the checkout described by the input file."""
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("checkout", type=Path, help="Path to checkout JSON document")
    args = parser.parse_args()

    settings = Settings()
    setup_logging(settings)
    configure_logfire(settings)
    instrument_httpx()

    document = json.loads(args.checkout.read_text())
    account_id = AccountId(UUID(document["account_id"]))
    service = RenewableService.model_validate(
        {**document["service"], "account_id": document["account_id"]}
    )

    container = create_container()
    try:
        with container() as request_container:
            request_container.get(RenewableServiceRepository).save(service)
            factory = request_container.get(ServiceFactory)
            checkout = factory.domain_checkout(
                {
                    "shopping_cart_item": document["shopping_cart_item"],
                    "contact": document["contact"],
                },
                account_id,
            )
            try:
                result = checkout.run()
            except ServiceError as e:
                logger.warning("Checkout failed: %s", e.message)
                errors = {**e.errors, "error_type": type(e).__name__}
                print(json.dumps(errors, default=str, indent=2), file=sys.stderr)
                return 1

        print(result.model_dump_json(indent=2))
        return 0
    except Exception as e:
        logfire.error(
            "Checkout run failed",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        raise
    finally:
        container.close()


if __name__ == "__main__":
    sys.exit(main())
