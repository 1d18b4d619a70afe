"""
Basic POST example using http_post_core.

This example sends a form-encoded POST and a raw JSON POST, tracing
the exchange through the standard logging module.
"""

import logging

from http_post_core import HTTPClient, HTTPCoreError, LoggingSink

# Configure logging
logging.basicConfig(level=logging.DEBUG)
logger = logging.getLogger(__name__)


def form_post():
    """Demonstrate a form-encoded POST."""
    logger.info("Making form POST request...")

    client = HTTPClient("http://httpbin.org/post", logger=LoggingSink())
    client.set_timeout(5)

    response = client.post(
        {"name": "Jane Doe", "amount": "9.99"},
        raw=False,
        content_type="application/x-www-form-urlencoded",
    )
    logger.info(f"Response status: {response.status_code} {response.status_text}")
    logger.info(f"Response body length: {response.content_length} bytes")


def json_post():
    """Demonstrate a raw POST over TLS with a read deadline."""
    logger.info("Making JSON POST request...")

    client = HTTPClient("https://httpbin.org/post", read_timeout=10)
    response = client.post('{"message": "Hello, World!"}', content_type="application/json")
    logger.info(f"Response status: {response.status_code}")
    logger.info(f"Response body: {response.text[:200]}")


def main():
    """Run all examples."""
    for example in (form_post, json_post):
        try:
            example()
        except HTTPCoreError as e:
            logger.error(f"{example.__name__} failed: {e}")


if __name__ == "__main__":
    main()
