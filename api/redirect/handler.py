"""AWS Lambda entry point (HTTP API payload v2 / CloudFront-fronted).

Handler: api.redirect.handler.redirect_handler
"""

from loguru import logger

from api.redirect.log_config import setup_logging
from lib.redirect.models import RedirectRequest, server_error_response
from services.redirect import handle_request

setup_logging()


def redirect_handler(event, context=None) -> dict:
    """Translate the Lambda event, resolve it, return a proxy response dict.

    A malformed event gets the same generic 500 as any other failure.
    """
    try:
        request = RedirectRequest.from_event(event)
    except Exception:
        logger.exception("Malformed redirect event")
        return server_error_response().to_event()
    return handle_request(request).to_event()
