"""Connection self-test against the configured backend."""

import logging

from psti_chat.gateway.client import BackendGateway
from psti_chat.gateway.errors import GatewayError

logger = logging.getLogger(__name__)

PROBE_MESSAGE = "halo"


async def run_connection_check(gateway: BackendGateway) -> bool:
    """Check /health, then send a probe message through /chat.

    Args:
        gateway: Gateway to exercise.

    Returns:
        True if both the health probe and the chat round trip succeed.
    """
    info = gateway.get_config()
    logger.info(f"Testing connection to {info.base_url} ({info.environment})")

    health = await gateway.check_health()
    logger.info(f"Health: {health.model_dump(exclude_none=True)}")
    if not health.available:
        logger.error("Backend is not available")
        return False

    try:
        result = await gateway.send(PROBE_MESSAGE)
    except GatewayError as e:
        logger.error(f"Chat test failed: {e.hint}")
        return False

    logger.info(f"Chat response from '{result.source}': {result.text}")
    return True
