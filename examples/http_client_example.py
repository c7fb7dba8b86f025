#!/usr/bin/env python
"""
HTTP Client Example

Demonstrates how to use HttpTransport for JSON-RPC 2.0 single and batch calls.
Configuration is read from SEAM_RPC_* environment variables.
"""

import asyncio
import logging

from seam_rpc.config import TransportConfig
from seam_rpc.errors import SeamRpcError
from seam_rpc.protocol import correlate
from seam_rpc.telemetry.tracer import setup_tracer, create_span
from seam_rpc.telemetry.metrics import setup_metrics

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


async def run(config: TransportConfig):
    """Send one call and one batch, then print outcomes in submission order"""
    async with config.build() as transport:
        logger.info("Sending single request...")
        response = await transport.send("web3_clientVersion")
        outcome = response.outcome
        if outcome.is_success:
            logger.info(f"Result: {outcome.result}")
        else:
            logger.error(f"RPC error {outcome.error.code}: {outcome.error.message}")

        logger.info("Sending batch request...")
        calls = [
            transport.prepare("eth_blockNumber"),
            transport.prepare("eth_chainId", []),
            transport.prepare("net_version"),
        ]
        with create_span("example batch"):
            response = await transport.execute_batch(calls)

        correlation = correlate(calls, response)
        for call, outcome in correlation.pairs:
            if outcome is None:
                logger.warning(f"{call.method} (id {call.id}): no reply")
            elif outcome.is_success:
                logger.info(f"{call.method} (id {call.id}): {outcome.result}")
            else:
                logger.error(f"{call.method} (id {call.id}): error {outcome.error.code} {outcome.error.message}")
        for orphan in correlation.orphans:
            logger.warning(f"Unmatched outcome: {orphan}")


def main():
    """Run HTTP client example"""
    # Setup OpenTelemetry
    setup_tracer("http-client-example")
    setup_metrics("http-client-example")

    config = TransportConfig.from_env()
    logger.info(f"Transport config: {config.to_dict()}")

    try:
        asyncio.run(run(config))
    except SeamRpcError as e:
        logger.error(f"Error occurred while running client: {str(e)}")

    logger.info("Client exited")


if __name__ == "__main__":
    main()
