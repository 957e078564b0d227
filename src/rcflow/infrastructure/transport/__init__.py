"""
RC Node transport adapters.
"""

from rcflow.infrastructure.transport.http import (
    HttpNodeTransport,
    HttpTransportConfig,
)
from rcflow.infrastructure.transport.simulated import SimulatedNodeTransport

__all__ = [
    "HttpNodeTransport",
    "HttpTransportConfig",
    "SimulatedNodeTransport",
]
