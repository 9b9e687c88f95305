"""Port interfaces (Hexagonal Architecture)."""

from cmdbot.ports.inbound import CommandDispatcherPort
from cmdbot.ports.outbound import TransportPort

__all__ = [
    "CommandDispatcherPort",
    "TransportPort",
]
