"""Integrations with third-party graph libraries."""

from bridges.lib.nx import to_networkx

__all__ = ["to_networkx"]
