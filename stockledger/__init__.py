"""stockledger: inventory and transaction tracker service."""

__version__ = "0.1.0"
