"""A minimal blockchain state machine built from pluggable pallets: system, balances and proof of existence."""

__version__ = "0.1.0"