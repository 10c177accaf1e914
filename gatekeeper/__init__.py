"""Gatekeeper: sign-up and token issuance backend."""

__version__ = "0.1.0"
