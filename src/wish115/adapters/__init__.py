"""Adapters (implementações das interfaces do núcleo)."""
