"""Adapters connecting the core to concrete transports."""
