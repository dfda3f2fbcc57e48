"""Adapters implementing the host-capability interfaces."""
