"""Delivery mechanisms exposing the application (HTTP and websockets)."""
