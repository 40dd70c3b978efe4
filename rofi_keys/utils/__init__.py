"""Utility helpers shared by the rofi-keys core and CLI."""
