"""Command line front-end for rofi-keys."""
