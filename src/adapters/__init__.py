"""Adapters: venv inspection, theme/venv JSON files and the rich bridge."""
