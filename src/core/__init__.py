"""Core: domain models, configuration and interfaces.

No rich, typer or filesystem layout knowledge lives here.
"""
