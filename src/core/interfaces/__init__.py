"""Core interfaces/abstractions.

Why:
- Define contracts (Protocol) implemented by concrete adapters.
- The core depends on abstractions, never on the filesystem layout.
"""
