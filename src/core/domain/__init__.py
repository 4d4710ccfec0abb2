"""Domain models and entities.

Why:
- Pure, strict data structures (Pydantic v2) live here.
- The domain knows nothing about the filesystem, the CLI or rich: only the
  descriptors themselves.
"""
