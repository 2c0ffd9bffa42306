"""Domain models and entities.

Why here:
- Pure, strict data structures (Pydantic v2) live here.
- The domain knows nothing about the CLI, rendering libraries or files:
  only the concepts of the problem.
"""
