"""Core interfaces/abstractions.

Why:
- Define contracts (Protocol) implemented by concrete adapters.
- Invert dependencies: the core depends on abstractions (random source,
  renderers), never on cowsay or rich directly.
"""
