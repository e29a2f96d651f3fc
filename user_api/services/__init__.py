"""Services Layer — async controllers that orchestrate repository calls.

Invariants:
    - Controllers receive collaborators by injection, never construct them
    - Pure checks live in core/; controllers only sequence IO around them
"""
