"""Infrastructure Layer — process-wide logging setup.

Invariants:
    - Nothing here changes controller outcomes; it only shapes log output
"""
