"""Hero Lookup Package - HTTP lookup of hero names and power statistics.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""

__version__ = "1.0.0"
