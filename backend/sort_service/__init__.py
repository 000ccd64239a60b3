"""Sort Service Package: greeting, health probe, and validated numeric sort over HTTP.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
