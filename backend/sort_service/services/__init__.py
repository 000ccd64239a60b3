"""Services Layer: request handlers that sit between routes and the pure core.

Invariants:
    - Services turn raw request data into HTTP responses
    - Domain decisions live in core/, services only wire them together
"""
