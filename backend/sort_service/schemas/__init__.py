"""Pydantic Schemas: response contracts for API endpoints."""
