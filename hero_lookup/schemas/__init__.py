"""Schemas - Pydantic models describing the wire format of hero data."""
