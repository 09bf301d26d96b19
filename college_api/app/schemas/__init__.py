"""
Pydantic schema definitions for API payloads.

Request bodies carry the validation rules for user input; response
models are frozen so a cached instance can be served as-is.
"""
