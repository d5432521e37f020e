"""
Pydantic schemas for API request and response validation.

Model replies are untrusted: response schemas default every field so a
partial or mistyped reply still produces a valid model.
"""
