"""API Schemas — Pydantic response models for the HTTP boundary.

Invariants:
    - Response models are built from domain records (from_attributes)
    - Request bodies are NOT modelled here: malformed bodies must reach
      service validation as an empty object instead of a framework 422
"""
