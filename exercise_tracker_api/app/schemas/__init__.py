"""
Pydantic schema definitions for API payloads.

Request bodies may arrive as JSON or as HTML form data, so they are
read as plain mappings and checked in the service layer.  The models
here describe the response bodies.
"""
