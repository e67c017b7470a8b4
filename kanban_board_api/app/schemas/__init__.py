"""
Pydantic schema definitions.

``board``, ``column`` and ``task`` hold the stored entity models and
the request payloads for each of them; ``response`` holds the envelope
every endpoint answers with.  All models use camelCase aliases so the
wire format matches the stored documents.
"""
