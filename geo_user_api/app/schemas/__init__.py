"""
Pydantic schema definitions for API payloads.

Request schemas double as the input validator of the HTTP layer;
response envelopes live in ``response``.
"""
