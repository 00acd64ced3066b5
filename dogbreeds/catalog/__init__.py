"""
Breed catalog.

Responsibilities:
- Define the immutable Breed record and its nested value types.
- Load the JSON catalog, turning bare-name entries into full records.
- Cache the default catalog for the lifetime of the process.
"""
