"""
Catalog ingestion.

Responsibilities:
- Read a spreadsheet-style CSV export of breed attributes.
- Normalize it into the canonical Breed schema.
- Persist the result as the JSON catalog the engine loads.
"""
