"""
Bulk catalog filters.

Responsibilities:
- Single-field filters (origin, size, temperament, energy, trainability,
  shedding, grooming needs, compatibility).
- Unit-aware weight range filtering with alias resolution.
"""
