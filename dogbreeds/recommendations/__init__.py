"""
Recommendation matching.

Responsibilities:
- Accept sparse preferences (size, energy, shedding, compatibility, weight,
  lifespan, ...).
- Keep the breeds that satisfy every supplied preference.
- Return them in catalog order, unscored.
"""
