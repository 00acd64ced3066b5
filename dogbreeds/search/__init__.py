"""
Typo-tolerant breed search.

Responsibilities:
- Collect containment matches on breed names in catalog order.
- Collect edit-distance matches within a distance budget, closest first.
- Keep containment matches ahead of every edit-distance match.
"""
