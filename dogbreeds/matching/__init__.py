"""
Text matching primitives.

Responsibilities:
- Canonicalize strings for comparison (trim, case-fold).
- Compute Levenshtein edit distance.
- Resolve a query to the first matching breed in catalog order.
"""
