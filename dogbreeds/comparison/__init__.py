"""
Side-by-side breed comparison.

Responsibilities:
- Resolve two breed queries, failing loudly when either is unknown.
- Report each tracked field for both breeds with an equality flag.
"""
