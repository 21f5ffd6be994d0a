"""
LEXIKON - Property-Based Testing Suite

Property-based testing using Hypothesis to discover edge cases and invariants
in grid placement, paradigm building and resolution, and fuzzy matching.
"""
