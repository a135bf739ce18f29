"""
Utility subpackage for helperkit.

This subpackage contains the small building blocks shared by the
structural helpers: canonical JSON serialisation used for structural
equality, safe key lookup over mappings and sequences, and basic
argument validation.
"""
