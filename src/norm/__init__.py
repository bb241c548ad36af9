"""
norm - Composable SQL statement builders.

Builds SELECT/INSERT/UPDATE/DELETE/DDL statements from `?`-placeholder
fragments, inlining every value as an escaped SQL literal.
"""

__version__ = "0.1.0"
