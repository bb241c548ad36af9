"""
Unit tests for DDL statements.
"""

import pytest

from norm.sql import InvalidArgNumberError, alter, create, drop, truncate
from norm.sql.operations.ddl import DDLKeyword, DDLStatement

pytestmark = pytest.mark.unit


@pytest.mark.parametrize(
    "stmt, expected",
    [
        (
            create(
                "INDEX IF NOT EXISTS ? ON ? (?)",
                "ix_users_created_at",
                "users",
                "created_at",
            ),
            "CREATE INDEX IF NOT EXISTS ix_users_created_at ON users (created_at)",
        ),
        (
            alter("TABLE ? ADD COLUMN ? ?", "users", "address", "text"),
            "ALTER TABLE users ADD COLUMN address text",
        ),
        (drop("TABLE ? CASCADE", "users"), "DROP TABLE users CASCADE"),
        (truncate("TABLE ? CASCADE", "users"), "TRUNCATE TABLE users CASCADE"),
    ],
    ids=["create", "alter", "drop", "truncate"],
)
def test_ddl_cases(stmt, expected):
    """DDL string values are interpolated unquoted."""
    assert stmt.render() == expected


class TestDDLStatement:
    """Tests for DDLStatement details."""

    def test_comment(self):
        stmt = truncate("TABLE ? CASCADE", "users").comment("request id: ?", 12435)
        assert stmt.render() == "-- request id: 12435\nTRUNCATE TABLE users CASCADE"

    def test_comment_values_quoted(self):
        """Comments keep the regular quoting rules."""
        stmt = drop("TABLE ?", "users").comment("by ?", "admin")
        assert stmt.render() == "-- by 'admin'\nDROP TABLE users"

    def test_pre_quoted_literal(self):
        stmt = alter("TABLE ? ALTER COLUMN ? SET DEFAULT ?", "users", "role", "'member'")
        assert stmt.render() == "ALTER TABLE users ALTER COLUMN role SET DEFAULT 'member'"

    def test_non_string_values(self):
        stmt = alter("TABLE ? ALTER COLUMN ? SET DEFAULT ?", "users", "active", True)
        assert stmt.render() == "ALTER TABLE users ALTER COLUMN active SET DEFAULT true"

    def test_keyword(self):
        assert create("TABLE t ()").keyword is DDLKeyword.CREATE
        assert DDLStatement("DROP", "TABLE t").render() == "DROP TABLE t"

    def test_invalid_arg_number(self):
        with pytest.raises(InvalidArgNumberError):
            create("TABLE ? (id int)").render()
