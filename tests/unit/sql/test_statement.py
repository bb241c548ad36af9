"""
Unit tests for the Statement protocol, WITH / UNION clauses and the nesting guard.
"""

import io
import json
import logging
from concurrent.futures import ThreadPoolExecutor

import pytest

from norm.sql.core.errors import (
    EmptyWithAliasError,
    ErrorKind,
    InvalidArgNumberError,
    NestingTooDeepError,
    SQLBuildError,
)
from norm.sql.core.part import Part
from norm.sql.core.statement import Union, With
from norm.sql.operations.select import select

pytestmark = pytest.mark.unit


class TestWith:
    """Tests for With.build()."""

    def test_with(self):
        stmt = With("admins", select("id").from_("users").where("role = ?", "admin"))
        assert stmt.render() == (
            "WITH admins AS (SELECT id FROM users WHERE role = 'admin')"
        )

    def test_with_recursive(self):
        stmt = With("tree", select("id").from_("nodes"), recursive=True)
        assert stmt.render() == "WITH RECURSIVE tree AS (SELECT id FROM nodes)"

    def test_empty_alias_fails_before_writing(self):
        buf = io.StringIO()
        with pytest.raises(EmptyWithAliasError) as exc_info:
            With("", select("id").from_("users")).build(buf)

        assert buf.getvalue() == ""
        assert exc_info.value.kind is ErrorKind.EMPTY_WITH_ALIAS
        assert str(exc_info.value) == "statement: empty with clause alias"

    def test_empty_alias_fails_with_invalid_inner(self):
        """The alias check wins over errors of the inner statement."""
        with pytest.raises(EmptyWithAliasError):
            With("", Part("broken = ?")).render()

    def test_inner_error_propagates(self):
        with pytest.raises(InvalidArgNumberError):
            With("cte", Part("broken = ?")).render()


class TestUnion:
    """Tests for Union.build()."""

    def test_union(self):
        assert Union(select("id").from_("a")).render() == "UNION SELECT id FROM a"

    def test_union_all(self):
        stmt = Union(select("id").from_("a"), all=True)
        assert stmt.render() == "UNION ALL SELECT id FROM a"


class TestNestingGuard:
    """Tests for the nested statement depth limit."""

    def test_self_reference_fails(self):
        stmt = select("id")
        stmt.from_(stmt)

        with pytest.raises(NestingTooDeepError) as exc_info:
            stmt.render()

        assert exc_info.value.kind is ErrorKind.NESTING_TOO_DEEP
        assert exc_info.value.max_depth == 64

    def test_transitive_self_reference_fails(self):
        outer = select("id").from_("users")
        inner = select("id").from_("admins").where_in("id", outer)
        outer.where_in("id", inner)

        with pytest.raises(NestingTooDeepError):
            outer.render()

    def test_configured_limit(self, monkeypatch):
        monkeypatch.setenv("NORM_MAX_NESTING_DEPTH", "2")

        level2 = select("id").from_("c")
        level1 = select("id").from_("b").where_in("id", level2)
        top = select("id").from_("a").where_in("id", level1)
        assert top.render() == (
            "SELECT id FROM a WHERE id IN "
            "(SELECT id FROM b WHERE id IN (SELECT id FROM c))"
        )

        level2.where_in("id", select("id").from_("d"))
        with pytest.raises(NestingTooDeepError) as exc_info:
            top.render()
        assert exc_info.value.max_depth == 2

    def test_depth_reset_after_failure(self, monkeypatch):
        monkeypatch.setenv("NORM_MAX_NESTING_DEPTH", "1")

        broken = select("id").from_("a").where_in(
            "id", select("id").from_("b").where_in("id", select("id").from_("c"))
        )
        with pytest.raises(NestingTooDeepError):
            broken.render()

        ok = select("id").from_("a").where_in("id", select("id").from_("b"))
        assert ok.render() == "SELECT id FROM a WHERE id IN (SELECT id FROM b)"

    def test_errors_share_base_class(self):
        stmt = select("id")
        stmt.from_(stmt)

        with pytest.raises(SQLBuildError):
            stmt.render()


class TestRender:
    """Tests for Statement.render()."""

    @pytest.fixture
    def stmt(self):
        return (
            select("id", "email")
            .from_("users")
            .where("role = ?", "admin")
            .where_in("team", select("id").from_("teams").where("active = ?", True))
            .order_desc("id")
            .limit(10)
        )

    def test_render_twice_identical(self, stmt):
        assert stmt.render() == stmt.render()

    def test_concurrent_renders(self, stmt):
        expected = stmt.render()
        with ThreadPoolExecutor(max_workers=8) as pool:
            results = list(pool.map(lambda _: stmt.render(), range(32)))

        assert results == [expected] * 32

    def test_render_logs_event(self, stmt, caplog):
        caplog.set_level(logging.DEBUG)
        query = stmt.render()

        events = [json.loads(r.message) for r in caplog.records]
        rendered = [e for e in events if e.get("event") == "sql.rendered"]
        assert rendered
        assert rendered[-1]["statement"] == "SelectStatement"
        assert rendered[-1]["length"] == len(query)
        assert "sql" not in rendered[-1]

    def test_render_logs_sql_when_enabled(self, stmt, caplog, monkeypatch):
        monkeypatch.setenv("NORM_LOG_SQL", "true")
        caplog.set_level(logging.DEBUG)
        query = stmt.render()

        events = [json.loads(r.message) for r in caplog.records]
        rendered = [e for e in events if e.get("event") == "sql.rendered"]
        assert rendered[-1]["sql"] == query

    def test_render_failure_logged(self, caplog):
        caplog.set_level(logging.INFO)
        with pytest.raises(InvalidArgNumberError):
            select("id").from_("users").where("id = ?").render()

        events = [json.loads(r.message) for r in caplog.records]
        failed = [e for e in events if e.get("event") == "sql.render_failed"]
        assert failed
        assert failed[-1]["error_kind"] == "invalid_arg_number"
        assert failed[-1]["statement"] == "SelectStatement"
