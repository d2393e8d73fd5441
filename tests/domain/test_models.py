"""Tests for domain/models.py — reports and the shared run context."""

import asyncio

import pytest

from concatenate.domain.models import Action, ExecutionReport, RunContext


def run(coro):
    """Helper to run async functions in sync tests."""
    return asyncio.run(coro)


class TestAction:
    def test_accepts_file_keys(self):
        a = Action.model_validate({"id": "x", "label": "X", "command": "echo"})
        assert a.identifier == "x"
        assert a.is_selectable is True

    def test_without_id(self):
        a = Action(label="X", command="echo")
        assert a.identifier is None
        assert a.is_selectable is False

    def test_empty_id_is_not_selectable(self):
        assert Action(identifier="", label="X", command="echo").is_selectable is False


class TestExecutionReport:
    def test_message_is_stderr_then_stdout(self):
        report = ExecutionReport(title="t", exit_code=1, stdout="out\n", stderr="err\n")
        assert report.message == "err\n\n\nout"

    def test_message_trimmed_when_stderr_empty(self):
        report = ExecutionReport(title="t", exit_code=1, stdout="only out\n")
        assert report.message == "only out"

    def test_message_empty(self):
        assert ExecutionReport(title="t", exit_code=0).message == ""

    def test_succeeded(self):
        assert ExecutionReport(title="t", exit_code=0).succeeded is True
        assert ExecutionReport(title="t", exit_code=2).succeeded is False
        assert ExecutionReport(title="t", exit_code=-9).succeeded is False

    def test_frozen(self):
        report = ExecutionReport(title="t", exit_code=0)
        with pytest.raises(Exception):
            report.exit_code = 1


class TestRunContext:
    def test_empty(self):
        context = RunContext()
        assert context.reports == ()
        assert context.failed is False

    def test_record_and_failures(self):
        context = RunContext()
        ok = ExecutionReport(title="ok", exit_code=0)
        bad = ExecutionReport(title="bad", exit_code=1)
        run(context.record(ok))
        run(context.record(bad))

        assert context.reports == (ok, bad)
        assert context.failures == (bad,)
        assert context.failed is True

    def test_concurrent_records_are_all_kept(self):
        context = RunContext()

        async def add(i):
            await asyncio.sleep(0)
            await context.record(ExecutionReport(title=f"r{i}", exit_code=0))

        async def main():
            await asyncio.gather(*(add(i) for i in range(50)))

        run(main())
        assert sorted(r.title for r in context.reports) == sorted(f"r{i}" for i in range(50))

    def test_reports_is_a_snapshot(self):
        context = RunContext()
        snapshot = context.reports
        run(context.record(ExecutionReport(title="x", exit_code=0)))
        assert snapshot == ()
        assert len(context.reports) == 1
