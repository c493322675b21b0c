# =============================================================================
# tests/test_bootstrap.py - Startup Sequence Tests
# =============================================================================
# This module contains tests for:
# - Bootstrapper step ordering and fail-fast behaviour
# - BootstrapOutcome exit codes
# - The lifespan: bootstrap runs in the background, failures reach the
#   failure handler, shutdown closes the database
# =============================================================================

import asyncio
import logging

import pytest

from app.main import exit_process, lifespan, run_bootstrap
from core.models.bootstrap import BootstrapOutcome
from core.services.bootstrap_service import Bootstrapper
from lib.mongodb_client import DatabaseConnectionError
from tests.fakes import FakeDatabase, FakeMediaStorage


# =============================================================================
# BootstrapOutcome
# =============================================================================

class TestBootstrapOutcome:
    """Exit codes derived from the outcome."""

    def test_success_exits_zero(self):
        assert BootstrapOutcome.succeeded(("MongoDB", "Cloudinary")).exit_code == 0

    def test_failure_exits_non_zero(self):
        outcome = BootstrapOutcome.failed((), "MongoDB", "connection refused")
        assert outcome.exit_code == 1
        assert outcome.failed_step == "MongoDB"


# =============================================================================
# Bootstrapper
# =============================================================================

class TestBootstrapper:
    """Sequencing of connection steps."""

    async def test_steps_run_in_order(self):
        calls = []
        database = FakeDatabase(calls=calls)
        media = FakeMediaStorage(calls=calls)

        outcome = await Bootstrapper([
            ("MongoDB", database.connect),
            ("Cloudinary", media.connect),
        ]).initialize()

        assert calls == ["database", "media"]
        assert outcome.success is True
        assert outcome.completed_steps == ("MongoDB", "Cloudinary")

    async def test_database_failure_skips_media_storage(self):
        calls = []
        database = FakeDatabase(fail_with=DatabaseConnectionError("connection refused"), calls=calls)
        media = FakeMediaStorage(calls=calls)

        outcome = await Bootstrapper([
            ("MongoDB", database.connect),
            ("Cloudinary", media.connect),
        ]).initialize()

        assert calls == ["database"]
        assert outcome.success is False
        assert outcome.failed_step == "MongoDB"
        assert outcome.message == "connection refused"
        assert outcome.exit_code != 0

    async def test_media_storage_failure_reports_completed_steps(self):
        database = FakeDatabase()
        media = FakeMediaStorage(fail_with=RuntimeError("bad cloud name"))

        outcome = await Bootstrapper([
            ("MongoDB", database.connect),
            ("Cloudinary", media.connect),
        ]).initialize()

        assert outcome.completed_steps == ("MongoDB",)
        assert outcome.failed_step == "Cloudinary"
        assert outcome.message == "bad cloud name"

    async def test_steps_never_overlap(self):
        events = []

        async def slow_step():
            events.append("slow:start")
            await asyncio.sleep(0.01)
            events.append("slow:end")

        async def fast_step():
            events.append("fast")

        await Bootstrapper([("slow", slow_step), ("fast", fast_step)]).initialize()

        assert events == ["slow:start", "slow:end", "fast"]

    async def test_logs_start_success_and_failure(self, caplog):
        caplog.set_level(logging.INFO, logger="core.services.bootstrap_service")
        database = FakeDatabase()
        media = FakeMediaStorage(fail_with=RuntimeError("no credentials"))

        await Bootstrapper([
            ("MongoDB", database.connect),
            ("Cloudinary", media.connect),
        ]).initialize()

        assert "Connecting to MongoDB..." in caplog.text
        assert "MongoDB connected successfully!" in caplog.text
        assert "Initialization failed: Cloudinary: no credentials" in caplog.text
        assert "All services initialized" not in caplog.text


# =============================================================================
# Application Lifespan
# =============================================================================

class TestLifespan:
    """Bootstrap wiring inside the FastAPI application."""

    async def test_failed_bootstrap_reaches_failure_handler(self, build_app):
        calls = []
        failures = []
        app = build_app(
            database=FakeDatabase(fail_with=DatabaseConnectionError("timed out"), calls=calls),
            media_storage=FakeMediaStorage(calls=calls),
            on_bootstrap_failure=failures.append,
        )

        outcome = await run_bootstrap(app)

        assert calls == ["database"]
        assert failures == [outcome]
        assert app.state.bootstrap_outcome.exit_code == 1

    async def test_successful_bootstrap_does_not_call_failure_handler(self, build_app):
        failures = []
        app = build_app(on_bootstrap_failure=failures.append)

        outcome = await run_bootstrap(app)

        assert outcome.success is True
        assert failures == []

    async def test_startup_does_not_wait_for_bootstrap(self, build_app):
        release = asyncio.Event()

        class SlowDatabase(FakeDatabase):
            async def connect(self):
                await release.wait()
                await super().connect()

        database = SlowDatabase()
        app = build_app(database=database)

        async with lifespan(app):
            task = app.state.bootstrap_task
            await asyncio.sleep(0)
            assert not task.done()

            release.set()
            outcome = await task
            assert outcome.success is True

        assert database.disconnected is True

    async def test_shutdown_cancels_unfinished_bootstrap(self, build_app):
        class HangingDatabase(FakeDatabase):
            async def connect(self):
                await asyncio.Event().wait()

        database = HangingDatabase()
        app = build_app(database=database)

        async with lifespan(app):
            task = app.state.bootstrap_task

        assert task.cancelled()
        assert app.state.bootstrap_outcome is None
        assert database.disconnected is True

    async def test_shutdown_reports_crashed_bootstrap_task(self, build_app, caplog):
        def broken_handler(outcome):
            raise RuntimeError("handler crashed")

        database = FakeDatabase(fail_with=DatabaseConnectionError("timed out"))
        app = build_app(database=database, on_bootstrap_failure=broken_handler)

        with caplog.at_level(logging.ERROR, logger="app.main"):
            async with lifespan(app):
                task = app.state.bootstrap_task
                await asyncio.wait([task])

        assert isinstance(task.exception(), RuntimeError)
        assert "Bootstrap task failed" in caplog.text
        assert "handler crashed" in caplog.text
        assert database.disconnected is True


class TestExitProcess:
    """Default failure handler."""

    def test_exits_with_outcome_code(self, monkeypatch):
        exits = []
        monkeypatch.setattr("app.main.logging.shutdown", lambda: None)
        monkeypatch.setattr("app.main.os._exit", exits.append)

        exit_process(BootstrapOutcome.failed((), "MongoDB", "connection refused"))

        assert exits == [1]
