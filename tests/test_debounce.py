import threading
import time

import pytest

from mobius.repository.debounce import Debouncer


def test_rapid_schedules_run_only_the_last_action():
    calls = []
    done = threading.Event()
    debouncer = Debouncer(delay_ms=50)

    def action(value):
        def run():
            calls.append(value)
            done.set()

        return run

    for value in range(5):
        debouncer.schedule("notes", action(value))

    assert done.wait(2)
    time.sleep(0.2)
    assert calls == [4]
    assert not debouncer.is_pending("notes")


def test_keys_are_independent():
    calls = []
    debouncer = Debouncer(delay_ms=10_000)
    debouncer.schedule("notes", lambda: calls.append("notes"))
    debouncer.schedule("glossary", lambda: calls.append("glossary"))

    debouncer.flush("notes")

    assert calls == ["notes"]
    assert debouncer.is_pending("glossary")
    debouncer.cancel()


def test_flush_without_key_runs_everything_pending():
    calls = []
    debouncer = Debouncer(delay_ms=10_000)
    debouncer.schedule("a", lambda: calls.append("a"))
    debouncer.schedule("b", lambda: calls.append("b"))

    debouncer.flush()

    assert sorted(calls) == ["a", "b"]
    assert not debouncer.is_pending("a")
    assert not debouncer.is_pending("b")


def test_flush_with_nothing_pending_is_a_no_op():
    Debouncer().flush("missing")


def test_cancel_drops_pending_action():
    calls = []
    debouncer = Debouncer(delay_ms=20)
    debouncer.schedule("notes", lambda: calls.append(1))

    debouncer.cancel("notes")
    time.sleep(0.2)

    assert calls == []


def test_failing_action_does_not_break_the_timer_thread(caplog):
    done = threading.Event()
    debouncer = Debouncer(delay_ms=10)

    def boom():
        raise RuntimeError("boom")

    debouncer.schedule("notes", boom)
    time.sleep(0.2)
    debouncer.schedule("notes", done.set)

    assert done.wait(2)
    assert "Debounced action for notes failed" in caplog.text


def test_negative_delay_is_rejected():
    with pytest.raises(ValueError):
        Debouncer(delay_ms=-1)


def test_flush_logs_a_failing_action_and_runs_the_rest(caplog):
    calls = []
    debouncer = Debouncer(delay_ms=10_000)

    def boom():
        raise RuntimeError("boom")

    debouncer.schedule("notes", boom)
    debouncer.schedule("glossary", lambda: calls.append("glossary"))

    debouncer.flush()

    assert calls == ["glossary"]
    assert "Debounced action for notes failed" in caplog.text
    assert not debouncer.is_pending("notes")
