import io

from ouroboros.timer import set_timeout


def test_waits_then_calls_callback():
    events = []
    out = io.StringIO()
    result = set_timeout(
        lambda: events.append("called") or "done",
        3,
        out=out,
        sleep=lambda s: events.append(("slept", s)),
    )
    assert events == [("slept", 3), "called"]
    assert result == "done"


def test_announcement_text():
    out = io.StringIO()
    set_timeout(lambda: None, 2, out=out, sleep=lambda s: None)
    assert out.getvalue() == "[TIMER] Waiting 2 seconds...\n"


def test_zero_seconds_uses_real_sleep():
    calls = []
    out = io.StringIO()
    set_timeout(lambda: calls.append(1), 0, out=out)
    assert calls == [1]
    assert out.getvalue().startswith("[TIMER] Waiting 0")