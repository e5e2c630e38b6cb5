from __future__ import annotations

from src.timecheck.timecheck.scanner.capture import ScanCapture
from src.timecheck.timecheck.scanner.classifier import InputClassifier
from src.timecheck.timecheck.scanner.events import KeyEvent
from src.timecheck.timecheck.scanner.source import QueueEventSource


def _burst(code: str, start: float, context=None):
    events = [KeyEvent(ch, start + i * 10, context) for i, ch in enumerate(code)]
    events.append(KeyEvent("Enter", start + len(code) * 10, context))
    return events


def _capture(source, scanned, **kwargs):
    return ScanCapture(source, scanned.append, classifier=InputClassifier(), clock=lambda: 0.0, **kwargs)


def test_capture_emits_codes_from_source():
    source = QueueEventSource()
    scanned: list[str] = []
    capture = _capture(source, scanned)

    capture.start()
    source.push_all(_burst("MOJV040815", 0))

    assert capture.pump() == ["MOJV040815"]
    assert scanned == ["MOJV040815"]


def test_events_before_start_are_dropped():
    source = QueueEventSource()
    scanned: list[str] = []
    capture = _capture(source, scanned)

    assert source.push_all(_burst("ABC123", 0)) == 0
    capture.start()
    assert capture.pump() == []


def test_stop_discards_pending_events():
    source = QueueEventSource()
    scanned: list[str] = []
    capture = _capture(source, scanned)

    capture.start()
    source.push_all(_burst("ABC123", 0))
    capture.stop()

    assert capture.pump() == []
    assert scanned == []
    assert not capture.running


def test_disabled_context_is_not_captured():
    source = QueueEventSource()
    scanned: list[str] = []
    capture = _capture(source, scanned, disabled_contexts={"employee-form"})
    capture.start()

    source.push_all(_burst("TYPED123", 0, context="employee-form"))
    source.push_all(_burst("SCAN456", 1000, context="kiosk"))

    assert capture.pump() == ["SCAN456"]

    capture.enable("employee-form")
    source.push_all(_burst("TYPED789", 3000, context="employee-form"))
    assert capture.pump() == ["TYPED789"]


def test_kiosk_wiring_registers_scan(container, attendance_repo):
    source = QueueEventSource()
    capture = container.make_scan_capture(source)
    capture.start()

    source.push_all(_burst("7501234567890", 0))
    assert capture.pump() == ["7501234567890"]

    records = attendance_repo.list_records(employee_id="GARL920304")
    assert len(records) == 1
    assert records[0].check_out_time is None


class FakeClock:
    def __init__(self, now: float = 0.0):
        self.now = now

    def __call__(self) -> float:
        return self.now


def test_capture_shares_source_clock_for_expiry():
    clock = FakeClock(1_000_000.0)
    source = QueueEventSource(clock=clock)
    scanned: list[str] = []
    classifier = InputClassifier()
    capture = ScanCapture(source, scanned.append, classifier=classifier)
    capture.start()

    for ch in "MOJ":
        source.push_key(ch)
        clock.now += 10
    assert capture.pump() == []
    assert classifier.buffer == "MOJ"

    clock.now += 1500
    capture.pump()
    assert classifier.buffer == ""

    for ch in "GARL92":
        source.push_key(ch)
        clock.now += 10
    source.push_key("Enter")
    assert capture.pump() == ["GARL92"]
    assert scanned == ["GARL92"]


def test_push_key_stamps_from_source_clock():
    clock = FakeClock(42.0)
    source = QueueEventSource(clock=clock)
    source.start()

    source.push_key("A", context="kiosk")
    event = source.poll()

    assert event == KeyEvent("A", 42.0, "kiosk")
