"""Example: drive the kiosk pipeline without Flask.

Keystrokes go through the scanner classifier and the resulting code is registered
as an attendance scan, exactly as the kiosk thread does.
"""

import importlib

from config import get_settings_module

from src.timecheck.timecheck.container import build_container
from src.timecheck.timecheck.scanner.source import QueueEventSource


def main():
    settings = importlib.import_module(get_settings_module())
    container = build_container(db_config=settings.DB_CONFIG, scanner_options=settings.SCANNER)

    source = QueueEventSource()
    capture = container.make_scan_capture(source)
    capture.start()

    for ch in "MOJV040815":
        source.push_key(ch)
    source.push_key("Enter")

    for code in capture.pump():
        print(code)
    capture.stop()


if __name__ == "__main__":
    main()
