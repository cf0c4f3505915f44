# terminal binding for the Presenter interface
# keeps the output regions as plain fields and echoes every change to a text stream

from __future__ import annotations
import sys
from typing import Optional, TextIO
from .models import DisplayRecord

BANNER = "~ weather lookup ~ (open-meteo)"


class ConsolePresenter:
    def __init__(self, out: Optional[TextIO] = None, err: Optional[TextIO] = None):
        self.out = out or sys.stdout
        self.err = err or sys.stderr
        self.status = ""
        self.error = ""
        self.location = ""
        self.temperature = ""
        self.wind_speed = ""
        self.condition = ""
        self.output_visible = False

    def show_banner(self) -> None:
        # static header, written once per process
        print(BANNER, file=self.out)

    def show_status(self, message: str) -> None:
        self.status = message
        if message:
            print(message, file=self.out)

    def show_error(self, message: str) -> None:
        self.status = ""
        self.error = message
        print(f"error: {message}", file=self.err)

    def render_result(self, record: DisplayRecord) -> None:
        self.location = record.location_label
        self.temperature = f"{record.temperature:g}"
        self.wind_speed = f"{record.wind_speed:g}"
        self.condition = record.condition_label
        self.output_visible = True
        self.status = ""
        print(f"Location: {self.location}", file=self.out)
        print(f"Temperature: {self.temperature} °C", file=self.out)
        print(f"Wind speed: {self.wind_speed} km/h", file=self.out)
        print(f"Condition: {self.condition}", file=self.out)

    def reset(self) -> None:
        self.error = ""
        self.output_visible = False
