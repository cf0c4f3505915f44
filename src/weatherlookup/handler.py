# submission lifecycle: validate input -> geocode -> forecast -> render or fail
# the handler only talks to a Presenter, so it runs the same under a console, a web view or a test fake

from __future__ import annotations
import logging
from typing import Optional, Protocol

from .client import OpenMeteoClient
from .models import DisplayRecord
from .service import LookupResult, LookupSuccess, lookup_city

logger = logging.getLogger(__name__)


# output surface: a status line, an error line and a result block that can be hidden
class Presenter(Protocol):
    def show_status(self, message: str) -> None:
        ...

    # clears the status; the result block stays hidden
    def show_error(self, message: str) -> None:
        ...

    # writes all four result fields, reveals the block and clears the status
    def render_result(self, record: DisplayRecord) -> None:
        ...

    # clears the error and hides the result block before a new lookup
    def reset(self) -> None:
        ...


class SubmissionHandler:
    # overlapping submits are not cancelled, the last one to resolve owns the output

    def __init__(self, client: OpenMeteoClient, presenter: Presenter):
        self.client = client
        self.presenter = presenter

    def submit(self, text: Optional[str]) -> Optional[LookupResult]:
        query = (text or "").strip()
        if not query:
            # nothing to look up: no request, no message
            logger.debug("ignoring empty submission")
            return None

        self.presenter.reset()
        result = lookup_city(self.client, query, on_status=self.presenter.show_status)

        if isinstance(result, LookupSuccess):
            self.presenter.render_result(result.record)
        else:
            self.presenter.show_error(result.message)
        return result
