from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Optional, Union

from linkview.services.form.controller import FormController
from linkview.services.results.presenter import ResultsPresenter
from linkview.services.transport.client import Failure, RequestOutcome, Transport

logger = logging.getLogger(__name__)


class ViewError(RuntimeError):
    pass


@dataclass(frozen=True, eq=False)
class ShowingForm:
    form: FormController


@dataclass(frozen=True, eq=False)
class ShowingResults:
    presenter: ResultsPresenter
    target: str


View = Union[ShowingForm, ShowingResults]


class RootController:
    """Owns the single live view and switches it on explicit transitions.

    ``notify`` receives the reason of a failed submission; callers use it
    to raise a blocking notification.
    """

    def __init__(self, transport: Transport, notify: Callable[[str], None]):
        self.transport = transport
        self.notify = notify
        self.view: View = ShowingForm(self._new_form())

    def _new_form(self) -> FormController:
        return FormController(self.transport)

    @property
    def form(self) -> FormController:
        if not isinstance(self.view, ShowingForm):
            raise ViewError("The form is not being shown")
        return self.view.form

    @property
    def presenter(self) -> ResultsPresenter:
        if not isinstance(self.view, ShowingResults):
            raise ViewError("No results are being shown")
        return self.view.presenter

    async def submit(self) -> Optional[RequestOutcome]:
        view = self.view
        if not isinstance(view, ShowingForm):
            raise ViewError("Submit is only available from the form")
        target = view.form.state.target_url
        outcome = await view.form.submit()
        if outcome is None:
            return None
        if self.view is not view:
            logger.info("Discarding late response for %r, view has changed", target)
            return None
        if isinstance(outcome, Failure):
            self.notify(outcome.reason)
            return outcome
        self.view = ShowingResults(
            ResultsPresenter(outcome.links, self._new_form), target
        )
        return outcome

    def go_back(self) -> FormController:
        if not isinstance(self.view, ShowingResults):
            raise ViewError("Back is only available from the results")
        form = self.view.presenter.go_back()
        self.view = ShowingForm(form)
        return form

    def reset(self) -> FormController:
        if isinstance(self.view, ShowingResults):
            return self.go_back()
        form = self._new_form()
        self.view = ShowingForm(form)
        return form
