from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, List, Optional, Tuple, TYPE_CHECKING

from .linkset import LinkResultSet

if TYPE_CHECKING:
    from linkview.services.form.controller import FormController

GOOD = "good"
BAD = "bad"


@dataclass(frozen=True)
class ResultRow:
    ordinal: int
    link: str
    status: str


class ResultsPresenter:
    def __init__(
        self,
        links: LinkResultSet,
        new_form: Callable[[], "FormController"],
    ):
        self._links: Optional[LinkResultSet] = links
        self._new_form = new_form

    @property
    def links(self) -> LinkResultSet:
        if self._links is None:
            raise RuntimeError("Results were released; this view is gone")
        return self._links

    def render(self) -> List[ResultRow]:
        return [
            ResultRow(ordinal=i, link=link, status=GOOD if ok else BAD)
            for i, (link, ok) in enumerate(self.links.items(), start=1)
        ]

    def summary(self) -> Tuple[int, int]:
        return self.links.good, self.links.bad

    def go_back(self) -> "FormController":
        self._links = None
        return self._new_form()
