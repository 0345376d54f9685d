from __future__ import annotations

from dataclasses import dataclass, field

from ..services import CalendarLayoutService, LayoutContext


@dataclass(slots=True)
class ApiState:
    context: LayoutContext = field(default_factory=LayoutContext)
    layout: CalendarLayoutService = field(init=False)

    def __post_init__(self) -> None:
        self.layout = CalendarLayoutService(self.context)


api_state = ApiState()
