from dataclasses import dataclass
from order_mediator.utils.enums import ComponentKind, Event


@dataclass(frozen=True, order=True)
class Notification:
    sequence: int
    source: ComponentKind
    event: Event
