"""City index records derived from destinations and events."""

from pydantic import BaseModel

from discoverzim.application.dto.destination import Destination
from discoverzim.application.dto.event import Event


class CityContent(BaseModel):
    """Everything listed at one city: destinations ∪ events."""

    city: str
    destinations: list[Destination] = []
    events: list[Event] = []
