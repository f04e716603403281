"""
Location Repository.

Cities are not stored: they are the distinct `location` values of
destinations and events. A city's content bundle is everything listed there.
"""

import logging
from supabase import AsyncClient

from discoverzim.application.dto.destination import Destination
from discoverzim.application.dto.event import Event
from discoverzim.application.dto.location import CityContent
from discoverzim.infrastructure.persistence.table_accessor import (
    TableAccessor,
    eq,
    not_null,
)

logger = logging.getLogger(__name__)


class LocationRepository:
    def __init__(self, client: AsyncClient):
        self._destinations = TableAccessor(client, "destinations", Destination)
        self._events = TableAccessor(client, "events", Event)

    async def get_all_cities_with_content(self) -> list[str]:
        """
        Sorted unique city names across destinations and events.

        Returns an empty list if either source read fails.
        """
        destination_cities = await self._destinations.select_values(
            "location", not_null("location"), action="fetching cities with content"
        )
        if not destination_cities.ok:
            return []
        event_cities = await self._events.select_values(
            "location", not_null("location"), action="fetching cities with content"
        )
        if not event_cities.ok:
            return []

        cities = set(destination_cities.data) | set(event_cities.data)
        cities.discard(None)
        return sorted(cities)

    async def get_city_content(self, city: str) -> CityContent:
        """Destinations and events at ``city``; an empty bundle if a read fails."""
        action = f"fetching content for city {city}"
        destinations = await self._destinations.select_many(
            eq("location", city), action=action
        )
        if not destinations.ok:
            return CityContent(city=city)
        events = await self._events.select_many(eq("location", city), action=action)
        if not events.ok:
            return CityContent(city=city)
        return CityContent(city=city, destinations=destinations.data, events=events.data)
