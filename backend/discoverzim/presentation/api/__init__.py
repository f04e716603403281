"""
API Routers - FastAPI endpoint definitions.
"""

from discoverzim.presentation.api.accommodations import router as accommodations_router
from discoverzim.presentation.api.admin import router as admin_router
from discoverzim.presentation.api.auth import router as auth_router
from discoverzim.presentation.api.bookings import (
    router as bookings_router,
    payments_router,
)
from discoverzim.presentation.api.cart import router as cart_router
from discoverzim.presentation.api.chat import router as chat_router
from discoverzim.presentation.api.cities import router as cities_router
from discoverzim.presentation.api.destinations import router as destinations_router
from discoverzim.presentation.api.events import router as events_router
from discoverzim.presentation.api.itineraries import router as itineraries_router
from discoverzim.presentation.api.notifications import router as notifications_router
from discoverzim.presentation.api.profile import router as profile_router
from discoverzim.presentation.api.reviews import router as reviews_router
from discoverzim.presentation.api.wishlist import router as wishlist_router

__all__ = [
    "accommodations_router",
    "admin_router",
    "auth_router",
    "bookings_router",
    "payments_router",
    "cart_router",
    "chat_router",
    "cities_router",
    "destinations_router",
    "events_router",
    "itineraries_router",
    "notifications_router",
    "profile_router",
    "reviews_router",
    "wishlist_router",
]
