"""
Persistence - Repositories over the hosted data store

One repository per remote table (or derived view, for locations); every
method is a single awaited request through a TableAccessor.
"""

from discoverzim.infrastructure.persistence.accommodation_repository import AccommodationRepository
from discoverzim.infrastructure.persistence.booking_repository import BookingRepository
from discoverzim.infrastructure.persistence.cart_repository import CartRepository
from discoverzim.infrastructure.persistence.chat_repository import ChatRepository
from discoverzim.infrastructure.persistence.destination_repository import DestinationRepository
from discoverzim.infrastructure.persistence.event_repository import EventRepository
from discoverzim.infrastructure.persistence.itinerary_repository import ItineraryRepository
from discoverzim.infrastructure.persistence.location_repository import LocationRepository
from discoverzim.infrastructure.persistence.notification_repository import NotificationRepository
from discoverzim.infrastructure.persistence.payment_repository import PaymentRepository
from discoverzim.infrastructure.persistence.profile_repository import ProfileRepository
from discoverzim.infrastructure.persistence.review_repository import ReviewRepository
from discoverzim.infrastructure.persistence.store_client import create_store_client
from discoverzim.infrastructure.persistence.table_accessor import StoreResult, TableAccessor
from discoverzim.infrastructure.persistence.wishlist_repository import WishlistRepository

__all__ = [
    "AccommodationRepository",
    "BookingRepository",
    "CartRepository",
    "ChatRepository",
    "DestinationRepository",
    "EventRepository",
    "ItineraryRepository",
    "LocationRepository",
    "NotificationRepository",
    "PaymentRepository",
    "ProfileRepository",
    "ReviewRepository",
    "StoreResult",
    "TableAccessor",
    "WishlistRepository",
    "create_store_client",
]
