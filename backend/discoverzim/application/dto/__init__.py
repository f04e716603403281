"""
DTOs - Typed records and write payloads

Records mirror rows of the hosted data store (reads); payloads carry the
fields a caller wants written (inserts/updates, only set fields are sent).

Note: these are not domain entities. The data store owns the rows; this
layer only shapes requests and responses.
"""

from discoverzim.application.dto.accommodation import Accommodation, RoomType
from discoverzim.application.dto.booking import Booking, BookingCreate, BookingUpdate
from discoverzim.application.dto.cart import CartItem, CartItemCreate, CartItemUpdate
from discoverzim.application.dto.chat import ChatConversation, ChatMessage
from discoverzim.application.dto.destination import (
    Destination,
    DestinationInput,
    DestinationUpdate,
)
from discoverzim.application.dto.event import Event, EventInput, EventUpdate
from discoverzim.application.dto.itinerary import (
    Itinerary,
    ItineraryCreate,
    ItineraryDestination,
    ItineraryDestinationCreate,
    ItineraryDestinationUpdate,
    ItineraryUpdate,
)
from discoverzim.application.dto.location import CityContent
from discoverzim.application.dto.notification import Notification
from discoverzim.application.dto.payment import Payment, PaymentCreate, PaymentUpdate
from discoverzim.application.dto.profile import Profile, ProfileUpdate
from discoverzim.application.dto.review import Review, ReviewCreate, ReviewUpdate
from discoverzim.application.dto.wishlist import WishlistEntry

__all__ = [
    "Accommodation",
    "RoomType",
    "Booking",
    "BookingCreate",
    "BookingUpdate",
    "CartItem",
    "CartItemCreate",
    "CartItemUpdate",
    "ChatConversation",
    "ChatMessage",
    "Destination",
    "DestinationInput",
    "DestinationUpdate",
    "Event",
    "EventInput",
    "EventUpdate",
    "Itinerary",
    "ItineraryCreate",
    "ItineraryDestination",
    "ItineraryDestinationCreate",
    "ItineraryDestinationUpdate",
    "ItineraryUpdate",
    "CityContent",
    "Notification",
    "Payment",
    "PaymentCreate",
    "PaymentUpdate",
    "Profile",
    "ProfileUpdate",
    "Review",
    "ReviewCreate",
    "ReviewUpdate",
    "WishlistEntry",
]
