"""
Dishka DI Container Setup.

Guidelines:
- StoreProvider owns the connection to the hosted backend (one client per app)
- AppProvider registers repositories, gateways, session handling and handlers
- Abstract ports are mapped to their concrete implementations here only

Scopes:
- Scope.APP = created once, shared across all requests
  (store client, edge function gateway, route guard registry)
- Scope.REQUEST = new instance per HTTP request
  (repositories, session manager, progress tracker, command handlers)

Flow:
  Container -> AsyncClient -> CartRepository -> route handler
                  |
                  +-> EdgeFunctionGateway -> AssistantGateway -> SendChatMessageHandler
"""

from typing import Optional, Type

from dishka import AsyncContainer, Provider, Scope, make_async_container, provide
from supabase import AsyncClient

from discoverzim.application.commands.bookings import BookAccommodationHandler
from discoverzim.application.commands.chat import SendChatMessageHandler
from discoverzim.config.settings import Config, get_config
from discoverzim.domain.ports import AssistantGateway, MailGateway
from discoverzim.domain.services.process_tracker import ProcessTracker
from discoverzim.infrastructure.functions import EdgeFunctionGateway
from discoverzim.infrastructure.persistence import (
    AccommodationRepository,
    BookingRepository,
    CartRepository,
    ChatRepository,
    DestinationRepository,
    EventRepository,
    ItineraryRepository,
    LocationRepository,
    NotificationRepository,
    PaymentRepository,
    ProfileRepository,
    ReviewRepository,
    WishlistRepository,
    create_store_client,
)
from discoverzim.services import RouteGuardRegistry, SessionManager


class StoreProvider(Provider):
    """Provides the Supabase client (singleton, app-scoped)."""

    def __init__(self, config: Type[Config]):
        super().__init__()
        self.config = config

    @provide(scope=Scope.APP)
    async def get_store_client(self) -> AsyncClient:
        return await create_store_client(self.config.SUPABASE_URL, self.config.SUPABASE_KEY)


class AppProvider(Provider):
    """
    Application dependency provider.

    Args:
        config: Config class the providers read their settings from
    """

    def __init__(self, config: Type[Config]):
        super().__init__()
        self.config = config

    # ==================== EDGE FUNCTIONS ====================

    @provide(scope=Scope.APP)
    def get_edge_function_gateway(self, client: AsyncClient) -> EdgeFunctionGateway:
        return EdgeFunctionGateway(
            client,
            assistant_function=self.config.ASSISTANT_FUNCTION,
            email_function=self.config.EMAIL_FUNCTION,
        )

    @provide(scope=Scope.APP)
    def get_assistant_gateway(self, gateway: EdgeFunctionGateway) -> AssistantGateway:
        return gateway

    @provide(scope=Scope.APP)
    def get_mail_gateway(self, gateway: EdgeFunctionGateway) -> MailGateway:
        return gateway

    # ==================== REPOSITORIES ====================

    @provide(scope=Scope.REQUEST)
    def get_accommodation_repository(self, client: AsyncClient) -> AccommodationRepository:
        return AccommodationRepository(
            client, featured_limit=self.config.FEATURED_ACCOMMODATIONS_LIMIT
        )

    @provide(scope=Scope.REQUEST)
    def get_destination_repository(self, client: AsyncClient) -> DestinationRepository:
        return DestinationRepository(client)

    @provide(scope=Scope.REQUEST)
    def get_event_repository(self, client: AsyncClient) -> EventRepository:
        return EventRepository(client)

    @provide(scope=Scope.REQUEST)
    def get_cart_repository(self, client: AsyncClient) -> CartRepository:
        return CartRepository(client)

    @provide(scope=Scope.REQUEST)
    def get_chat_repository(self, client: AsyncClient) -> ChatRepository:
        return ChatRepository(client)

    @provide(scope=Scope.REQUEST)
    def get_location_repository(self, client: AsyncClient) -> LocationRepository:
        return LocationRepository(client)

    @provide(scope=Scope.REQUEST)
    def get_notification_repository(self, client: AsyncClient) -> NotificationRepository:
        return NotificationRepository(client)

    @provide(scope=Scope.REQUEST)
    def get_booking_repository(self, client: AsyncClient) -> BookingRepository:
        return BookingRepository(client)

    @provide(scope=Scope.REQUEST)
    def get_payment_repository(self, client: AsyncClient) -> PaymentRepository:
        return PaymentRepository(client)

    @provide(scope=Scope.REQUEST)
    def get_profile_repository(self, client: AsyncClient) -> ProfileRepository:
        return ProfileRepository(client)

    @provide(scope=Scope.REQUEST)
    def get_review_repository(self, client: AsyncClient) -> ReviewRepository:
        return ReviewRepository(client)

    @provide(scope=Scope.REQUEST)
    def get_wishlist_repository(self, client: AsyncClient) -> WishlistRepository:
        return WishlistRepository(client)

    @provide(scope=Scope.REQUEST)
    def get_itinerary_repository(self, client: AsyncClient) -> ItineraryRepository:
        return ItineraryRepository(client)

    # ==================== SESSIONS ====================

    @provide(scope=Scope.APP)
    def get_route_guard_registry(self) -> RouteGuardRegistry:
        return RouteGuardRegistry(
            sign_in_path=self.config.SIGN_IN_PATH,
            landing_path=self.config.DEFAULT_LANDING_PATH,
            max_guards=self.config.MAX_ROUTE_GUARDS,
        )

    @provide(scope=Scope.REQUEST)
    def get_session_manager(
        self, profiles: ProfileRepository, guards: RouteGuardRegistry
    ) -> SessionManager:
        manager = SessionManager(
            profiles,
            jwt_secret=self.config.SUPABASE_JWT_SECRET,
            audience=self.config.SUPABASE_JWT_AUDIENCE,
        )
        guards.track(manager)
        return manager

    @provide(scope=Scope.REQUEST)
    def get_process_tracker(self) -> ProcessTracker:
        return ProcessTracker(complete_delay=self.config.PROCESS_COMPLETE_DELAY)

    # ==================== HANDLERS ====================

    @provide(scope=Scope.REQUEST)
    def get_book_accommodation_handler(
        self,
        accommodations: AccommodationRepository,
        bookings: BookingRepository,
        payments: PaymentRepository,
        mail: MailGateway,
        tracker: ProcessTracker,
    ) -> BookAccommodationHandler:
        return BookAccommodationHandler(
            accommodations=accommodations,
            bookings=bookings,
            payments=payments,
            mail=mail,
            tracker=tracker,
        )

    @provide(scope=Scope.REQUEST)
    def get_send_chat_message_handler(
        self, chat: ChatRepository, assistant: AssistantGateway
    ) -> SendChatMessageHandler:
        return SendChatMessageHandler(chat=chat, assistant=assistant)


def create_container(
    config: Optional[Type[Config]] = None, *providers: Provider
) -> AsyncContainer:
    """
    Create and configure the DI container.

    Extra providers replace the defaults, e.g. a store provider backed by a
    test double instead of the hosted backend.
    """
    config = config or get_config()
    store = providers or (StoreProvider(config),)
    return make_async_container(AppProvider(config), *store)
