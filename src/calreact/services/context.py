from __future__ import annotations

import logging
from dataclasses import dataclass, field

from ..config import AppSettings, get_settings
from ..data import AsyncEventStore, EventRepository, EventStore, JsonEventRepository, SupabaseGateway

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class ServiceContext:
    """Aggregate root sharing settings and the configured event store."""

    settings: AppSettings = field(default_factory=get_settings)
    gateway: SupabaseGateway = field(init=False)
    store: EventStore = field(init=False)
    events: AsyncEventStore = field(init=False)

    def __post_init__(self) -> None:
        self.gateway = SupabaseGateway(self.settings.supabase)
        storage = self.settings.storage
        if storage.uses_supabase:
            self.store = EventRepository(
                gateway=self.gateway,
                table_name=storage.events_table,
                owner_column=storage.owner_column,
            )
        else:
            self.store = JsonEventRepository(storage.events_file)
        logger.debug("Using %s event store", storage.backend)
        self.events = AsyncEventStore(self.store)

    @property
    def owner_id(self) -> str:
        return self.settings.storage.owner_id
