"""Main application object and process entry point.

`GazieApp` owns the current snapshot: each event goes through
`tui.state.reduce`, and any effect it requests (reload, insert, quit) is
carried out here against the persistence gateway before the next event.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, field

from gazie.config import get_settings
from gazie.database.gateway import Gateway, GatewayError, StoreOpenError
from gazie.utils.logger import get_logger, setup_logging
from tui.keys import Event
from tui.state import (
    AppState,
    Quit,
    Reload,
    SaveCustomer,
    SaveProduct,
    apply_customer_saved,
    apply_product_saved,
    apply_reloaded,
    apply_write_failed,
    reduce,
)
from tui.terminal import run

logger = get_logger(__name__)


@dataclass
class GazieApp:
    gateway: Gateway
    state: AppState = field(default_factory=AppState)

    @classmethod
    def start(cls, gateway: Gateway) -> "GazieApp":
        """Build the app with both lists loaded from the store."""
        state = AppState(
            customers=tuple(gateway.list_customers()),
            products=tuple(gateway.list_products()),
        )
        return cls(gateway=gateway, state=state)

    def dispatch(self, event: Event) -> bool:
        """Process one event. Returns False when the session should end."""
        state, effect = reduce(self.state, event)

        if isinstance(effect, Quit):
            self.state = state
            return False
        if isinstance(effect, Reload):
            state = apply_reloaded(state, self.gateway.list_customers(), self.gateway.list_products())
        elif isinstance(effect, SaveCustomer):
            state = self._save_customer(state, effect)
        elif isinstance(effect, SaveProduct):
            state = self._save_product(state, effect)

        if state.screen != self.state.screen:
            logger.debug("Screen %s -> %s", self.state.screen.value, state.screen.value)
        self.state = state
        return True

    def _save_customer(self, state: AppState, effect: SaveCustomer) -> AppState:
        try:
            self.gateway.insert_customer(**effect.payload.model_dump())
        except GatewayError as exc:
            return apply_write_failed(state, exc)
        return apply_customer_saved(state, self.gateway.list_customers())

    def _save_product(self, state: AppState, effect: SaveProduct) -> AppState:
        try:
            self.gateway.insert_product(**effect.payload.model_dump())
        except GatewayError as exc:
            return apply_write_failed(state, exc)
        return apply_product_saved(state, self.gateway.list_products())


def open_gateway(settings) -> Gateway:
    gateway = Gateway(settings.database_url, seed_samples=settings.seed_samples)
    gateway.initialize()
    return gateway


def main() -> None:
    settings = get_settings()
    try:
        setup_logging(settings.log_level, settings.log_file)
    except OSError:
        # Unwritable data dir; the gateway reports the real problem below.
        # Nothing may reach stderr once curses owns the screen.
        setup_logging(settings.log_level, silent=True)

    try:
        gateway = open_gateway(settings)
    except StoreOpenError as exc:
        logger.error("Startup failed: %s", exc)
        print(f"Failed to open database: {exc}", file=sys.stderr)
        sys.exit(1)

    logger.info("Opened %s", settings.database_url)
    try:
        run(GazieApp.start(gateway))
    finally:
        gateway.close()


if __name__ == "__main__":
    main()
