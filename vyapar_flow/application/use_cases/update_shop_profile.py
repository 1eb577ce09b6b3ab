"""Use case saving the shop profile."""

from dataclasses import replace

from vyapar_flow.application.store import StateStore
from vyapar_flow.domain.models import ShopSettings
from vyapar_flow.infrastructure.logging.logger import get_app_logger


class UpdateShopProfileUseCase:
    """Update the profile fields of the shop settings.

    The data folder is left as it is; it changes through folder selection.
    """

    def __init__(self, store: StateStore, logger=None) -> None:
        self._store = store
        self._logger = logger or get_app_logger()

    def execute(
        self,
        shop_name: str,
        owner_name: str = "",
        contact_number: str = "",
        address: str = "",
    ) -> ShopSettings:
        """Store the new profile.

        Args:
            shop_name: Shop name shown as the app title, must not be blank.
            owner_name: Owner name.
            contact_number: Contact number (not validated).
            address: Postal address.

        Returns:
            ShopSettings: The stored settings.

        Raises:
            ValueError: If the shop name is blank.
        """
        cleaned = shop_name.strip()
        if not cleaned:
            raise ValueError("Shop name is required")
        settings = replace(
            self._store.state.settings,
            shop_name=cleaned,
            owner_name=owner_name.strip(),
            contact_number=contact_number.strip(),
            address=address.strip(),
        )
        self._store.update_settings(settings)
        self._logger.info("Shop profile updated")
        return settings


__all__ = ["UpdateShopProfileUseCase"]
