"""
Admin Navigation
Shortcuts to the catalog admin screens used by acceptance tests
"""

import logging
from typing import Optional
from urllib.parse import urljoin

from playwright.sync_api import Page, TimeoutError as PlaywrightTimeoutError

from ..core.config import AcceptanceConfig
from ..core.exceptions import ElementNotReadyError, InvalidStateError
from ..dom import VariationLocator
from ..models import Variation

logger = logging.getLogger(__name__)

PRODUCTS_PAGE = "edit.php?post_type=product"
ORDERS_PAGE = "edit.php?post_type=shop_order"
EDIT_POST_PAGE = "post.php?post={post_id}&action=edit"
INTEGRATION_SETTINGS_PAGE = "admin.php?page=wc-settings&tab=integration&section=facebookcommerce"

VARIATIONS_TAB_SELECTOR = ".variations_tab"


class AdminNavigator:
    """Drives an authenticated admin browser page to the screens tests need"""

    def __init__(self, page: Page, admin_url: Optional[str] = None,
                 locator: Optional[VariationLocator] = None, timeout: Optional[float] = None):
        self.page = page
        self.admin_url = admin_url or AcceptanceConfig.get_admin_url()
        self.timeout = AcceptanceConfig.get_wait_timeout() if timeout is None else timeout
        self.locator = locator or VariationLocator()

    def admin_page_url(self, path: str) -> str:
        return urljoin(self.admin_url, path)

    def go_to_admin_page(self, path: str):
        url = self.admin_page_url(path)
        logger.debug(f"Opening admin page {url}")
        return self.page.goto(url)

    def go_to_products_page(self):
        return self.go_to_admin_page(PRODUCTS_PAGE)

    def go_to_product_page(self, product_id: int):
        return self.go_to_admin_page(EDIT_POST_PAGE.format(post_id=product_id))

    def go_to_orders_page(self):
        return self.go_to_admin_page(ORDERS_PAGE)

    def go_to_order_page(self, order_id: int):
        return self.go_to_admin_page(EDIT_POST_PAGE.format(post_id=order_id))

    def go_to_integration_settings_page(self):
        return self.go_to_admin_page(INTEGRATION_SETTINGS_PAGE)

    def edit_product_variation(self, variation: Variation) -> int:
        """
        Open the parent product's edit screen and expand the variation's panel.

        Returns the render position of the variation, see VariationLocator.locate.
        """
        if not variation.is_persisted:
            raise InvalidStateError("Cannot edit a variation that has not been persisted")

        self.go_to_product_page(variation.parent_id)
        try:
            self.page.locator(VARIATIONS_TAB_SELECTOR).get_by_text("Variations").click(timeout=self.timeout * 1000)
        except PlaywrightTimeoutError as e:
            raise ElementNotReadyError(
                "Variations tab did not become clickable", selector=VARIATIONS_TAB_SELECTOR, timeout=self.timeout
            ) from e

        return self.locator.locate(self.page, variation)
