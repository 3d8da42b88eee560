"""
Variation Locator
Resolve a persisted variation to the render position of its panel on the
product edit screen, expanding the panel on the way
"""

import logging
import re
from typing import Optional

from playwright.sync_api import Page, TimeoutError as PlaywrightTimeoutError

from ..core.config import AcceptanceConfig
from ..core.exceptions import ElementNotReadyError, InvalidStateError, UnexpectedDomShapeError
from ..models import Variation
from .xpath import AttributeEquals, AttributeStartsWith, Contains, HasClasses, Step

logger = logging.getLogger(__name__)

MARKER_NAME_PREFIX = "variable_post_id"
PANEL_CLASSES = ("woocommerce_variation", "wc-metabox")
COLLAPSED_CLASS = "closed"
MARKER_INDEX_PATTERN = re.compile(r"\[([0-9]+)\]")
BLOCK_OVERLAY_SELECTOR = ".blockOverlay"

SCROLL_WITH_OFFSET_JS = """
    (el, offset) => window.scrollTo(0, el.getBoundingClientRect().top + window.scrollY + offset)
"""


def variation_marker(variation_id: int) -> Step:
    """Hidden input whose value is the variation id"""
    return Step("input").where(
        AttributeStartsWith("name", MARKER_NAME_PREFIX) & AttributeEquals("value", variation_id)
    )


def variation_panel(variation_id: int) -> Step:
    """Variation panel that contains the variation's hidden id input"""
    return Step("div").where(
        HasClasses(*PANEL_CLASSES),
        Contains(variation_marker(variation_id)),
    )


def parse_marker_name(name: Optional[str], prefix: str = MARKER_NAME_PREFIX) -> int:
    """Turn a field name like ``variable_post_id[3]`` into 3"""
    if not name or not name.startswith(prefix):
        raise UnexpectedDomShapeError("Variation id field has an unexpected name", attribute_value=name)

    match = MARKER_INDEX_PATTERN.fullmatch(name[len(prefix):])
    if not match:
        raise UnexpectedDomShapeError("Variation id field has an unexpected name", attribute_value=name)

    return int(match.group(1))


class VariationLocator:
    """
    Finds the panel of a variation on an open product edit screen.

    Variation panels render in whatever order the admin chooses, so the panel
    is matched on the variation id and its position is read back from the
    page. The returned position is only valid until the panels re-render.
    """

    def __init__(self, timeout: Optional[float] = None, header_offset: Optional[int] = None):
        self.timeout = AcceptanceConfig.get_wait_timeout() if timeout is None else timeout
        self.header_offset = AcceptanceConfig.get_header_offset() if header_offset is None else header_offset

    def locate(self, page: Page, variation: Variation) -> int:
        """
        Expand the variation's panel and return its 0-based render position.

        Raises:
            InvalidStateError: the variation has not been persisted
            ElementNotReadyError: the panel, the loading overlay or the expand click did not settle in time
            UnexpectedDomShapeError: the id field is missing or its name can't be parsed
        """
        if not variation.is_persisted:
            raise InvalidStateError("Cannot locate a variation that has not been persisted")

        panel_selector = variation_panel(variation.id).selector()

        panel = self._wait_for(page, panel_selector, "visible")
        self._wait_for(page, BLOCK_OVERLAY_SELECTOR, "hidden")

        panel.evaluate(SCROLL_WITH_OFFSET_JS, self.header_offset)

        classes = (panel.get_attribute("class") or "").split()
        if COLLAPSED_CLASS in classes:
            self._expand(panel, panel_selector)

        field = panel.query_selector(variation_marker(variation.id).selector(relative=True))
        if field is None:
            raise UnexpectedDomShapeError(f"Variation #{variation.id} panel has no id field")

        position = parse_marker_name(field.get_attribute("name"))
        logger.info(f"Variation #{variation.id} is rendered at position {position}")
        return position

    def _wait_for(self, page: Page, selector: str, state: str):
        try:
            return page.wait_for_selector(selector, state=state, timeout=self.timeout * 1000)
        except PlaywrightTimeoutError as e:
            raise ElementNotReadyError(
                f"Element did not become {state}", selector=selector, timeout=self.timeout
            ) from e

    def _expand(self, panel, selector: str):
        try:
            panel.click(timeout=self.timeout * 1000)
        except PlaywrightTimeoutError as e:
            raise ElementNotReadyError(
                "Element did not become clickable", selector=selector, timeout=self.timeout
            ) from e
