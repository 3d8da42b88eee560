import re
from typing import Optional

from playwright.sync_api import Page, expect

from ..core.config import AcceptanceConfig
from ..core.exceptions import InvalidStateError

NONCE_PATTERN = re.compile(r"nonce[^&]+")


def strip_nonce(url: str) -> str:
    """Remove nonce parameters so URLs from different sessions compare equal"""
    return NONCE_PATTERN.sub("", url or "")


def see_connect_button(page: Page, text: str, selector: str, connect_url: Optional[str] = None) -> None:
    """
    Assert that the element at `selector` shows `text` and links to the connect URL.

    `connect_url` defaults to CATALOG_CONNECT_URL from the environment.
    """
    connect_url = connect_url or AcceptanceConfig.get_connect_url()
    if not connect_url:
        raise InvalidStateError("No connect URL given and CATALOG_CONNECT_URL is not set")

    button = page.locator(selector)
    expect(button).to_contain_text(text)

    button_url = button.get_attribute("href")
    if strip_nonce(button_url) != strip_nonce(connect_url):
        raise AssertionError(
            f"Connect button points to {button_url!r}, expected {connect_url!r} (ignoring nonce)"
        )
