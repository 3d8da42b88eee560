# Admin UI helpers
from .connect_button import see_connect_button, strip_nonce
from .navigation import AdminNavigator

__all__ = ['AdminNavigator', 'see_connect_button', 'strip_nonce']
