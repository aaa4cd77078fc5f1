"""
Shared slowapi limiter, registered on the app in ``app.main``.
"""

from slowapi import Limiter
from slowapi.util import get_remote_address

limiter = Limiter(key_func=get_remote_address)
