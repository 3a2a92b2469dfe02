from __future__ import annotations

from .twitter_client_base import TwitterClientBase
from .twitter_client_lists import TwitterClientListsMixin
from .twitter_client_users import TwitterClientUsersMixin


class TwitterClient(
    TwitterClientUsersMixin,
    TwitterClientListsMixin,
    TwitterClientBase,
):
    pass
