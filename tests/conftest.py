import pytest
from unittest.mock import AsyncMock, MagicMock

from tests.factories import make_operator, make_player


@pytest.fixture
def player():
    """Player with a couple of operators per role."""
    return make_player([
        make_operator("Ash", "atk", 3600, kills=30, deaths=20, wins=10, losses=5),
        make_operator("Fuze", "atk", 7200, kills=50, deaths=25, wins=12, losses=8,
                      specials={"operatorpvp_clusterchargekill": "14"}),
        make_operator("Frost", "def", 1800, kills=10, deaths=10, wins=4, losses=4),
        make_operator("Jäger", "def", 9000, kills=80, deaths=40, wins=30, losses=10),
    ])


@pytest.fixture
def placeholder():
    """The message returned by posting the loading embed."""
    message = MagicMock()
    message.id = 222
    message.edit = AsyncMock()
    return message


@pytest.fixture
def make_message(placeholder):
    """Factory for incoming messages whose channel replies with ``placeholder``."""
    def _make(content, bot_author=False):
        message = MagicMock()
        message.content = content
        message.author.bot = bot_author
        message.channel.id = 111
        message.channel.send = AsyncMock(return_value=placeholder)
        return message
    return _make
