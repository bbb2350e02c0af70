"""Tests for the stats command handler."""

from unittest.mock import AsyncMock, MagicMock

import discord
import pytest

from siegebot.services.stats_command import StatsCommandHandler, parse_invocation
from siegebot.utils.embeds import build_usage_embed
from siegebot.utils.exceptions import PlayerNotFoundError, StatsProviderError

TRIGGER = "!stats"


def http_error(status=500):
    return discord.HTTPException(MagicMock(status=status, reason="Error"), "request failed")


@pytest.fixture
def stats_client(player):
    client = MagicMock()
    client.get_player = AsyncMock(return_value=player)
    return client


@pytest.fixture
def handler(stats_client):
    return StatsCommandHandler(stats_client, trigger=TRIGGER, platform="uplay")


def sent_embed(message):
    return message.channel.send.await_args.kwargs["embed"]


def edited_embed(placeholder):
    return placeholder.edit.await_args.kwargs["embed"]


class TestParseInvocation:
    """Tests for splitting message text into command parts."""

    @pytest.mark.parametrize("content", ["", "hello there", "stats ruffbabe", "!statsruffbabe", "!!stats"])
    def test_not_a_command(self, content):
        assert parse_invocation(content, TRIGGER) is None

    def test_trigger_only(self):
        invocation = parse_invocation("!stats", TRIGGER)
        assert invocation.triggered
        assert invocation.parts == ["!stats"]
        assert invocation.handle is None
        assert invocation.operator_name is None

    def test_handle_and_operator(self):
        invocation = parse_invocation("!stats ruffbabe fuze", TRIGGER)
        assert invocation.handle == "ruffbabe"
        assert invocation.operator_name == "fuze"

    def test_repeated_spaces_and_padding(self):
        invocation = parse_invocation("  !stats   ruffbabe  ", TRIGGER)
        assert invocation.parts == ["!stats", "ruffbabe"]

    def test_trigger_after_other_words(self):
        invocation = parse_invocation("hey bot !stats ruffbabe", TRIGGER)
        assert invocation.parts == ["!stats", "ruffbabe"]

    def test_extra_tokens_kept_but_unused(self):
        invocation = parse_invocation("!stats ruffbabe fuze extra words", TRIGGER)
        assert invocation.handle == "ruffbabe"
        assert invocation.operator_name == "fuze"


class TestIgnoredMessages:
    """Messages that are not stats commands cause no side effects."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize("content", ["hello", "!help", "what are your stats", "!statsruffbabe"])
    async def test_no_side_effects(self, handler, stats_client, make_message, content):
        message = make_message(content)
        assert await handler.handle(message) is False
        message.channel.send.assert_not_awaited()
        stats_client.get_player.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_bot_authors_ignored(self, handler, stats_client, make_message):
        message = make_message("!stats ruffbabe", bot_author=True)
        assert await handler.handle(message) is False
        message.channel.send.assert_not_awaited()
        stats_client.get_player.assert_not_awaited()


class TestUsage:
    """A bare trigger replies with usage and fetches nothing."""

    @pytest.mark.asyncio
    async def test_no_player_specified(self, handler, stats_client, make_message, placeholder):
        message = make_message("!stats")
        assert await handler.handle(message) is True
        message.channel.send.assert_awaited_once()
        assert sent_embed(message).to_dict() == build_usage_embed("No player specified").to_dict()
        stats_client.get_player.assert_not_awaited()
        placeholder.edit.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_usage_send_failure_is_swallowed(self, handler, make_message):
        message = make_message("!stats")
        message.channel.send.side_effect = http_error(403)
        assert await handler.handle(message) is True


class TestPlayerSummary:
    """Two-part commands produce the full summary."""

    @pytest.mark.asyncio
    async def test_placeholder_then_summary(self, handler, stats_client, make_message, placeholder):
        message = make_message("!stats ruffbabe")
        await handler.handle(message)

        message.channel.send.assert_awaited_once()
        assert sent_embed(message).title == "Loading stats for ruffbabe"
        stats_client.get_player.assert_awaited_once_with("ruffbabe", "uplay", include_operators=True)
        placeholder.edit.assert_awaited_once()

        embed = edited_embed(placeholder)
        assert embed.title == "Siege Stats for ruffbabe"
        assert len(embed.fields) == 12
        assert embed.fields[1].name == "Ranked K/D"
        assert embed.fields[1].value == "1.234"

    @pytest.mark.asyncio
    async def test_player_not_found(self, handler, stats_client, make_message, placeholder):
        stats_client.get_player.side_effect = PlayerNotFoundError("nobody", "uplay")
        await handler.handle(make_message("!stats nobody"))

        placeholder.edit.assert_awaited_once()
        embed = edited_embed(placeholder)
        assert embed.title == "Failed to load player"
        assert "Unable to find player" in embed.description

    @pytest.mark.asyncio
    async def test_provider_error(self, handler, stats_client, make_message, placeholder):
        stats_client.get_player.side_effect = StatsProviderError("ruffbabe", "HTTP 503", status=503)
        await handler.handle(make_message("!stats ruffbabe"))
        assert edited_embed(placeholder).title == "Failed to load player"

    @pytest.mark.asyncio
    async def test_unexpected_fetch_error(self, handler, stats_client, make_message, placeholder):
        stats_client.get_player.side_effect = RuntimeError("boom")
        await handler.handle(make_message("!stats ruffbabe"))
        placeholder.edit.assert_awaited_once()
        assert edited_embed(placeholder).title == "Failed to load player"

    @pytest.mark.asyncio
    async def test_placeholder_post_failure_stops(self, handler, stats_client, make_message, placeholder):
        message = make_message("!stats ruffbabe")
        message.channel.send.side_effect = http_error()
        assert await handler.handle(message) is True
        stats_client.get_player.assert_not_awaited()
        placeholder.edit.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_edit_failure_is_swallowed(self, handler, make_message, placeholder):
        placeholder.edit.side_effect = http_error(404)
        assert await handler.handle(make_message("!stats ruffbabe")) is True
        placeholder.edit.assert_awaited_once()


class TestOperatorSummary:
    """Three-part commands summarize one operator."""

    @pytest.mark.asyncio
    async def test_operator_summary(self, handler, stats_client, make_message, placeholder):
        await handler.handle(make_message("!stats ruffbabe fuze"))

        stats_client.get_player.assert_awaited_once()
        placeholder.edit.assert_awaited_once()
        embed = edited_embed(placeholder)
        assert embed.title == "Siege Stats for ruffbabe: Fuze"
        assert embed.fields[0].name == "Playtime"
        assert embed.fields[0].value == "2.0"
        assert embed.fields[3].name == "operatorpvp_clusterchargekill"
        assert embed.fields[3].value == "14"

    @pytest.mark.asyncio
    async def test_operator_name_case_insensitive(self, handler, make_message, placeholder):
        await handler.handle(make_message("!stats ruffbabe JÄGER"))
        assert edited_embed(placeholder).title == "Siege Stats for ruffbabe: Jäger"

    @pytest.mark.asyncio
    async def test_invalid_operator(self, handler, stats_client, make_message, placeholder):
        message = make_message("!stats ruffbabe doesnotexist")
        await handler.handle(message)

        message.channel.send.assert_awaited_once()
        stats_client.get_player.assert_awaited_once()
        placeholder.edit.assert_awaited_once()
        embed = edited_embed(placeholder)
        assert embed.title == "Invalid operator name"
        assert "Doesnotexist" in embed.description

    @pytest.mark.asyncio
    async def test_extra_tokens_ignored(self, handler, make_message, placeholder):
        await handler.handle(make_message("!stats ruffbabe fuze please"))
        assert edited_embed(placeholder).title == "Siege Stats for ruffbabe: Fuze"


class TestLongHandles:
    """Oversized handles still get a reply."""

    @pytest.mark.asyncio
    async def test_placeholder_title_fits(self, handler, stats_client, make_message, placeholder):
        handle = "h" * 300
        message = make_message(f"!stats {handle}")
        await handler.handle(message)

        assert len(sent_embed(message).title) <= 256
        stats_client.get_player.assert_awaited_once_with(handle, "uplay", include_operators=True)
        placeholder.edit.assert_awaited_once()
