"""
Discord Utilities
Channel classification, permission checks and guarded replies
"""

from typing import Any, Optional

import discord

from command_client.utils.logger import get_logger

logger = get_logger("DiscordUtils")

# Channel types without guild role permissions
DM_CHANNEL_TYPES = (discord.ChannelType.private, discord.ChannelType.group)


class DiscordUtils:
    """Utility class for Discord-related helper functions."""

    @staticmethod
    def is_dm_channel(channel: Any) -> bool:
        """
        Check if a channel is a direct or group conversation.

        Args:
            channel: Discord channel

        Returns:
            True for DM and group DM channels
        """
        return getattr(channel, "type", None) in DM_CHANNEL_TYPES

    @staticmethod
    def resolve_permission(value: Any) -> Optional[discord.Permissions]:
        """
        Turn a permission setting into a Permissions object.

        Args:
            value: 0/None for no permission, an int bit value, a flag name
                such as "manage_messages" or a Permissions instance

        Returns:
            Permissions or None when no permission is required

        Raises:
            ValueError: If a flag name is unknown
        """
        if value is None:
            return None

        if isinstance(value, discord.Permissions):
            return value if value.value else None

        if isinstance(value, str):
            name = value.lower()
            if name not in discord.Permissions.VALID_FLAGS:
                raise ValueError(f"Unknown permission: {value}")
            return discord.Permissions(**{name: True})

        if isinstance(value, int) and not isinstance(value, bool):
            return discord.Permissions(value) if value else None

        raise ValueError(f"Unsupported permission value: {value!r}")

    @staticmethod
    def has_permission(channel: Any, member: Any, required: discord.Permissions) -> bool:
        """
        Check if a member holds every flag of a permission set in a channel.

        Args:
            channel: Guild channel
            member: Member to check
            required: Permissions that must all be granted

        Returns:
            True if all required flags are granted, False for plain users
            (webhook or departed authors) that hold no guild roles
        """
        if isinstance(member, discord.User):
            return False
        granted = channel.permissions_for(member)
        return required.is_subset(granted)

    @staticmethod
    def bot_member(channel: Any, client_user: Any = None) -> Any:
        """
        Get the identity used for the bot's own permission checks.

        Args:
            channel: Discord channel
            client_user: Fallback identity (the client's user)

        Returns:
            The bot's guild member when available, otherwise client_user
        """
        guild = getattr(channel, "guild", None)
        me = getattr(guild, "me", None) if guild is not None else None
        return me if me is not None else client_user

    @staticmethod
    def can_send(channel: Any, me: Any) -> bool:
        """
        Check if the bot may post in a channel.

        Args:
            channel: Discord channel
            me: The bot's identity in that channel

        Returns:
            True in DMs or when send_messages is granted
        """
        if DiscordUtils.is_dm_channel(channel):
            return True
        if me is None:
            return False
        return channel.permissions_for(me).send_messages

    @staticmethod
    async def reply_if_permitted(message: Any, text: str, client_user: Any = None) -> Optional[Any]:
        """
        Reply to a message only when the bot is allowed to post there.

        Errors raised by Discord while sending are not suppressed.

        Args:
            message: Original message
            text: Reply content
            client_user: The client's user, used outside guilds

        Returns:
            Sent message or None if nothing was sent
        """
        if not text:
            return None

        channel = message.channel
        if not DiscordUtils.can_send(channel, DiscordUtils.bot_member(channel, client_user)):
            logger.debug(f"Missing send permission in channel {getattr(channel, 'id', '?')}")
            return None

        return await message.reply(text)
