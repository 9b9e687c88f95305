"""Discord transport — TransportPort implementation using discord.py."""

from typing import Any, Optional

import discord

from cmdbot.domain.models import EmbedSpec, MentionPolicy


def to_discord_embed(spec: EmbedSpec) -> discord.Embed:
    embed = discord.Embed(
        title=spec.title or None,
        description=spec.description or None,
        colour=spec.colour,
    )
    for f in spec.fields:
        embed.add_field(name=f.name, value=f.value, inline=f.inline)
    return embed


def to_allowed_mentions(policy: MentionPolicy) -> discord.AllowedMentions:
    return discord.AllowedMentions(
        everyone=policy.everyone,
        users=policy.users if isinstance(policy.users, bool) else list(policy.users),
        roles=policy.roles if isinstance(policy.roles, bool) else list(policy.roles),
    )


class DiscordTransport:
    """Sends messages and reactions through discord.py channel/message objects."""

    async def send_message(
        self,
        channel: Any,
        content: Optional[str] = None,
        embed: Optional[EmbedSpec] = None,
        mentions: Optional[MentionPolicy] = None,
    ) -> discord.Message:
        kwargs = {}
        if content is not None:
            kwargs["content"] = content
        if embed is not None:
            kwargs["embed"] = to_discord_embed(embed)
        if mentions is not None:
            kwargs["allowed_mentions"] = to_allowed_mentions(mentions)
        return await channel.send(**kwargs)

    async def add_reaction(self, message: Any, emoji: str) -> None:
        await message.add_reaction(emoji)
