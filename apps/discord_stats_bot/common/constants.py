"""
Constants used across the CSGO Discord bot commands.
"""

from discord import app_commands

from libs.csgo_stats import StatField

# =============================================================================
# Discord Limits
# =============================================================================

DISCORD_MESSAGE_MAX_LENGTH = 2000

# =============================================================================
# Display Limits
# =============================================================================

LEADERBOARD_DISPLAY_LIMIT = 25
SEARCH_DISPLAY_LIMIT = 15
STATISTICS_DISPLAY_LIMIT = 20

# =============================================================================
# Stat Field Choices
# =============================================================================

STAT_FIELD_DISPLAY_NAMES = {
    StatField.KILLS: "Kills",
    StatField.DEATHS: "Deaths",
    StatField.ASSISTS: "Assists",
    StatField.HSP: "Headshot %",
    StatField.MVPS: "MVPs",
    StatField.SCORE: "Score",
    StatField.PING: "Ping",
    StatField.WAIT_TIME: "Wait Time",
    StatField.MATCH_DURATION: "Match Duration",
}

STAT_FIELD_CHOICES = [
    app_commands.Choice(name=display_name, value=field.value)
    for field, display_name in STAT_FIELD_DISPLAY_NAMES.items()
]
