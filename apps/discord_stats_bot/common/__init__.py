"""
Common utilities module for the CSGO Discord bot.

This module provides centralized access to shared functionality:
- Stats service lifecycle
- Player lookup
- Command logging
- Command decorators
- Message building
"""

# Stats service lifecycle
from apps.discord_stats_bot.common.database import (
    initialize_stats_service,
    get_stats_service,
    close_stats_service,
)

# Player lookup
from apps.discord_stats_bot.common.player_lookup import find_player

# Command logging
from apps.discord_stats_bot.common.logging import (
    log_command_data,
    log_command_completion,
    get_command_latency_ms,
)

# Command decorators
from apps.discord_stats_bot.common.decorators import (
    command_wrapper,
    error_message_for,
    handle_command_errors,
)

# Message building
from apps.discord_stats_bot.common.message_builder import (
    build_table_message,
    build_profile_message,
    build_leaderboard_message,
    build_match_message,
    format_duration,
)

__all__ = [
    'initialize_stats_service',
    'get_stats_service',
    'close_stats_service',
    'find_player',
    'log_command_data',
    'log_command_completion',
    'get_command_latency_ms',
    'command_wrapper',
    'error_message_for',
    'handle_command_errors',
    'build_table_message',
    'build_profile_message',
    'build_leaderboard_message',
    'build_match_message',
    'format_duration',
]
