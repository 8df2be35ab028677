"""
Shared utilities for building Discord messages with tables.
"""

from typing import List, Optional, Sequence

from tabulate import tabulate

from apps.discord_stats_bot.common.constants import (
    DISCORD_MESSAGE_MAX_LENGTH,
    STAT_FIELD_DISPLAY_NAMES,
)
from libs.csgo_stats import LeaderboardEntry, MatchRecord, Profile, StatField


def build_table_message(
    title: str,
    table_data: List[List],
    headers: List[str],
    prefix_lines: Optional[List[str]] = None,
    max_length: int = DISCORD_MESSAGE_MAX_LENGTH,
    truncation_message: Optional[str] = None
) -> str:
    """
    Build a Discord message with a table, automatically reducing rows if needed.
    
    Args:
        title: Title/header for the message
        table_data: List of rows (each row is a list of values)
        headers: Column headers
        prefix_lines: Additional lines to include before the table
        max_length: Maximum message length (default: 2000 for Discord)
        truncation_message: Custom message when rows are truncated.
                          Use {num_rows} and {total_rows} placeholders.
        
    Returns:
        Formatted message string
    """
    prefix_lines = prefix_lines or []
    truncation_message = truncation_message or "\n*Showing {num_rows} of {total_rows} results (message length limit)*"
    
    message_prefix_lines = [title] + prefix_lines
    
    for num_rows in range(len(table_data), 0, -1):
        table_str = tabulate(
            table_data[:num_rows],
            headers=headers,
            tablefmt="github"
        )
        
        message_lines = message_prefix_lines + ["```", table_str, "```"]
        
        if num_rows < len(table_data):
            message_lines.append(truncation_message.format(
                num_rows=num_rows,
                total_rows=len(table_data)
            ))
        
        message = "\n".join(message_lines)
        
        if len(message) <= max_length:
            return message
    
    return title + "\n*Message too long to display*"


def format_duration(seconds: float) -> str:
    """Format seconds as M:SS."""
    minutes, secs = divmod(int(round(seconds)), 60)
    return f"{minutes}:{secs:02d}"


def build_profile_message(profile: Profile) -> str:
    """Averages and personal bests of a profile as a table message."""
    title = f"## {profile.name}"
    summary = (
        f"**Matches:** {profile.matches_played} | **Won:** {profile.won} | "
        f"**Lost:** {profile.lost} | **Tied:** {profile.tied}"
    )
    if not profile.matches_played:
        return f"{title}\n{summary}\n*No matches recorded yet.*"
    
    table_data = []
    for field in StatField:
        average = profile.averages[field]
        best = profile.highest[field]
        table_data.append([
            STAT_FIELD_DISPLAY_NAMES[field],
            f"{average.mean:.2f}",
            f"{average.standard_deviation:.2f}",
            f"{best.value:g}",
            best.match_id,
        ])
    
    prefix_lines = [summary]
    if profile.best_streak:
        streak_score = sum(game.score for game in profile.best_streak)
        prefix_lines.append(f"**Best {len(profile.best_streak)} games in a row:** {streak_score} score")
    if profile.map_stats:
        favourite = max(profile.map_stats, key=lambda m: m.times_played)
        prefix_lines.append(f"**Most played map:** {favourite.name} ({favourite.times_played} matches)")
    
    return build_table_message(
        title,
        table_data,
        headers=["Stat", "Average", "Std Dev", "Best", "Match"],
        prefix_lines=prefix_lines,
    )


def build_leaderboard_message(entries: Sequence[LeaderboardEntry], limit: int) -> str:
    """Top leaderboard rows as a table message."""
    table_data = [
        [entry.rank, entry.player.name, entry.stats.score, entry.stats.kills,
         entry.stats.deaths, entry.stats.mvps]
        for entry in entries[:limit]
    ]
    if not table_data:
        return "## Leaderboard\n*No matches recorded yet.*"
    return build_table_message(
        "## Leaderboard - Best Single-Match Scores",
        table_data,
        headers=["#", "Player", "Score", "Kills", "Deaths", "MVPs"],
    )


def build_match_message(match: MatchRecord) -> str:
    """Scoreboard of a match as a table message."""
    title = f"## Match {match.id} - {match.map_name}"
    prefix_lines = [
        f"**Date:** {match.date:%Y-%m-%d %H:%M} | **Duration:** {format_duration(match.match_duration)} | "
        f"**Wait:** {format_duration(match.wait_time)}",
        f"**Rounds:** CT {match.ct_rounds} - {match.t_rounds} T | **Winner:** {match.winner.value}",
    ]
    table_data = [
        [p.stats.side.value, p.player.name, p.stats.kills, p.stats.assists, p.stats.deaths,
         p.stats.mvps, f"{p.stats.hsp:g}%", p.stats.score]
        for p in match.players
    ]
    return build_table_message(
        title,
        table_data,
        headers=["Side", "Player", "K", "A", "D", "MVP", "HS", "Score"],
        prefix_lines=prefix_lines,
    )
