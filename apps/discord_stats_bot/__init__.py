"""
CSGO stats Discord bot.

Thin slash-command front-end over the stats engine in libs.csgo_stats:
profiles, player search, statistics, matches and the leaderboard.
"""

def main():
    """Main entry point for the Discord bot."""
    from apps.discord_stats_bot.stats_bot import main as _main
    _main()

__all__ = ['main']
