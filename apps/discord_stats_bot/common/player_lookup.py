"""
Player resolution from free-form command input.

Accepts a Steam profile link, a player ID or a player name.
"""

import logging

from libs.csgo_stats import NotFoundError, PlayerRecord, StatsService

logger = logging.getLogger(__name__)


def _is_profile_link(player_input: str) -> bool:
    return player_input.startswith(("http://", "https://"))


async def find_player(service: StatsService, player_input: str) -> PlayerRecord:
    """
    Look up a player by profile link, ID or name.
    
    A name must either match exactly (ignoring case) or be the prefix of
    exactly one player's name.
    
    Raises:
        NotFoundError: If no player can be determined from the input.
    """
    player_input = str(player_input).strip()
    
    if _is_profile_link(player_input):
        return await service.get_player_by_link(player_input)
    
    try:
        return await service.get_player(player_input)
    except NotFoundError:
        logger.debug(f"No player with ID {player_input!r}, trying name search")
    
    candidates = await service.search(player_input)
    exact = [p for p in candidates if p.name.casefold() == player_input.casefold()]
    if exact:
        return exact[0]
    if len(candidates) == 1:
        return candidates[0]
    
    raise NotFoundError("Player", player_input)
