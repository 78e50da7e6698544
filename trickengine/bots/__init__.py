"""Bot players for trick games.

Available bots:
- RandomBot: Plays a random card from hand
"""

from trickengine.bots.base_bot import BaseBot
from trickengine.bots.random_bot import RandomBot

__all__ = ["BaseBot", "RandomBot"]
