"""Game constants for trick-taking card games."""

# Card ranks (Ace high)
MIN_RANK = 2
MAX_RANK = 14
RANKS_PER_SUIT = MAX_RANK - MIN_RANK + 1
SUITS_COUNT = 4
STANDARD_DECK_SIZE = RANKS_PER_SUIT * SUITS_COUNT

# Trick-rank bands: trump rank > trump suit > lead suit > anything else
LEAD_SUIT_BAND = 20
TRUMP_SUIT_BAND = 40
TRUMP_RANK_BAND = 60
