# Global Game Configuration

# Dice
NUM_DICE = 5
NUM_FACES = 6
ROLLS_PER_TURN = 3  # First roll + two re-rolls

# Fixed scores
FULL_HOUSE_SCORE = 25
SMALL_STRAIGHT_SCORE = 30
LARGE_STRAIGHT_SCORE = 40
FIVE_OF_A_KIND_SCORE = 50

# Upper section bonus
UPPER_BONUS_THRESHOLD = 63
UPPER_BONUS = 35

# Engine / agent interface
KEEP_ACTIONS = 32  # 5-bit keep masks
OUTPUT_SIZE = 45   # 32 (Keep Masks) + 13 (Score Categories)
INVALID_ACTION_PENALTY = -10
