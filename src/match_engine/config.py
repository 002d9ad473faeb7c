# Play resolution
TURNOVER_PROBABILITY = 0.05  # Interception chance on any play call
BIG_PLAY_REWARD_DIVISOR = 20  # P(big play) = reward / divisor
BASE_GAIN_SPREAD = 8  # Base gain is 2-9 yards
BASE_GAIN_MIN = 2
BIG_PLAY_SPREAD = 20  # Big-play bonus is 10-29 yards
BIG_PLAY_MIN = 10
SACK_PROBABILITY = 0.2  # Failed pass plays only
SACK_SPREAD = 8  # Sacks lose 1-8 yards
DEFAULT_TARGET = "Collins"  # Receiver named on incompletions

# Field and down-and-distance
GOAL_LINE = 100
MIDFIELD = 50
TOUCHDOWN_POINTS = 7  # Extra point is automatic
KICKOFF_BALL_ON = 25
FIRST_DOWN_DISTANCE = 10
MAX_DOWNS = 4
START_QUARTER = 1
START_CLOCK = "12:45"

# Win probability
INITIAL_WIN_PROBABILITY = 50
WIN_PROB_SCORE_SWING = 5
WIN_PROB_EXPLOSIVE_SWING = 2
WIN_PROB_LOSS_SWING = -2
EXPLOSIVE_PLAY_YARDS = 10  # Gains strictly above this count as explosive
MIN_WIN_PROBABILITY = 1
MAX_WIN_PROBABILITY = 99
