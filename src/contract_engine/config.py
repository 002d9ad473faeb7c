# Interest scoring
YEAR_MISMATCH_PENALTY = 10  # Points lost per year of length mismatch
MIN_INTEREST_SCORE = 0.0
MAX_INTEREST_SCORE = 100.0

# Offer evaluation thresholds (interest score)
ACCEPTANCE_THRESHOLD = 95
CLOSE_THRESHOLD = 85
BELOW_MARKET_THRESHOLD = 70

# Decimal places used when a contract is persisted
MONEY_PRECISION = 2

# Negotiation slider bounds
OFFER_YEARS_RANGE = (1, 7)
OFFER_SALARY_RANGE = (0.5, 60.0)
OFFER_BONUS_RANGE = (0.0, 50.0)

# Opening offer as a fraction of the player's demand
OPENING_SALARY_FRACTION = 0.9
OPENING_BONUS_FRACTION = 0.8

# Cap accounting
DEFAULT_CAP_YEAR = 2026
VETERAN_MINIMUM_SALARY = 1.21  # Salary floor left in place by a restructure
MAX_PRORATION_YEARS = 5  # League rule: proration may not exceed 5 years
MAX_VOID_YEARS = 4
