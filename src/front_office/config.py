"""Default reference data for the front office.

These records seed :class:`LeagueRepository` via ``from_defaults()``; nothing
else should import them directly.
"""

from pathlib import Path

# Base project directory
PROJECT_ROOT = Path(__file__).parent.parent.parent

# Optional JSON reference data
REFERENCE_DATA_DIR = PROJECT_ROOT / "data" / "reference"
LEAGUE_FILE = REFERENCE_DATA_DIR / "league.json"

USER_TEAM_ID = "HOU"
FREE_AGENT_TEAM_ID = "FA"
DEFAULT_CAP_SPACE = 14.2  # Millions

# Scouting department
SCOUTING_HOURS = 100
SCOUTING_COST_PER_PROSPECT = 10

# Trade analyzer
TRADE_FAIRNESS_MARGIN = 0.15  # Within 15% of the larger side counts as fair
TRADE_AGE_CEILING = 35
MIN_AGE_FACTOR = 0.5

DEFAULT_TEAMS = [
    {"team_id": "HOU", "name": "Houston Texans", "division": "AFC South"},
    {"team_id": "IND", "name": "Indianapolis Colts", "division": "AFC South"},
    {"team_id": "JAX", "name": "Jacksonville Jaguars", "division": "AFC South"},
    {"team_id": "TEN", "name": "Tennessee Titans", "division": "AFC South"},
    {"team_id": "KC", "name": "Kansas City Chiefs", "division": "AFC West"},
]

DEFAULT_PLAYERS = [
    {
        "player_id": "1", "name": "C. Stroud", "position": "QB", "age": 24,
        "overall": 91, "team_id": "HOU", "archetype": "Field General",
        "development_trait": "X-Factor", "morale": 95, "fatigue": 98,
        "contract": {"years": 4, "salary": 9.5, "bonus": 24, "years_left": 3, "total_value": 62},
    },
    {
        "player_id": "2", "name": "J. Mixon", "position": "RB", "age": 29,
        "overall": 84, "team_id": "HOU", "archetype": "Power Back",
        "development_trait": "Star", "morale": 88, "fatigue": 82,
        "contract": {"years": 3, "salary": 8.5, "bonus": 6, "years_left": 2, "total_value": 31.5},
    },
    {
        "player_id": "3", "name": "N. Collins", "position": "WR", "age": 26,
        "overall": 89, "team_id": "HOU", "archetype": "Deep Threat",
        "development_trait": "Superstar", "morale": 92, "fatigue": 90,
        "contract": {"years": 4, "salary": 14, "bonus": 10, "years_left": 3, "total_value": 66},
    },
    {
        "player_id": "4", "name": "T. Dell", "position": "WR", "age": 25,
        "overall": 83, "team_id": "HOU", "archetype": "Slot Specialist",
        "development_trait": "Star", "morale": 85, "fatigue": 94,
        "contract": {"years": 4, "salary": 1.8, "bonus": 2, "years_left": 2, "total_value": 9.2},
    },
    {
        "player_id": "5", "name": "W. Anderson Jr.", "position": "DL", "age": 24,
        "overall": 94, "team_id": "HOU", "archetype": "Speed Rusher",
        "development_trait": "X-Factor", "morale": 96, "fatigue": 91,
        "contract": {"years": 4, "salary": 8.8, "bonus": 22, "years_left": 3, "total_value": 57.2},
    },
    {
        "player_id": "6", "name": "D. Stingley Jr.", "position": "CB", "age": 24,
        "overall": 90, "team_id": "HOU", "archetype": "Man-to-Man",
        "development_trait": "Superstar", "morale": 89, "fatigue": 88,
        "contract": {"years": 4, "salary": 9, "bonus": 20, "years_left": 1, "total_value": 56},
    },
    {
        "player_id": "7", "name": "L. Tunsil", "position": "OL", "age": 31,
        "overall": 92, "team_id": "HOU", "archetype": "Pass Protector",
        "development_trait": "Star", "morale": 90, "fatigue": 85,
        "contract": {"years": 3, "salary": 25, "bonus": 15, "years_left": 0, "total_value": 90},
        "contract_demand": {"years": 3, "salary": 26.5, "bonus": 18, "interest": "Security"},
    },
    {
        "player_id": "8", "name": "T. Kelce", "position": "TE", "age": 35,
        "overall": 87, "team_id": "KC", "archetype": "Vertical Threat",
        "development_trait": "Superstar", "morale": 91, "fatigue": 80,
        "contract": {"years": 2, "salary": 17.25, "bonus": 0, "years_left": 1, "total_value": 34.5},
    },
    {
        "player_id": "9", "name": "R. Rice", "position": "WR", "age": 24,
        "overall": 82, "team_id": "KC", "archetype": "Route Runner",
        "development_trait": "Star", "morale": 86, "fatigue": 93,
        "contract": {"years": 4, "salary": 1.2, "bonus": 1.5, "years_left": 2, "total_value": 6.3},
    },
    {
        "player_id": "10", "name": "D. Henry", "position": "RB", "age": 31,
        "overall": 86, "team_id": "FA", "archetype": "Power Back",
        "development_trait": "Star", "morale": 80, "fatigue": 95,
        "contract": {"years": 2, "salary": 8, "bonus": 4, "years_left": 0, "total_value": 20},
        "contract_demand": {
            "years": 2, "salary": 7.5, "bonus": 3, "interest": "Championship",
            "market_value": 9.0,
        },
    },
    {
        "player_id": "11", "name": "J. Simmons", "position": "S", "age": 29,
        "overall": 88, "team_id": "FA", "archetype": "Zone Hawk",
        "development_trait": "Star", "morale": 84, "fatigue": 97,
        "contract": {"years": 4, "salary": 11, "bonus": 6, "years_left": 0, "total_value": 50},
        "contract_demand": {
            "years": 3, "salary": 10, "bonus": 5, "interest": "Money",
            "market_value": 11.5,
        },
    },
]

DEFAULT_PLAYS = [
    {"play_id": "p1", "name": "Inside Zone", "type": "Run", "formation": "Shotgun", "risk": 2, "reward": 4, "success_rate": 0.65},
    {"play_id": "p2", "name": "Stretch Right", "type": "Run", "formation": "Singleback", "risk": 3, "reward": 5, "success_rate": 0.55},
    {"play_id": "p3", "name": "Mesh Spot", "type": "Pass", "formation": "Shotgun Bunch", "risk": 3, "reward": 5, "success_rate": 0.70},
    {"play_id": "p4", "name": "PA Crossers", "type": "Pass", "formation": "I-Form", "risk": 5, "reward": 8, "success_rate": 0.50},
    {"play_id": "p5", "name": "Four Verticals", "type": "Pass", "formation": "Empty", "risk": 8, "reward": 10, "success_rate": 0.35},
    {"play_id": "p6", "name": "HB Screen", "type": "Pass", "formation": "Shotgun", "risk": 6, "reward": 7, "success_rate": 0.45},
]

DEFAULT_DRAFT_CLASS = [
    {"prospect_id": "d1", "name": "Arch Manning", "position": "QB", "school": "Texas", "projected_round": 1, "scouting_grade": 98, "forty_yard": 4.6, "bench": 12},
    {"prospect_id": "d2", "name": "Jeremiah Smith", "position": "WR", "school": "Ohio State", "projected_round": 1, "scouting_grade": 96, "forty_yard": 4.32, "bench": 15},
    {"prospect_id": "d3", "name": "Elijah Brown", "position": "QB", "school": "Stanford", "projected_round": 2, "scouting_grade": 78, "forty_yard": 4.8, "bench": 10},
    {"prospect_id": "d4", "name": "David Stone", "position": "DL", "school": "Oklahoma", "projected_round": 1, "scouting_grade": 92, "forty_yard": 4.9, "bench": 32},
    {"prospect_id": "d5", "name": "Nyckoles Harbor", "position": "WR", "school": "South Carolina", "projected_round": 1, "scouting_grade": 90, "forty_yard": 4.28, "bench": 18},
]

# Rich Hill chart values
DEFAULT_DRAFT_PICKS = [
    {"round": 1, "pick_number": 24, "original_team_id": "HOU", "current_team_id": "HOU", "year": 2026, "value": 210.0},
    {"round": 2, "pick_number": 56, "original_team_id": "HOU", "current_team_id": "HOU", "year": 2026, "value": 66.0},
    {"round": 1, "pick_number": 31, "original_team_id": "KC", "current_team_id": "KC", "year": 2026, "value": 168.0},
    {"round": 3, "pick_number": 88, "original_team_id": "IND", "current_team_id": "HOU", "year": 2026, "value": 24.0},
]
