import enum

# Game types a bet pattern can settle under
class GameType(str, enum.Enum):
    single = "single"
    double = "double"
    single_panna = "single_panna"
    double_panna = "double_panna"
    triple_panna = "triple_panna"
    half_sangam_open = "half_sangam_open"
    half_sangam_close = "half_sangam_close"
    full_sangam = "full_sangam"

PANNA_GAME_TYPES = (GameType.single_panna, GameType.double_panna, GameType.triple_panna)

# Which half of the market day a result is declared for
class ResultType(str, enum.Enum):
    open = "open"
    close = "close"

# Session a bet was placed for ("both" settles on either declaration)
class BetSession(str, enum.Enum):
    open = "open"
    close = "close"
    both = "both"

# Filter applied when aggregating bets for the load screen
class SessionFilter(str, enum.Enum):
    all = "all"
    open = "open"
    close = "close"

# Bucket name in AggregatedBetTotals for each game type
BUCKET_BY_GAME_TYPE = {
    GameType.single: "single_numbers",
    GameType.double: "double_numbers",
    GameType.single_panna: "single_panna",
    GameType.double_panna: "double_panna",
    GameType.triple_panna: "triple_panna",
    GameType.half_sangam_open: "half_sangam_open",
    GameType.half_sangam_close: "half_sangam_close",
    GameType.full_sangam: "full_sangam",
}
