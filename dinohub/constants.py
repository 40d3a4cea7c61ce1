#   _____  _____ _   _  ____  _    _ _    _ ____  
#  |  __ \|_   _| \ | |/ __ \| |  | | |  | |  _ \ 
#  | |  | | | | |  \| | |  | | |__| | |  | | |_) |
#  | |  | | | | | . ` | |  | |  __  | |  | |  _ < 
#  | |__| |_| |_| |\  | |__| | |  | | |__| | |_) |
#  |_____/|_____|_| \_|\____/|_|  |_|\____/|____/ 
#                                                  

# Constants - Store layout, default values and limits shared across the core.

# --------------------------------------------------------------------------
#                                  Functions
# --------------------------------------------------------------------------
# None

# --------------------------------------------------------------------------
#                            Variables and others
# --------------------------------------------------------------------------
# USERS: Collection holding player identities.
# GAME_PROFILES: Collection holding linked progress records.
# FRIENDS / REQUESTS_SENT / REQUESTS_RECEIVED: Relationship sets under an identity.
# GAME_PROFILE_IDS: Index of progress records owned by an identity.
# GAME_DATA: Map of progress fields inside a progress record.
# PSEUDO: Player name, stored under both identities and progress records.
# PROFILE: Free-form profile metadata under an identity.
# UNKNOWN_DISPLAY_NAME: Placeholder for identities with a missing or corrupt name.
# INITIAL_GAME_DATA: Counters written for new progress records.
# DEFAULT_RANKING_FIELD: Progress field the leaderboard ranks by.
# DEFAULT_LEADERBOARD_LIMIT: Entries returned when no limit is given.
# FORBIDDEN_KEY_CHARS: Characters a store key may not contain.

# --------------------------------------------------------------------------
#                                   imports
# --------------------------------------------------------------------------
# None

USERS = "users"
GAME_PROFILES = "gameProfiles"

FRIENDS = "friends"
REQUESTS_SENT = "friendRequestsSent"
REQUESTS_RECEIVED = "friendRequestsReceived"
GAME_PROFILE_IDS = "gameProfileIds"
PROFILE = "profile"

GAME_DATA = "gameData"
OWNER_UID = "ownerUid"
PSEUDO = "pseudo"

UNKNOWN_DISPLAY_NAME = "Unknown"

INITIAL_GAME_DATA = {
    "mainScore": 0,
    "level": 0,
}

DEFAULT_RANKING_FIELD = "mainScore"
DEFAULT_LEADERBOARD_LIMIT = 100
MAX_LEADERBOARD_LIMIT = 100

# Firebase Realtime Database key restrictions
FORBIDDEN_KEY_CHARS = frozenset(".$#[]/")
