#   _____  _____ _   _  ____  _    _ _    _ ____  
#  |  __ \|_   _| \ | |/ __ \| |  | | |  | |  _ \ 
#  | |  | | | | |  \| | |  | | |__| | |  | | |_) |
#  | |  | | | | | . ` | |  | |  __  | |  | |  _ < 
#  | |__| |_| |_| |\  | |__| | |  | | |__| | |_) |
#  |_____/|_____|_| \_|\____/|_|  |_|\____/|____/ 
#                                                  

# Id and clock helpers - Default id generator and server timestamp source for new records.

# --------------------------------------------------------------------------
#                                  Functions
# --------------------------------------------------------------------------
# new_id: Returns a fresh globally unique opaque id.
# server_timestamp: Returns the current time in epoch milliseconds.

# --------------------------------------------------------------------------
#                            Variables and others
# --------------------------------------------------------------------------
# IdFactory: Callable type producing ids.
# Clock: Callable type producing epoch-millisecond timestamps.

# --------------------------------------------------------------------------
#                                   imports
# --------------------------------------------------------------------------
# time: Wall clock.
# uuid: UUID generation.
# typing: Type hints.

import time
import uuid
from typing import Callable

IdFactory = Callable[[], str]
Clock = Callable[[], int]


def new_id() -> str:
    return str(uuid.uuid4())


def server_timestamp() -> int:
    """Epoch milliseconds, the same unit the Realtime Database TIMESTAMP uses"""
    return time.time_ns() // 1_000_000
