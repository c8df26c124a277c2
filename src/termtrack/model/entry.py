# SPDX-License-Identifier: MIT

import uuid
from typing import Optional, TypeAlias, TypedDict

# Ids written by older tools are short hex strings, new ones are uuid4
EntryId: TypeAlias = str


def generate_entry_id() -> EntryId:
    return str(uuid.uuid4())


class TimeEntry(TypedDict):
    id: Optional[EntryId]
    project: str
    duration_minutes: int
    date: str  # YYYY-MM-DD, naive calendar day the work is attributed to
    description: str
    timestamp: int  # creation instant in epoch milliseconds, audit only
