"""Friend entity, circle counters, and list view state."""
from dataclasses import dataclass, field
from datetime import date, datetime
from typing import List, Optional

CATEGORIES = ("bestfren", "workfren")
STATUSES = ("active", "busy", "away")
CONTACT_FREQUENCIES = ("weekly", "biweekly", "monthly")

# List tabs as the web client names them -> category
TAB_CATEGORIES = {"bestfrens": "bestfren", "workfrens": "workfren"}


@dataclass
class Friend:
    """A tracked relationship."""
    id: str
    name: str
    avatar: str
    category: str  # "bestfren" | "workfren"
    last_interaction: datetime
    status: str = "active"  # "active" | "busy" | "away"
    notes: str = ""
    contact_frequency: str = "weekly"  # "weekly" | "biweekly" | "monthly"
    birthday: Optional[date] = None
    favorite_artists: List[str] = field(default_factory=list)


@dataclass
class FriendDraft:
    """A friend not yet stored (no id)."""
    name: str
    avatar: str
    category: str
    last_interaction: datetime
    status: str = "active"
    notes: str = ""
    contact_frequency: str = "weekly"
    birthday: Optional[date] = None
    favorite_artists: List[str] = field(default_factory=list)


@dataclass(frozen=True)
class CircleStats:
    """Counters for one circle; derived on every read, never stored."""
    total: int
    active: int
    needs_attention: int


@dataclass(frozen=True)
class CircleSummary:
    """Dashboard panel for one circle: stats plus capacity fill."""
    category: str
    stats: CircleStats
    capacity: int
    percentage: int


@dataclass(frozen=True)
class FriendView:
    """Search text, status filter and tab the list is currently showing."""
    search: str = ""
    status_filter: str = "all"  # "all" | "needs-attention" | a status
    tab: str = "all"  # "all" | "bestfrens" | "workfrens" (or a category)

    @property
    def category(self) -> Optional[str]:
        """Category the tab selects, or None for every category."""
        if self.tab == "all":
            return None
        return TAB_CATEGORIES.get(self.tab, self.tab)
