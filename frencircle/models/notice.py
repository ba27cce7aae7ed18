"""User-visible notices (success / error messages after store calls)."""
from dataclasses import dataclass


@dataclass
class Notice:
    title: str
    description: str
    variant: str  # "default" | "destructive"
    created_at: str
