"""Static content served by the store."""

from app.content.devotional import DEVOTIONAL_DAYS, get_devotional_day
from app.content.fasting import FASTING_CONTENT

__all__ = ["FASTING_CONTENT", "DEVOTIONAL_DAYS", "get_devotional_day"]
