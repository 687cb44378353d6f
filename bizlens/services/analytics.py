# bizlens/services/analytics.py

from collections import Counter
from typing import Any, Dict, List

RATING_BUCKETS = ("1-2", "2-3", "3-4", "4-5")
TOP_ACTIVITIES_LIMIT = 10


def rating_bucket(rating: float) -> str:
    # ordered >= checks; 0, negatives and NaN all fall through to "1-2"
    if rating >= 4:
        return "4-5"
    elif rating >= 3:
        return "3-4"
    elif rating >= 2:
        return "2-3"
    return "1-2"


def build_analytics(businesses: List[Dict[str, Any]]) -> Dict[str, List[Dict[str, Any]]]:
    """
    Derive the three chart datasets from the normalized business list:
    - industryDistribution: [{name, value}] in first-seen order
    - ratingDistribution:   [{rating, count}] for all four buckets
    - activityFrequency:    [{activity, count}] top 10, most common first
    """
    industries: Counter = Counter()
    activities: Counter = Counter()
    ratings = {bucket: 0 for bucket in RATING_BUCKETS}

    for b in businesses:
        industries[b["industry"]] += 1
        activities.update(b["activities"])
        ratings[rating_bucket(b["rating"])] += 1

    # Counter keeps first-seen order and sorted() is stable, so ties stay in that order
    top_activities = sorted(activities.items(), key=lambda kv: kv[1], reverse=True)

    return {
        "industryDistribution": [
            {"name": name, "value": value} for name, value in industries.items()
        ],
        "ratingDistribution": [
            {"rating": bucket, "count": ratings[bucket]} for bucket in RATING_BUCKETS
        ],
        "activityFrequency": [
            {"activity": activity, "count": count}
            for activity, count in top_activities[:TOP_ACTIVITIES_LIMIT]
        ],
    }
