from typing import Dict, List, NamedTuple, Tuple

EXCERPT_LENGTH = 200


class InsightRule(NamedTuple):
    keywords: Tuple[str, ...]
    title: str
    priority: str


# Keywords are matched case-insensitively as substrings of the reply
INSIGHT_RULES: Dict[str, InsightRule] = {
    "strategy": InsightRule(
        keywords=("strategy", "approach", "framework", "method"),
        title="Growth Strategy Discussed",
        priority="high",
    ),
    "tactic": InsightRule(
        keywords=("tactic", "technique", "hack", "tip", "action"),
        title="Actionable Tactic Shared",
        priority="medium",
    ),
    "metric": InsightRule(
        keywords=("metric", "kpi", "measure", "track", "analyze"),
        title="Key Metric Identified",
        priority="low",
    ),
}


def excerpt(text: str, length: int = EXCERPT_LENGTH) -> str:
    return text[:length] + "..."


def derive_insights(reply: str) -> List[Dict[str, str]]:
    """Advisory insights for every rule category whose keywords occur in the reply."""
    lowered = reply.lower()
    insights = []
    for category, rule in INSIGHT_RULES.items():
        if any(keyword in lowered for keyword in rule.keywords):
            insights.append({
                "type": category,
                "title": rule.title,
                "content": excerpt(reply),
                "priority": rule.priority,
            })
    return insights
