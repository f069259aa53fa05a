"""Risk category code -> display label table."""
from typing import Any

CATEGORY_LABELS: dict[str, str] = {
    "operational": "Operational",
    "financial": "Financial",
    "strategic": "Strategic",
    "compliance": "Compliance",
    "technology": "Technology",
    "reputational": "Reputational",
    "environmental": "Environmental",
    "security": "Security",
}

DEFAULT_CATEGORY_CODE = "operational"


def category_label(code: Any) -> str:
    """Label for a category code; unknown codes pass through unchanged."""
    if code is None:
        return ""
    code = code if isinstance(code, str) else str(code)
    return CATEGORY_LABELS.get(code.lower(), code)
