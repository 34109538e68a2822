"""Score a new entry before it is written: sentiment, label, emotions."""

from typing import Optional

import structlog

from .emotions import detect_emotions
from .forecast import classify_score
from .remote_sentiment import HuggingFaceSentimentClient
from .sentiment import analyze_sentiment

logger = structlog.get_logger()


def analyze_entry(
    text: str,
    remote: Optional[HuggingFaceSentimentClient] = None,
) -> dict:
    """Frontmatter fields for a new entry.

    Uses the remote classifier when given and reachable, the lexicon otherwise.

    Returns:
        {score: float (-1 to 1), sentiment: str, emotions: list[str], analyzer: str, score_scale: str}
    """
    result = remote.classify(text) if remote is not None else None
    if result is not None:
        score = round(result["score"], 3)
        analyzer = "huggingface"
    else:
        if remote is not None:
            logger.info("analysis.remote_fallback")
        score = analyze_sentiment(text)["score"]
        analyzer = "lexicon"

    label = str(classify_score(score))
    return {
        "score": score,
        "sentiment": label,
        "emotions": detect_emotions(text, label),
        "analyzer": analyzer,
        "score_scale": "signed",
    }
