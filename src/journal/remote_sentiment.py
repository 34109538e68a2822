"""Hosted sentiment classifier (Hugging Face inference API)."""

import os
from typing import Optional

import httpx
import structlog

from .sentiment import score_from_classifier

logger = structlog.get_logger()

DEFAULT_MODEL = "distilbert-base-uncased-finetuned-sst-2-english"
API_URL = "https://api-inference.huggingface.co/models/{model}"


class HuggingFaceSentimentClient:
    """Classify text with a hosted POSITIVE/NEGATIVE model.

    Failures are logged and reported as None so callers can fall back to the lexicon.
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        model: str = DEFAULT_MODEL,
        timeout: float = 30.0,
        client: Optional[httpx.Client] = None,
    ):
        self.api_key = api_key or os.getenv("HUGGINGFACE_API_KEY")
        self.model = model
        self.client = client or httpx.Client(timeout=timeout)

    def classify(self, text: str) -> Optional[dict]:
        """Classify text.

        Returns:
            {label, confidence, score (-1..1)} or None if unavailable
        """
        if not self.api_key:
            logger.warning("remote_sentiment.no_api_key")
            return None

        try:
            response = self.client.post(
                API_URL.format(model=self.model),
                headers={"Authorization": f"Bearer {self.api_key}"},
                json={"inputs": text, "options": {"wait_for_model": True}},
            )
            response.raise_for_status()
            data = response.json()
        except httpx.HTTPStatusError as e:
            logger.error("remote_sentiment.http_error", status=e.response.status_code)
            return None
        except httpx.RequestError as e:
            logger.error("remote_sentiment.request_failed", error=str(e))
            return None
        except ValueError as e:
            logger.error("remote_sentiment.bad_response", error=str(e))
            return None

        # Response shape: [[{label, score}, ...]]
        if not isinstance(data, list) or not data or not isinstance(data[0], list) or not data[0]:
            logger.error("remote_sentiment.unexpected_payload")
            return None

        results = [r for r in data[0] if isinstance(r, dict)]
        if not results:
            logger.error("remote_sentiment.unexpected_payload")
            return None

        best = max(results, key=lambda r: r.get("score", 0.0))
        label = str(best.get("label", "NEUTRAL")).upper()
        confidence = float(best.get("score", 0.0))
        return {
            "label": label,
            "confidence": confidence,
            "score": score_from_classifier(label, confidence),
        }

    def close(self):
        """Close the HTTP client."""
        self.client.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
