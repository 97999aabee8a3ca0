"""RecognitionGateway backed by the Gemini ``generateContent`` REST API.

The frame goes up as inline base64 JPEG together with a JSON response
schema, so the model answers with exactly the fields of a Detection.
Transport problems are retried a bounded number of times; anything still
failing becomes a RecognitionError for the caller to surface as "try
again".
"""

from __future__ import annotations

import base64
import json
import logging

import requests

from soletrack.domain.exceptions import RecognitionError, ValidationError
from soletrack.domain.gateway.recognition import Detection, RecognitionGateway
from soletrack.domain.model.value_objects import Money

logger = logging.getLogger(__name__)

API_ROOT = "https://generativelanguage.googleapis.com/v1beta/models"
DEFAULT_MODEL = "gemini-2.5-flash"
DEFAULT_TIMEOUT = 15.0
DEFAULT_ATTEMPTS = 2
RETRYABLE_STATUS = {429, 500, 502, 503, 504}
RETRYABLE_ERRORS = (
    requests.ConnectionError,
    requests.Timeout,
    requests.exceptions.ChunkedEncodingError,
)

SYSTEM_INSTRUCTION = """\
You are a professional footwear recognition system for store inventory management.

CRITICAL RULES:
1. Identify the brand, model silhouette, and color.
2. Estimate both the typical WHOLESALE price (store cost) and RETAIL price (selling price) in {currency}.
3. Always return a valid JSON matching the schema.
4. Provide a 'confidence' score from 0 to 1.
"""

PROMPT = """\
Analyze this image for a shoe.
Return the Brand, Color, Estimated EU Size, Estimated Wholesale Price, and Estimated Retail Price in {currency}.
If no shoe is visible, set brand to "None detected" and confidence to 0.
"""

RESPONSE_SCHEMA = {
    "type": "OBJECT",
    "properties": {
        "color": {"type": "STRING", "description": "Primary colorway"},
        "size": {"type": "STRING", "description": "Estimated EU size"},
        "wholesalePrice": {"type": "NUMBER", "description": "Estimated wholesale cost"},
        "retailerPrice": {"type": "NUMBER", "description": "Estimated retail price"},
        "brand": {"type": "STRING", "description": "Detected brand name"},
        "confidence": {"type": "NUMBER", "description": "Confidence score 0-1"},
        "notes": {"type": "STRING", "description": "Troubleshooting note for the user"},
    },
    "required": [
        "color", "size", "wholesalePrice", "retailerPrice", "brand", "confidence", "notes",
    ],
}


class GeminiRecognitionGateway(RecognitionGateway):

    def __init__(
        self,
        api_key: str,
        model: str = DEFAULT_MODEL,
        timeout: float = DEFAULT_TIMEOUT,
        attempts: int = DEFAULT_ATTEMPTS,
        currency: str = "INR",
        session: requests.Session | None = None,
    ) -> None:
        self._api_key = api_key
        self._model = model
        self._timeout = timeout
        self._attempts = max(1, attempts)
        self._currency = currency
        self._session = session or requests.Session()

    # --- RecognitionGateway interface -----------------------------------------

    def detect(self, image: bytes) -> Detection:
        if not self._api_key:
            raise RecognitionError("No recognition API key configured (set GEMINI_API_KEY)")

        payload = self._build_request(image)
        body = self._post(payload)
        return self._parse(body)

    # --- Request / response ---------------------------------------------------

    def _build_request(self, image: bytes) -> dict:
        return {
            "systemInstruction": {
                "parts": [{"text": SYSTEM_INSTRUCTION.format(currency=self._currency)}]
            },
            "contents": [
                {
                    "parts": [
                        {
                            "inlineData": {
                                "mimeType": "image/jpeg",
                                "data": base64.b64encode(image).decode("ascii"),
                            }
                        },
                        {"text": PROMPT.format(currency=self._currency)},
                    ]
                }
            ],
            "generationConfig": {
                "responseMimeType": "application/json",
                "responseSchema": RESPONSE_SCHEMA,
            },
        }

    def _post(self, payload: dict) -> dict:
        url = f"{API_ROOT}/{self._model}:generateContent"
        headers = {"x-goog-api-key": self._api_key, "Content-Type": "application/json"}
        last_error: Exception | None = None

        for attempt in range(1, self._attempts + 1):
            try:
                response = self._session.post(
                    url, json=payload, headers=headers, timeout=self._timeout
                )
            except RETRYABLE_ERRORS as exc:
                logger.warning("Recognition attempt %d/%d failed: %s", attempt, self._attempts, exc)
                last_error = exc
                continue
            except requests.RequestException as exc:
                raise RecognitionError(f"Recognition request failed: {exc}") from exc

            if response.status_code in RETRYABLE_STATUS:
                logger.warning(
                    "Recognition attempt %d/%d got HTTP %d", attempt, self._attempts, response.status_code
                )
                last_error = RecognitionError(f"HTTP {response.status_code}")
                continue

            try:
                response.raise_for_status()
                return response.json()
            except requests.HTTPError as exc:
                raise RecognitionError(f"Recognition request rejected: {exc}") from exc
            except ValueError as exc:
                raise RecognitionError("Recognition service returned invalid JSON") from exc

        raise RecognitionError(f"AI service busy, please try again ({last_error})")

    @staticmethod
    def _parse(body: dict) -> Detection:
        try:
            text = body["candidates"][0]["content"]["parts"][0]["text"]
        except (KeyError, IndexError, TypeError) as exc:
            raise RecognitionError("Empty response from recognition service") from exc

        try:
            fields = json.loads(text.strip())
            return Detection(
                color=str(fields["color"]),
                size=str(fields["size"]),
                wholesale_price=Money.of(fields["wholesalePrice"]),
                retailer_price=Money.of(fields["retailerPrice"]),
                brand=str(fields["brand"]),
                confidence=float(fields["confidence"]),
                notes=str(fields.get("notes") or ""),
            )
        except (ValueError, KeyError, TypeError, AttributeError, ValidationError) as exc:
            raise RecognitionError(
                "Failed to parse shoe features. Make sure the shoe is clearly visible and try again."
            ) from exc
