from typing import Any, Optional
import json
import logging
import requests
from pydantic import ValidationError
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from .types import Deck, GenerationFailure, GenerationOutcome, GenerationRequest, GenerationResponse, GenerationSuccess
from .config import settings
from .exceptions import TransportError
from .notices import GENERIC_FAILURE, LoggingNotifier, Notifier, notice_for


logger = logging.getLogger(__name__)


def _build_session() -> requests.Session:
    session = requests.Session()
    retry = Retry(
        total=settings.retries,
        backoff_factor=1.5,
        status_forcelist=[502, 503, 504],
        allowed_methods=frozenset(["POST"]),
        raise_on_status=False,
    )
    adapter = HTTPAdapter(max_retries=retry)
    session.mount("http://", adapter)
    session.mount("https://", adapter)
    return session


def _service_message(payload: Any) -> Optional[str]:
    if not isinstance(payload, dict):
        return None
    for key in ("message", "detail"):
        value = payload.get(key)
        if isinstance(value, str) and value.strip():
            return value
    return None


def _decode(resp: requests.Response) -> Any:
    try:
        return resp.json()
    except ValueError as exc:
        raise TransportError(
            "generation service returned a non-JSON body",
            cause=exc,
            context={"status_code": resp.status_code},
        )


def to_outcome(payload: Any) -> GenerationOutcome:
    """Map a decoded service response onto a success or failure outcome."""
    if not isinstance(payload, dict):
        return GenerationFailure(message=GENERIC_FAILURE)
    try:
        data = GenerationResponse.model_validate(payload)
    except ValidationError as exc:
        logger.warning("malformed generation response: %s", exc)
        # a success body carries a success message, not a diagnostic
        if payload.get("status") == "success":
            return GenerationFailure(message=GENERIC_FAILURE)
        return GenerationFailure(message=_service_message(payload) or GENERIC_FAILURE)
    if data.status != "success":
        return GenerationFailure(message=_service_message(payload) or GENERIC_FAILURE)
    deck = Deck(
        title=data.title or settings.default_title,
        slides=data.slides or [],
        slide_count=data.slide_count or 0,
        theme=settings.theme,
    )
    return GenerationSuccess(
        deck=deck,
        artifact_url=data.presentation_url or None,
        used_fallback=bool(data.fallback_used),
    )


class GenerationClient:
    def __init__(
        self,
        url: Optional[str] = None,
        notifier: Optional[Notifier] = None,
        session: Optional[requests.Session] = None,
    ):
        self.url = url or settings.generate_url
        self.notifier = notifier or LoggingNotifier()
        self._session = session or _build_session()

    def generate(self, request: GenerationRequest) -> GenerationOutcome:
        outcome = self.fetch(request)
        self.announce(outcome)
        return outcome

    def fetch(self, request: GenerationRequest) -> GenerationOutcome:
        """Issue the request and map the reply. Sends no notice, so it is safe off the event loop."""
        try:
            outcome = to_outcome(self._post(request))
        except TransportError as exc:
            logger.error("presentation generation failed: %s", exc)
            outcome = GenerationFailure(message=GENERIC_FAILURE)
        if isinstance(outcome, GenerationSuccess):
            logger.info(
                "generated %r with %d slides (fallback=%s)",
                outcome.deck.title, len(outcome.deck.slides), outcome.used_fallback,
            )
        else:
            logger.warning("generation service refused request: %s", outcome.message)
        return outcome

    def announce(self, outcome: GenerationOutcome):
        self.notifier.notify(notice_for(outcome))

    def _post(self, request: GenerationRequest) -> Any:
        body = request.to_payload()
        logger.debug("POST %s %s", self.url, body)
        try:
            resp = self._session.post(
                self.url,
                headers={"Content-Type": "application/json"},
                data=json.dumps(body),
                timeout=(settings.connect_timeout, settings.read_timeout),
            )
        except requests.RequestException as exc:
            raise TransportError("could not reach generation service", cause=exc, context={"url": self.url})
        if not resp.ok:
            logger.debug("generation service answered HTTP %s", resp.status_code)
        return _decode(resp)
