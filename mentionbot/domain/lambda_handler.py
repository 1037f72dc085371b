import base64
import binascii
import json
import logging
from typing import Any, Dict

from pydantic import ValidationError

from .controller.slack_controller import get_event_dispatcher
from .dto.slack_dto import InboundEnvelope
from .exception.exceptions import ParseException
from .service.event_dispatcher import to_response

logger = logging.getLogger(__name__)


def to_envelope(event: Dict[str, Any]) -> InboundEnvelope:
    """API Gateway proxy 이벤트를 InboundEnvelope 로 변환"""
    body = event.get("body") or ""
    try:
        if event.get("isBase64Encoded"):
            body = base64.b64decode(body).decode("utf-8", errors="replace")
        return InboundEnvelope(headers=event.get("headers") or {}, body=body)
    except (ValidationError, binascii.Error, TypeError) as e:
        raise ParseException(detail=f"Malformed proxy event: {str(e)}")


def run(event: Dict[str, Any], context: Any = None) -> Dict[str, Any]:
    """AWS Lambda (API Gateway proxy) 엔트리포인트"""
    try:
        envelope = to_envelope(event)
        dispatcher = get_event_dispatcher()
    except Exception as e:
        logger.error(f"Failed to prepare event: {str(e)}")
        response = to_response(e)
    else:
        response = dispatcher.handle(envelope)

    return {
        "statusCode": response.status_code,
        "headers": response.headers,
        "body": response.body if isinstance(response.body, str) else json.dumps(response.body),
    }
