import logging
from typing import Optional
from slack_sdk import WebClient
from slack_sdk.errors import SlackApiError
from ..exception.exceptions import SlackException

logger = logging.getLogger(__name__)


class SlackRepository:
    """Slack API 접근을 담당하는 Repository"""

    def __init__(self, client: Optional[WebClient]):
        if not client:
            raise SlackException(status_code=500, detail="Slack client not initialized")
        self.client = client

    def post_message(self, channel_id: str, text: str):
        """채널(또는 사용자 DM)에 메시지 전송"""
        logger.info(f"Sending message '{text}' to {channel_id}")
        try:
            return self.client.chat_postMessage(
                channel=channel_id,
                text=text
            )
        except SlackApiError as e:
            logger.error(f"Slack API error: {e.response['error']}")
            raise SlackException(status_code=500, detail=f"Slack API error: {e.response['error']}")
