from fastapi import HTTPException


class BotException(HTTPException):
    """봇 처리 중 발생하는 예외의 기본 클래스"""
    def __init__(self, status_code: int = 500, detail: str = "Bot operation failed"):
        super().__init__(status_code=status_code, detail=detail)


class ParseException(BotException):
    """요청 본문 파싱 실패"""
    def __init__(self, status_code: int = 500, detail: str = "Malformed request body"):
        super().__init__(status_code=status_code, detail=detail)


class VerificationException(BotException):
    """URL verification 토큰 불일치"""
    def __init__(self, status_code: int = 500, detail: str = "Verification failed"):
        super().__init__(status_code=status_code, detail=detail)


class UnrecognizedEventException(BotException):
    """처리할 수 없는 이벤트 타입"""
    def __init__(self, status_code: int = 400, detail: str = "Empty request"):
        super().__init__(status_code=status_code, detail=detail)


class SlackException(BotException):
    """Slack 관련 예외"""
    def __init__(self, status_code: int = 500, detail: str = "Slack operation failed"):
        super().__init__(status_code=status_code, detail=detail)


class ConfigurationException(BotException):
    """설정 관련 예외"""
    def __init__(self, status_code: int = 500, detail: str = "Configuration error"):
        super().__init__(status_code=status_code, detail=detail)
