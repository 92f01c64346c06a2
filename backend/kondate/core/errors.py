"""
Errors raised while talking to the text-generation service.

Every error carries the user-facing message and the HTTP status the relay
answers with. The parser never raises; these come from the boundary call and
from request checks only.
"""

import asyncio
from typing import Optional

import httpx
from google.genai import errors as genai_errors


class MealSuggestionError(Exception):
    status_code = 500
    default_message = "料理の提案を取得できませんでした。もう一度お試しください。"

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ConfigurationError(MealSuggestionError):
    default_message = "APIキーがサーバーに設定されていません。"


class InvalidPromptError(MealSuggestionError):
    status_code = 400
    default_message = "プロンプトがリクエストに含まれていません。"


class UpstreamError(MealSuggestionError):
    default_message = "AIとの通信中にサーバーでエラーが発生しました。"


class InvalidCredentialError(UpstreamError):
    default_message = "サーバーに設定されたAPIキーが無効か、権限がありません。管理者に連絡してください。"


class QuotaExceededError(UpstreamError):
    status_code = 503
    default_message = "APIの利用上限に達した可能性があります。時間をおいて再度お試しください。"


class NetworkUnreachableError(UpstreamError):
    status_code = 502
    default_message = (
        "AIサービスへのネットワーク接続に失敗しました。"
        "インターネット接続を確認するか、時間をおいて再度お試しください。"
    )


class ContentBlockedError(UpstreamError):
    status_code = 502
    default_message = "AIの安全性ポリシーにより応答がブロックされました。"

    def __init__(self, reason: Optional[str] = None):
        self.reason = reason
        message = self.default_message
        if reason:
            message += f" 理由: {reason}"
        super().__init__(message)


class EmptyResponseError(UpstreamError):
    status_code = 502
    default_message = "AIからの応答にテキストが含まれていませんでした。"

    def __init__(self, finish_reason: Optional[str] = None):
        self.finish_reason = finish_reason
        message = self.default_message
        if finish_reason:
            message += f" Finish reason: {finish_reason}."
        super().__init__(message)


CREDENTIAL_MARKERS = ("api key not valid", "permission denied", "authentication failed", "unauthenticated")
QUOTA_MARKERS = ("quota", "resource_exhausted", "resource exhausted")
NETWORK_MARKERS = ("failed to fetch", "network error", "connecterror", "connection", "timed out")


def classify_upstream_error(exc: Exception) -> UpstreamError:
    """Map an SDK or transport failure onto one of the upstream categories."""
    if isinstance(exc, UpstreamError):
        return exc

    text = f"{type(exc).__name__}: {exc}".lower()
    code = exc.code if isinstance(exc, genai_errors.APIError) else None

    if code in (401, 403) or any(marker in text for marker in CREDENTIAL_MARKERS):
        return InvalidCredentialError()
    if code == 429 or any(marker in text for marker in QUOTA_MARKERS):
        return QuotaExceededError()
    if isinstance(exc, (httpx.TransportError, TimeoutError, asyncio.TimeoutError)) or any(marker in text for marker in NETWORK_MARKERS):
        return NetworkUnreachableError()
    return UpstreamError()
