# -*- coding: utf-8 -*-
"""Firebase Cloud Messaging HTTP v1 push gateway (async, aiohttp)."""

from __future__ import annotations

import asyncio
from typing import TYPE_CHECKING, Any, Callable, Optional

import aiohttp
import structlog
from structlog.contextvars import bound_contextvars

from marketplace_push.exceptions import MissingRequiredConfigError, PushGatewayError
from marketplace_push.notifications.gateways.base import BasePushGateway
from marketplace_push.utils.validation import mask_token

if TYPE_CHECKING:  # pragma: no cover
    from marketplace_push.config.config import Settings

# FCM v1 error codes mapped onto the reason codes the dispatcher understands.
_FCM_ERROR_REASONS: dict[str, str] = {
    "UNREGISTERED": "registration-token-not-registered",
    "SENDER_ID_MISMATCH": "mismatched-credential",
    "QUOTA_EXCEEDED": "message-rate-exceeded",
    "UNAVAILABLE": "server-unavailable",
    "INTERNAL": "internal-error",
    "THIRD_PARTY_AUTH_ERROR": "third-party-auth-error",
}


def _reason_from_error(body: Any, status_code: int) -> str:
    """Classify an FCM v1 error response body into a reason code."""
    error = body.get("error") if isinstance(body, dict) else None
    if not isinstance(error, dict):
        return f"http-{status_code}"

    error_code: Optional[str] = None
    for detail in error.get("details") or []:
        if isinstance(detail, dict) and detail.get("errorCode"):
            error_code = str(detail["errorCode"])
            break
    status = str(error.get("status") or "")
    message = str(error.get("message") or "").lower()

    code = error_code or status
    if code == "INVALID_ARGUMENT" and "token" in message:
        return "invalid-registration-token"
    if code in _FCM_ERROR_REASONS:
        return _FCM_ERROR_REASONS[code]
    if code:
        return code.lower().replace("_", "-")
    return f"http-{status_code}"


class FcmPushGateway(BasePushGateway):
    """Send messages through `POST /v1/projects/{project}/messages:send`.

    One attempt per message; retries are not this gateway's job. The bearer token
    comes from settings (FCM__ACCESS_TOKEN) and is refreshed outside the process.
    """

    def __init__(
        self,
        settings: "Settings",
        *,
        session: Optional[aiohttp.ClientSession] = None,
        get_logger: Callable[[str], Any] = structlog.get_logger,
        logger_name: Optional[str] = None,
    ) -> None:
        super().__init__(settings)
        self._logger = get_logger(logger_name or self.__class__.__name__)

        cfg = self.settings.fcm
        if not cfg.project_id:
            raise MissingRequiredConfigError("FCM__PROJECT_ID")
        if not cfg.access_token:
            raise MissingRequiredConfigError("FCM__ACCESS_TOKEN")

        self.project_id: str = cfg.project_id
        self.access_token: str = cfg.access_token
        self.timeout_seconds = cfg.timeout_seconds
        self.send_url = f"{cfg.base_url.rstrip('/')}/v1/projects/{self.project_id}/messages:send"

        self._session = session
        self._owns_session = session is None
        self._running = False

    @property
    def is_running(self) -> bool:
        return self._running

    async def initialize(self) -> None:
        if self._running:
            self._logger.warning("fcm_already_running")
            return
        self._running = True

    async def shutdown(self) -> None:
        if not self._running:
            return
        if self._owns_session and self._session is not None and not self._session.closed:
            await self._session.close()
        self._session = None if self._owns_session else self._session
        self._running = False

    async def _get_session(self) -> aiohttp.ClientSession:
        if self._session is None or self._session.closed:
            timeout = aiohttp.ClientTimeout(total=self.timeout_seconds)
            self._session = aiohttp.ClientSession(timeout=timeout)
        return self._session

    async def send(self, message: dict[str, Any]) -> str:
        headers = {
            "Authorization": f"Bearer {self.access_token}",
            "Content-Type": "application/json",
        }
        with bound_contextvars(fcm_token_masked=mask_token(message.get("token"))):
            try:
                session = await self._get_session()
                async with session.post(
                    self.send_url,
                    json={"message": message},
                    headers=headers,
                ) as response:
                    body = await response.json(content_type=None)
                    if response.status == 200 and isinstance(body, dict):
                        message_id = str(body.get("name") or "")
                        self._logger.debug("fcm_send_ok", fcm_message_id=message_id)
                        return message_id
                    reason = _reason_from_error(body, response.status)
                    self._logger.warning(
                        "fcm_send_rejected",
                        http_status_code=response.status,
                        fcm_reason=reason,
                    )
                    raise PushGatewayError(
                        f"FCM rejected message ({response.status})",
                        reason=reason,
                        status_code=response.status,
                    )
            except (aiohttp.ClientError, asyncio.TimeoutError, ValueError) as exc:
                raise PushGatewayError(
                    f"FCM request failed: {exc}",
                    reason="network-error",
                    cause=exc,
                ) from exc
