"""
Cloudflare Workers AI text-completion client.

The food parser treats the provider as an oracle that either returns
completion text or nothing: every failure (missing credentials, network
error, timeout, non-2xx status, unexpected body) is logged and reported
as ``None``.
"""

from __future__ import annotations

import json
import logging
from typing import Optional

import httpx

from app.core.config import settings

logger = logging.getLogger(__name__)

_API_BASE = "https://api.cloudflare.com/client/v4"


class CloudflareAIClient:
    """Minimal client for the Workers AI ``/ai/run/{model}`` endpoint."""

    def __init__(
        self,
        account_id: str,
        api_token: str,
        model: str = "@cf/meta/llama-3.1-8b-instruct",
        timeout: float = 15.0,
        max_tokens: int = 1000,
        temperature: float = 0.3,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        self.account_id = account_id
        self.api_token = api_token
        self.model = model
        self.timeout = timeout
        self.max_tokens = max_tokens
        self.temperature = temperature
        self._transport = transport

    @classmethod
    def from_settings(cls) -> "CloudflareAIClient":
        return cls(
            account_id=settings.CLOUDFLARE_ACCOUNT_ID,
            api_token=settings.CLOUDFLARE_API_TOKEN,
            model=settings.CLOUDFLARE_AI_MODEL,
            timeout=settings.CLOUDFLARE_AI_TIMEOUT,
            max_tokens=settings.CLOUDFLARE_AI_MAX_TOKENS,
            temperature=settings.CLOUDFLARE_AI_TEMPERATURE,
        )

    @property
    def is_configured(self) -> bool:
        return bool(self.account_id and self.api_token)

    @property
    def url(self) -> str:
        return f"{_API_BASE}/accounts/{self.account_id}/ai/run/{self.model}"

    def complete(self, system_prompt: str, user_prompt: str) -> Optional[str]:
        """Run one chat completion and return the raw response text."""
        if not self.is_configured:
            logger.info("Cloudflare AI credentials not configured")
            return None

        payload = {
            "messages": [
                {"role": "system", "content": system_prompt},
                {"role": "user", "content": user_prompt},
            ],
            "max_tokens": self.max_tokens,
            "temperature": self.temperature,
        }
        headers = {"Authorization": f"Bearer {self.api_token}"}

        try:
            with httpx.Client(timeout=self.timeout, transport=self._transport) as client:
                r = client.post(self.url, json=payload, headers=headers)
        except httpx.HTTPError as e:
            logger.warning("Cloudflare AI request failed: %s", e)
            return None

        if not r.is_success:
            logger.warning("Cloudflare AI error %s: %s", r.status_code, r.text[:500])
            return None

        try:
            data = r.json()
        except ValueError:
            logger.warning("Cloudflare AI returned a non-JSON body")
            return None

        result = data.get("result") if isinstance(data, dict) else None
        response = result.get("response") if isinstance(result, dict) else None
        if isinstance(response, (dict, list)):
            # Some models return the JSON object already decoded.
            return json.dumps(response)
        if isinstance(response, str) and response:
            return response
        return None
