"""Cloudflare Workers AI 调用

每次调用使用独立的 httpx.AsyncClient，请求之间不共享连接状态。
"""

import logging
from typing import Any

import httpx

from .config import DEFAULT_BASE_URL, DEFAULT_TIMEOUT
from .errors import InferenceError

logger = logging.getLogger(__name__)


def _error_detail(resp: httpx.Response) -> str:
    """从 Cloudflare 错误信封中提取错误信息"""
    try:
        data = resp.json()
    except ValueError:
        return resp.text[:200]
    errors = data.get("errors") if isinstance(data, dict) else None
    if not errors:
        return resp.text[:200]
    messages = []
    for err in errors:
        if isinstance(err, dict):
            messages.append(str(err.get("message", err)))
        else:
            messages.append(str(err))
    return "; ".join(messages)


class WorkersAI:
    """Workers AI 模型调用入口

    用法:
        ai = WorkersAI(api_key="...", account_id="...")
        resp = await ai.run("@cf/meta/llama-2-7b-chat-int8", {"messages": [...]})
    """

    def __init__(
        self,
        *,
        api_key: str,
        account_id: str,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.api_key = api_key
        self.account_id = account_id
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._transport = transport

    def model_url(self, model: str) -> str:
        return f"{self.base_url}/accounts/{self.account_id}/ai/run/{model}"

    async def run(self, model: str, payload: dict[str, Any]) -> httpx.Response:
        """调用模型，返回 2xx 响应；其余情况抛 InferenceError"""
        async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
            try:
                resp = await client.post(
                    self.model_url(model),
                    headers={
                        "Authorization": f"Bearer {self.api_key}",
                        "Content-Type": "application/json",
                    },
                    json=payload,
                )
            except httpx.HTTPError as e:
                logger.error("Workers AI 请求异常: model=%s, %s", model, e)
                raise InferenceError(f"Workers AI 请求失败: {e}") from e

        if not resp.is_success:
            logger.error("Workers AI 调用失败: %s %s", resp.status_code, resp.text)
            raise InferenceError(
                f"Workers AI 调用失败: {resp.status_code} {_error_detail(resp)}".rstrip(),
                status_code=resp.status_code,
                response=resp.text,
            )
        return resp

    async def run_json(self, model: str, payload: dict[str, Any]) -> Any:
        """调用模型并返回 JSON 信封中的 result 字段"""
        resp = await self.run(model, payload)
        try:
            data = resp.json()
        except ValueError as e:
            raise InferenceError(
                f"Workers AI 响应不是合法 JSON: {e}",
                status_code=resp.status_code,
                response=resp.text,
            ) from e

        if not isinstance(data, dict):
            raise InferenceError("Workers AI 响应格式错误", response=resp.text)

        # 检查业务错误
        if data.get("success") is False:
            raise InferenceError(
                f"Workers AI 错误: {_error_detail(resp)}",
                status_code=resp.status_code,
                response=resp.text,
            )
        return data.get("result")
