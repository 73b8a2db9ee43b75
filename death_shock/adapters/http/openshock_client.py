"""OpenShock control client using aiohttp."""

import asyncio
import sys
from typing import AsyncIterator, Callable, Optional

import aiohttp

from death_shock.domain.messages import NO_RESPONSE
from death_shock.domain.models import (
    Cancelled,
    Progress,
    RequestOutcome,
    ShockRequest,
    Success,
    TransportError,
    is_terminal,
)
from death_shock.ports.outbound import OutcomeListener

_CHUNK_SIZE = 4096


def _log(msg: str):
    print(msg, file=sys.stderr)


class OpenShockClient:
    """Sends one control request per dispatch. No retries."""

    def __init__(self, session_factory: Optional[Callable[[], aiohttp.ClientSession]] = None):
        # None means aiohttp.ClientSession, looked up at request time
        self._session_factory = session_factory

    @staticmethod
    def progress_percent(downloaded: int, total) -> float:
        if not total:
            return 0.0
        return min(downloaded / total, 1.0) * 100

    @staticmethod
    def decode_body(raw: bytes, charset=None) -> str:
        try:
            return raw.decode(charset or "utf-8")
        except (UnicodeDecodeError, LookupError):
            return NO_RESPONSE

    async def stream(self, request: ShockRequest) -> AsyncIterator[RequestOutcome]:
        """POST the request, yielding Progress ticks and one terminal outcome."""
        try:
            factory = self._session_factory or aiohttp.ClientSession
            async with factory() as session:
                async with session.post(
                    request.url,
                    data=request.body_json(),
                    headers=request.headers,
                ) as resp:
                    total = resp.content_length
                    downloaded = 0
                    chunks = []
                    async for chunk in resp.content.iter_chunked(_CHUNK_SIZE):
                        chunks.append(chunk)
                        downloaded += len(chunk)
                        yield Progress(self.progress_percent(downloaded, total))
                    body = self.decode_body(b"".join(chunks), resp.charset)
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            yield TransportError(str(e) or type(e).__name__)
            return
        yield Success(body)

    async def _run(self, request: ShockRequest, on_outcome: OutcomeListener) -> None:
        finished = False
        outcomes = self.stream(request)
        try:
            async for outcome in outcomes:
                if isinstance(outcome, Progress):
                    _log(f"Request in progress... Download progress: {outcome.percent:.0f}%")
                on_outcome(outcome)
                if is_terminal(outcome):
                    finished = True
        except asyncio.CancelledError:
            if not finished:
                _log("Request was cancelled")
                on_outcome(Cancelled())
            raise
        finally:
            await outcomes.aclose()

    def dispatch(self, request: ShockRequest, on_outcome: OutcomeListener) -> asyncio.Task:
        """Schedule the request on the running loop and return immediately."""
        return asyncio.get_running_loop().create_task(self._run(request, on_outcome))
