"""Asynchronous client for internet ranking (IR) servers."""

from __future__ import annotations

from typing import Any

import httpx

from bmsplayer.protocol import (
    ChartRanking,
    IrServerType,
    ScoreSubmission,
    SubmissionResponse,
)

USER_AGENT = "bmsplayer/0.1.0"
_TIMEOUT_SECS = 30.0


class IrError(Exception):
    """Raised when an IR request cannot be sent or its reply cannot be read."""


def _status_text(response: httpx.Response) -> str:
    return f"{response.status_code} {response.reason_phrase}".strip()


class IrClient:
    """Submits scores to and reads rankings from one IR server."""

    def __init__(
        self,
        base_url: str,
        player_id: str,
        secret_key: str,
        server_type: IrServerType = IrServerType.LR2IR,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.base_url = base_url
        self.player_id = player_id
        self.secret_key = secret_key
        self.server_type = server_type
        self._http = httpx.AsyncClient(
            headers={"User-Agent": USER_AGENT},
            timeout=_TIMEOUT_SECS,
            transport=transport,
        )

    async def __aenter__(self) -> IrClient:
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._http.aclose()

    async def submit_score(self, submission: ScoreSubmission) -> SubmissionResponse:
        """Send a score; a non-success HTTP status gives an unsuccessful response."""
        url = f"{self.base_url}/score/submit"
        try:
            if self.server_type is IrServerType.LR2IR:
                response = await self._http.post(url, data=self._lr2ir_form(submission))
            else:
                response = await self._http.post(url, json=submission.to_dict())
        except httpx.HTTPError as exc:
            raise IrError("Failed to submit score") from exc

        if not response.is_success:
            return SubmissionResponse(
                success=False, message=f"HTTP error: {_status_text(response)}"
            )
        try:
            return SubmissionResponse.from_dict(response.json())
        except (ValueError, TypeError, KeyError) as exc:
            raise IrError("Failed to parse response") from exc

    async def get_ranking(self, chart_hash: str, limit: int) -> ChartRanking:
        """Leaderboard of a chart; empty when the server answers with an error status."""
        url = f"{self.base_url}/ranking/{chart_hash}"
        try:
            response = await self._http.get(url, params={"limit": str(limit)})
        except httpx.HTTPError as exc:
            raise IrError("Failed to get ranking") from exc

        if not response.is_success:
            return ChartRanking(chart_hash=chart_hash, entries=[], total_players=0)
        try:
            return ChartRanking.from_dict(response.json())
        except (ValueError, TypeError, KeyError) as exc:
            raise IrError("Failed to parse ranking") from exc

    async def get_my_rank(self, chart_hash: str) -> int | None:
        """This player's rank on a chart, or ``None`` when the server has none."""
        url = f"{self.base_url}/ranking/{chart_hash}/player/{self.player_id}"
        try:
            response = await self._http.get(url)
        except httpx.HTTPError as exc:
            raise IrError("Failed to send request") from exc

        if not response.is_success:
            return None
        try:
            rank = response.json().get("rank")
            return None if rank is None else int(rank)
        except (ValueError, TypeError, AttributeError) as exc:
            raise IrError("Failed to parse response") from exc

    async def test_connection(self) -> bool:
        """Whether the server answers its ping endpoint successfully."""
        try:
            response = await self._http.get(f"{self.base_url}/ping")
        except httpx.HTTPError:
            return False
        return response.is_success

    @staticmethod
    def _lr2ir_form(submission: ScoreSubmission) -> dict[str, str]:
        fields = {
            "md5": submission.chart_md5,
            "playerid": submission.player_id,
            "exscore": submission.ex_score,
            "clear": submission.clear_lamp.as_u8(),
            "maxcombo": submission.max_combo,
            "perfect": submission.pgreat_count,
            "great": submission.great_count,
            "good": submission.good_count,
            "bad": submission.bad_count,
            "poor": submission.poor_count,
            "totalnotes": submission.total_notes,
            "option": submission.play_option.to_lr2ir_option(),
            "scorehash": submission.score_hash,
        }
        return {key: str(value) for key, value in fields.items()}