# bmsplayer

The game logic behind a BMS rhythm game player, with no drawing. It includes:

- **Judgments and scoring.** `bmsplayer.score.ScoreManager` counts PGREAT, GREAT, GOOD, BAD and POOR. It tracks the combo and the EX score and gives the accuracy. `bmsplayer.result.PlayResult` computes the final accuracy and the rank, from `MAX` and `AAA` down to `F`. `bmsplayer.judgment.ClearLamp.from_gauge` turns the gauge a chart was cleared on into a clear lamp.
- **Note state.** `bmsplayer.state.GamePlayState` records whether each note is pending, judged or missed.
- **Internet ranking.** `bmsplayer.protocol` holds the data exchanged with a ranking server: `ScoreSubmission`, `SubmissionResponse`, `ChartRanking`, `RankingEntry` and `PlayOptionFlags`. `PlayOptionFlags.to_lr2ir_option` packs the options into the LR2IR bit field. `bmsplayer.client.IrClient` is an asynchronous httpx client that submits scores and fetches rankings.
- **Highway layout.** `bmsplayer.layout.HighwayConfig` and `bmsplayer.highway.Highway` hold lane widths, lane offsets, the judge line and note positions. They cover 7-key, 9-key and 14-key double play. `bmsplayer.lane_cover.LaneCover` handles SUDDEN+, HIDDEN+ and LIFT. `bmsplayer.cover_geometry` places cover regions, measure lines and long-note bars inside a rectangle.
- **Display state.** `bmsplayer.effects.EffectManager` runs the timers for judge text, combo, lane flashes, key beams and bombs. `bmsplayer.progress.ProgressBar`, `bmsplayer.turntable.Turntable` and `bmsplayer.judge_stats.JudgeStats` / `BpmDisplay` compute what those widgets show.

## Installation

```
pip install bmsplayer
```

## Scoring a play

```python
from bmsplayer.judgment import JudgeResult
from bmsplayer.score import ScoreManager

score = ScoreManager()
for result in (JudgeResult.PGREAT, JudgeResult.GREAT, JudgeResult.POOR):
    score.add_judgment(result)

score.ex_score()   # 3
score.max_combo    # 2
score.accuracy()   # 50.0
```

## Submitting a score

```python
import time

from bmsplayer.client import IrClient
from bmsplayer.judgment import ClearLamp
from bmsplayer.protocol import IrServerType, ScoreSubmission

submission = ScoreSubmission(
    player_id="player",
    chart_hash="chart-sha256",
    chart_md5="chart-md5",
    ex_score=1000,
    clear_lamp=ClearLamp.NORMAL,
    max_combo=600,
    pgreat_count=450,
    great_count=100,
    good_count=50,
    bad_count=0,
    poor_count=0,
    total_notes=600,
    timestamp=int(time.time()),
)

async with IrClient(
    "https://ir.example.com", "player", secret_key="secret",
    server_type=IrServerType.CUSTOM,
) as client:
    response = await client.submit_score(submission)
    ranking = await client.get_ranking(submission.chart_md5, 10)
    my_rank = await client.get_my_rank(submission.chart_md5)
    reachable = await client.test_connection()
```

`IrClient` posts to `{base_url}/score/submit`. An `IrServerType.LR2IR` server, the default, receives form fields. Every other server type receives the submission as JSON.

- A reply with an error status gives a `SubmissionResponse` with `success=False` and an `HTTP error: ...` message.
- `get_ranking` returns an empty `ChartRanking` when the server answers with an error status.
- `get_my_rank` returns `None` when the server answers with an error status or gives no rank.
- A request that cannot be sent, or a reply that cannot be read, raises `bmsplayer.client.IrError`.
- `test_connection` returns `False` instead of raising.

## Highway layout

```python
from bmsplayer.layout import HighwayConfig, PlayMode

config = HighwayConfig.for_mode(PlayMode.DP_14KEY)
config.total_width()     # 740.0: every lane plus the 20 px centre gap
config.lane_x_offset(8)  # 380.0: left edge of the first P2 key
```

## What it does not do

This package holds logic and geometry only. It does not provide:

- a window, renderer, fonts or audio;
- a BMS chart parser or a song select screen;
- background video or images;
- score storage;
- a command to start a game.

It also does not check submissions for impossible score values, and it does not compute score hashes. `ScoreSubmission.score_hash` is sent exactly as you set it.

## Running the tests

```
pip install -e ".[test]"
pytest
```