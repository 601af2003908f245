import pytest

from bmsplayer.effects import (
    MAX_BOMBS,
    MAX_LANE_COUNT,
    BombEffect,
    ComboEffect,
    EffectManager,
    EffectTimings,
    JudgeEffect,
    KeyBeam,
    LaneFlash,
    fast_slow_label,
    judge_text,
)
from bmsplayer.judgment import JudgeResult


@pytest.mark.parametrize(
    "result, text",
    [
        (JudgeResult.PGREAT, "PGREAT"),
        (JudgeResult.GREAT, "GREAT"),
        (JudgeResult.GOOD, "GOOD"),
        (JudgeResult.BAD, "BAD"),
        (JudgeResult.POOR, "POOR"),
    ],
)
def test_judge_text(result, text):
    assert judge_text(result) == text


@pytest.mark.parametrize(
    "diff, label", [(5.0, "FAST"), (-5.0, "SLOW"), (0.0, None), (None, None)]
)
def test_fast_slow_label(diff, label):
    assert fast_slow_label(diff) == label


def test_judge_effect_lifecycle():
    effect = JudgeEffect(JudgeResult.GREAT, 0.0, 0.0, 1.0)
    assert effect.is_active()
    assert effect.progress() == 1.0
    assert effect.alpha() == 1.0
    assert effect.scale() == 1.0
    effect.update(0.5)
    assert effect.is_active()
    assert effect.scale() > 1.0
    effect.update(0.5)
    assert not effect.is_active()


def test_judge_effect_alpha_fades_at_end():
    effect = JudgeEffect(JudgeResult.GOOD, 0.0, 0.0, 1.0)
    effect.update(0.875)
    assert 0.0 < effect.alpha() < 1.0
    assert effect.alpha() == pytest.approx(effect.progress() / 0.3)


def test_combo_effect_text_and_scale():
    combo = ComboEffect(1, 0.0, 0.0, 1.0)
    assert combo.text() is None
    combo.update_combo(42, 1.0)
    assert combo.text() == "42 COMBO"
    assert combo.scale() > 1.0
    combo.update(0.75)
    assert combo.scale() == 1.0


def test_lane_flash():
    flash = LaneFlash(0.5)
    assert not flash.is_active()
    assert flash.alpha() == 0.0
    flash.trigger()
    assert flash.is_active()
    assert flash.alpha() == 1.0
    flash.update(0.25)
    assert flash.alpha() == pytest.approx(0.5)
    flash.update(0.25)
    assert not flash.is_active()


def test_lane_flash_default_duration():
    flash = LaneFlash()
    flash.trigger()
    assert flash.timer == flash.duration == 0.1


def test_key_beam():
    beam = KeyBeam()
    assert not beam.is_active()
    beam.set_held(True)
    assert beam.is_active()
    beam.set_held(False)
    assert not beam.is_active()


def test_bomb_progress():
    bomb = BombEffect(3, 1.0)
    assert bomb.progress() == 0.0
    bomb.update(0.25)
    assert bomb.progress() == pytest.approx(0.25)
    bomb.update(2.0)
    assert bomb.progress() == 1.0
    assert not bomb.is_active()
    assert BombEffect(0, 0.0).progress() == 1.0


def test_manager_judge_caption_with_combo():
    manager = EffectManager()
    assert manager.judge_caption() is None
    manager.update_combo(7)
    manager.trigger_judge(JudgeResult.PGREAT, 0.0, 0.0)
    assert manager.judge_caption() == "PGREAT 7"


def test_manager_judge_caption_without_combo():
    manager = EffectManager()
    manager.trigger_judge(JudgeResult.POOR, 0.0, 0.0)
    assert manager.judge_caption() == "POOR"


def test_manager_judge_expires():
    manager = EffectManager(timings=EffectTimings(judge_duration=0.5))
    manager.trigger_judge(JudgeResult.BAD, 0.0, 0.0)
    manager.update(0.5)
    assert manager.judge_effect is None
    assert manager.judge_caption() is None


def test_manager_bombs_capped():
    manager = EffectManager()
    for _ in range(MAX_BOMBS + 10):
        manager.trigger_bomb(1)
    assert len(manager.bombs) == MAX_BOMBS


def test_manager_bombs_ignored_when_out_of_range_or_disabled():
    manager = EffectManager()
    manager.trigger_bomb(MAX_LANE_COUNT)
    manager.trigger_bomb(-1)
    assert len(manager.bombs) == 0
    disabled = EffectManager(timings=EffectTimings(bomb_enabled=False))
    disabled.trigger_bomb(0)
    assert len(disabled.bombs) == 0


def test_manager_bombs_removed_after_update():
    manager = EffectManager(timings=EffectTimings(bomb_duration=0.25))
    manager.trigger_bomb(2)
    manager.update(0.125)
    assert [b.lane for b in manager.bombs] == [2]
    manager.update(0.125)
    assert len(manager.bombs) == 0


def test_manager_lane_flash_and_key_beam():
    manager = EffectManager()
    manager.trigger_lane_flash(4)
    manager.set_key_held(5, True)
    manager.trigger_lane_flash(MAX_LANE_COUNT)
    manager.set_key_held(MAX_LANE_COUNT, True)
    assert [f.is_active() for f in manager.lane_flashes].count(True) == 1
    assert manager.lane_flashes[4].is_active()
    assert [b.lane for b in []] == []
    assert [i for i, b in enumerate(manager.key_beams) if b.is_active()] == [5]
    manager.update(1.0)
    assert not manager.lane_flashes[4].is_active()
    assert manager.key_beams[5].is_active()


def test_manager_lane_counts():
    manager = EffectManager()
    assert len(manager.lane_flashes) == MAX_LANE_COUNT
    assert len(manager.key_beams) == MAX_LANE_COUNT