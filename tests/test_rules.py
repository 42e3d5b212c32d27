from falling_blocks.game import ScoringRules


def test_level_from_lines():
    rules = ScoringRules()
    assert rules.level_for(0) == 1
    assert rules.level_for(9) == 1
    assert rules.level_for(10) == 2
    assert rules.level_for(25) == 3


def test_score_for_lines_uses_table_and_level():
    rules = ScoringRules()
    assert rules.score_for_lines(0, 1) == 0
    assert rules.score_for_lines(1, 1) == 40
    assert rules.score_for_lines(2, 1) == 100
    assert rules.score_for_lines(3, 2) == 600
    assert rules.score_for_lines(4, 3) == 3600
    assert rules.score_for_lines(5, 1) == 0


def test_drop_interval_speeds_up_and_floors():
    rules = ScoringRules()
    assert rules.drop_interval_ms(1) == 1000
    assert rules.drop_interval_ms(2) == 940
    assert rules.drop_interval_ms(11) == 400
    assert rules.drop_interval_ms(30) == 400
    intervals = [rules.drop_interval_ms(level) for level in range(1, 40)]
    assert intervals == sorted(intervals, reverse=True)
    assert min(intervals) >= 300


def test_floor_applies_with_custom_curve():
    rules = ScoringRules(drop_decay_ms=100)
    assert rules.drop_interval_ms(11) == 300
