from __future__ import annotations

from riceboard.services.ranking import compare, rank_features


def test_sorts_by_score_then_undefined_last(make_feature):
    f1 = make_feature(name="f1", reach=100, impact="High", confidence="80%", effort="M")  # 80
    f2 = make_feature(name="f2", reach=100, impact="Medium", confidence="100%", effort="S")  # 100
    f3 = make_feature(name="f3", reach=100, impact="High", confidence="80%", effort="L")  # 40
    f4 = make_feature(name="f4")  # incomplete

    ranked = rank_features([f1, f4, f3, f2])
    assert [f.name for f in ranked] == ["f2", "f1", "f3", "f4"]


def test_tie_break_by_lower_effort(make_feature):
    a = make_feature(name="a", reach=10, impact=1, confidence=1, effort=1)  # 10
    b = make_feature(name="b", reach=20, impact=1, confidence=1, effort=2)  # 10
    assert [f.name for f in rank_features([b, a])] == ["a", "b"]
    assert compare(a, b) < 0
    assert compare(b, a) > 0


def test_tie_break_by_higher_impact(make_feature):
    low = make_feature(name="low", reach=10, impact=1, confidence=1, effort=1)  # 10
    high = make_feature(name="high", reach=5, impact=2, confidence=1, effort=1)  # 10
    assert [f.name for f in rank_features([low, high])] == ["high", "low"]


def test_undefined_scores_fall_back_to_effort_then_impact(make_feature):
    no_effort = make_feature(name="a-no-effort", impact="Massive")
    small = make_feature(name="z-small", effort="S")
    large = make_feature(name="m-large", effort="XL", impact="Massive")
    large_low = make_feature(name="b-large-low", effort="XL", impact="Low")

    ranked = rank_features([no_effort, large_low, large, small])
    assert [f.name for f in ranked] == ["z-small", "m-large", "b-large-low", "a-no-effort"]


def test_name_is_final_case_sensitive_tie_break(make_feature):
    names = ["beta", "Alpha", "alpha", ""]
    ranked = rank_features([make_feature(name=n) for n in names])
    assert [f.name for f in ranked] == ["", "Alpha", "alpha", "beta"]


def test_identical_records_compare_equal(make_feature):
    a = make_feature(name="same", reach=1, impact=1, confidence=1, effort=1)
    b = make_feature(name="same", reach=1, impact=1, confidence=1, effort=1)
    assert compare(a, b) == 0


def test_rank_features_returns_new_list(make_feature):
    features = [
        make_feature(name="slow", reach=1, impact=1, confidence=1, effort=8),
        make_feature(name="fast", reach=100, impact=3, confidence=1, effort=1),
    ]
    snapshot = list(features)
    ranked = rank_features(features)
    assert ranked is not features
    assert features == snapshot
    assert [f.name for f in ranked] == ["fast", "slow"]


def test_labels_and_numbers_rank_together(make_feature):
    labelled = make_feature(name="labelled", reach=10, impact="High", confidence="100%", effort="S")  # 20
    numeric = make_feature(name="numeric", reach=10, impact=3, confidence=1, effort=1)  # 30
    assert [f.name for f in rank_features([labelled, numeric])] == ["numeric", "labelled"]
