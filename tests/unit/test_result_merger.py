"""Result merging and Planner exclusion."""

from searchhub.application.services.result_merger import exclude_planner, merge_results
from searchhub.domain.enums import ContentType
from tests.fakes import make_result


def test_merge_sorts_by_score_descending() -> None:
    files = [make_result("f1", score=1.0), make_result("f2", score=0.5)]
    mail = [make_result("m1", ContentType.EMAIL, score=8.0)]
    teams = [make_result("t1", ContentType.TEAMS_MESSAGE, score=50)]
    merged = merge_results(files, mail, teams)
    assert [r.id for r in merged] == ["t1", "m1", "f1", "f2"]


def test_merge_is_stable_for_equal_scores() -> None:
    """Equal scores keep provider order, then each provider's own order."""
    first = [make_result("a", score=1.0), make_result("b", score=1.0)]
    second = [make_result("c", score=1.0)]
    assert [r.id for r in merge_results(first, second)] == ["a", "b", "c"]


def test_merge_of_nothing_is_empty() -> None:
    assert merge_results() == []
    assert merge_results([], []) == []


def test_exclude_planner_drops_only_tasks() -> None:
    results = [
        make_result("f", ContentType.FILE),
        make_result("p", ContentType.PLANNER, plan_id="plan-1"),
        make_result("e", ContentType.EMAIL),
    ]
    assert [r.id for r in exclude_planner(results)] == ["f", "e"]
