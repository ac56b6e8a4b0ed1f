from itertools import permutations
from pathlib import Path

import pytest

from delete_rest.config import ConfigManager
from delete_rest.core import ActionPlanner, OperationFlags
from delete_rest.models import ActionPlan, Operation
from delete_rest.utils.errors import PlanSetupError


def _planner() -> ActionPlanner:
    return ActionPlanner(ConfigManager())


@pytest.mark.parametrize(
    ("flags", "expected"),
    [
        (OperationFlags(copy_to="c", move_to="m", delete=True), Operation.COPY),
        (OperationFlags(copy_to="c", delete=True), Operation.COPY),
        (OperationFlags(copy_to="c", move_to="m"), Operation.COPY),
        (OperationFlags(move_to="m", delete=True), Operation.MOVE),
        (OperationFlags(move_to="m"), Operation.MOVE),
        (OperationFlags(delete=True), Operation.DELETE),
        (OperationFlags(delete=True, other_flags=True), Operation.DELETE),
    ],
)
def test_resolve_precedence(tmp_path: Path, flags: OperationFlags, expected: Operation) -> None:
    plan = _planner().resolve(flags, tmp_path)

    assert plan is not None
    assert plan.operation is expected
    assert plan.is_default is False


def test_resolve_precedence_ignores_flag_order(tmp_path: Path) -> None:
    given = {"copy_to": "c", "move_to": "m", "delete": True}
    for order in permutations(given):
        flags = OperationFlags(**{key: given[key] for key in order})
        plan = _planner().resolve(flags, tmp_path)
        assert plan == ActionPlan(Operation.COPY, Path("c"))


def test_resolve_defaults_to_copy_when_other_flags_given(tmp_path: Path) -> None:
    plan = _planner().resolve(OperationFlags(other_flags=True), tmp_path)

    assert plan is not None
    assert plan.operation is Operation.COPY
    assert plan.destination == tmp_path / "selected"
    assert plan.is_default is True


def test_resolve_default_destination_is_configurable(tmp_path: Path) -> None:
    config = ConfigManager()
    config.set("default_destination", "picked")

    plan = ActionPlanner(config).resolve(OperationFlags(other_flags=True), tmp_path)

    assert plan is not None
    assert plan.destination == tmp_path / "picked"


def test_resolve_without_any_flag_returns_none(tmp_path: Path) -> None:
    assert _planner().resolve(OperationFlags(), tmp_path) is None


def test_prepare_creates_missing_destination(tmp_path: Path) -> None:
    source = tmp_path / "source"
    source.mkdir()
    destination = tmp_path / "out" / "nested"

    plan = _planner().prepare(ActionPlan(Operation.COPY, destination), source, dry_run=False)

    assert destination.is_dir()
    assert plan.destination == destination.resolve()


def test_prepare_dry_run_does_not_create_destination(tmp_path: Path) -> None:
    source = tmp_path / "source"
    source.mkdir()
    destination = tmp_path / "out"

    plan = _planner().prepare(ActionPlan(Operation.MOVE, destination), source, dry_run=True)

    assert not destination.exists()
    assert plan.destination == destination.resolve()


def test_prepare_rejects_file_destination(tmp_path: Path) -> None:
    source = tmp_path / "source"
    source.mkdir()
    blocker = tmp_path / "blocker"
    blocker.write_text("x", encoding="utf-8")

    with pytest.raises(PlanSetupError):
        _planner().prepare(ActionPlan(Operation.COPY, blocker), source, dry_run=False)
    with pytest.raises(PlanSetupError):
        _planner().prepare(ActionPlan(Operation.COPY, blocker / "child"), source, dry_run=True)


def test_prepare_rejects_source_as_destination(tmp_path: Path) -> None:
    with pytest.raises(PlanSetupError):
        _planner().prepare(ActionPlan(Operation.COPY, tmp_path), tmp_path, dry_run=False)


def test_prepare_delete_needs_no_destination(tmp_path: Path) -> None:
    plan = ActionPlan(Operation.DELETE)

    assert _planner().prepare(plan, tmp_path, dry_run=False) is plan


def test_action_plan_requires_destination_for_copy() -> None:
    with pytest.raises(ValueError):
        ActionPlan(Operation.COPY)
    with pytest.raises(ValueError):
        ActionPlan(Operation.DELETE, Path("x"))
