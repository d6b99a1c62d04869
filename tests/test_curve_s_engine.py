from datetime import date, datetime, timedelta, timezone

import pytest

from core.domain import (
    Project,
    Resource,
    ResourceType,
    Schedule,
    ScheduleType,
    Task,
    Valorization,
    ValorizationStatus,
)
from core.services.curve_s import CurveSSnapshot, PlannedTask, compute_curve_s, covering_range, select_schedule


@pytest.fixture
def project():
    return Project.create(
        code="PRJ-001",
        name="Substation retrofit",
        start_date=date(2025, 3, 3),
        end_date=date(2025, 3, 23),
        contract_total=10000.0,
    )


@pytest.fixture
def schedule(project):
    return Schedule.create(project.id, "Planning", is_baseline=True)


@pytest.fixture
def crew():
    # 1 hour priced at 1 so planned cost == estimated hours
    return Resource.create("Assembly crew", ResourceType.CREW, hourly_cost=1.0)


def _planned(schedule, resource, start, end, cost):
    task = Task.create(
        schedule.id,
        f"Task {start.isoformat()}",
        start_date=start,
        end_date=end,
        estimated_hours=cost,
        estimated_headcount=4,
        resource_id=resource.id,
    )
    return PlannedTask(task=task, resource=resource)


def _valorization(project, period_end, amount, status=ValorizationStatus.CLIENT_APPROVED, number=1):
    return Valorization.create(
        project.id,
        number,
        period_start=period_end - timedelta(days=27),
        period_end=period_end,
        amount=amount,
        status=status,
    )


def _snapshot(project, schedule=None, tasks=(), valorizations=(), has_baseline=None, actual_cost=None):
    return CurveSSnapshot(
        project=project,
        bac=project.bac,
        schedule=schedule,
        has_baseline=bool(schedule and schedule.is_baseline) if has_baseline is None else has_baseline,
        tasks=tuple(tasks),
        valorizations=tuple(valorizations),
        actual_cost=actual_cost,
    )


def test_task_spanning_exactly_one_week(project, schedule, crew):
    snap = _snapshot(project, schedule, tasks=[_planned(schedule, crew, date(2025, 3, 10), date(2025, 3, 16), 700.0)])

    result = compute_curve_s(snap)

    assert [w.pv for w in result.weeks] == pytest.approx([0.0, 700.0, 0.0])
    assert result.evm.pv_total == pytest.approx(700.0)


def test_task_split_across_adjacent_weeks(project, schedule, crew):
    snap = _snapshot(project, schedule, tasks=[_planned(schedule, crew, date(2025, 3, 7), date(2025, 3, 13), 700.0)])

    result = compute_curve_s(snap)

    assert result.weeks[0].pv == pytest.approx(300.0)
    assert result.weeks[1].pv == pytest.approx(400.0)
    assert sum(w.pv for w in result.weeks) == pytest.approx(700.0, abs=1e-6)


def test_valorization_in_second_week(project, schedule, crew):
    snap = _snapshot(
        project,
        schedule,
        tasks=[_planned(schedule, crew, date(2025, 3, 3), date(2025, 3, 23), 2100.0)],
        valorizations=[_valorization(project, date(2025, 3, 14), 500.0)],
    )

    result = compute_curve_s(snap)

    assert [w.ev for w in result.weeks] == [0.0, 500.0, 0.0]
    assert [w.ev_cumulative for w in result.weeks] == [0.0, 500.0, 500.0]
    assert result.evm.ev_total == 500.0
    assert result.evm.spi == pytest.approx(500.0 / 2100.0)


def test_no_schedule_gives_ev_only_curve(project):
    snap = _snapshot(
        project,
        schedule=None,
        valorizations=[_valorization(project, date(2025, 4, 30), 2000.0)],
    )

    result = compute_curve_s(snap)

    assert result.has_baseline is False
    assert result.schedule_id is None
    assert result.evm.ev_total == 2000.0
    assert result.evm.pv_total == 0.0
    assert result.evm.spi is None
    assert result.evm.sv == 2000.0
    assert result.bac == 10000.0
    # range comes from the valorization alone, not from the project dates
    assert len(result.weeks) == 1
    assert result.weeks[0].week_start == date(2025, 4, 30)
    assert all(w.pv == 0.0 for w in result.weeks)


def test_single_day_project_gets_one_week(schedule, crew):
    one_day = Project.create(
        code="PRJ-002",
        name="Site survey",
        start_date=date(2025, 5, 5),
        end_date=date(2025, 5, 5),
        contract_total=1500.0,
    )
    snap = _snapshot(one_day, schedule, tasks=[_planned(schedule, crew, date(2025, 5, 5), date(2025, 5, 5), 300.0)])

    result = compute_curve_s(snap)

    assert len(result.weeks) == 1
    assert result.weeks[0].week_start == date(2025, 5, 5)
    assert result.weeks[0].week_end == date(2025, 5, 11)
    assert result.weeks[0].pv == pytest.approx(300.0)


def test_no_tasks_and_no_valorizations_returns_empty_curve(project, schedule):
    result = compute_curve_s(_snapshot(project, schedule))

    assert result.weeks == []
    assert result.evm.pv_total == 0.0
    assert result.evm.ev_total == 0.0
    assert result.evm.spi is None
    assert result.evm.sv == 0.0
    assert result.evm.cpi is None
    assert result.evm.cv is None
    assert result.bac == 10000.0
    assert result.schedule_id == schedule.id


def test_range_widens_to_inputs_outside_project_dates(project, schedule, crew):
    late_task = _planned(schedule, crew, date(2025, 4, 1), date(2025, 4, 10), 1000.0)
    late_bill = _valorization(project, date(2025, 6, 30), 4000.0)

    result = compute_curve_s(_snapshot(project, schedule, tasks=[late_task], valorizations=[late_bill]))

    assert result.weeks[0].week_start == project.start_date
    assert result.weeks[-1].week_end >= date(2025, 6, 30)
    assert result.evm.pv_total == pytest.approx(1000.0)
    assert result.evm.ev_total == pytest.approx(4000.0)


def test_unrecognized_valorizations_are_ignored(project, schedule, crew):
    bills = [
        _valorization(project, date(2025, 3, 7), 100.0, ValorizationStatus.DRAFT, number=1),
        _valorization(project, date(2025, 3, 7), 200.0, ValorizationStatus.CANCELLED, number=2),
        _valorization(project, date(2025, 3, 14), 300.0, ValorizationStatus.INVOICED, number=3),
        _valorization(project, date(2025, 3, 21), 400.0, ValorizationStatus.PAID, number=4),
    ]
    task = _planned(schedule, crew, date(2025, 3, 3), date(2025, 3, 9), 100.0)

    result = compute_curve_s(_snapshot(project, schedule, tasks=[task], valorizations=bills))

    assert result.evm.ev_total == pytest.approx(700.0)


def test_undated_and_inverted_tasks_are_excluded(project, schedule, crew):
    undated = PlannedTask(
        task=Task.create(schedule.id, "Undated", estimated_hours=10.0, resource_id=crew.id),
        resource=crew,
    )
    inverted = _planned(schedule, crew, date(2025, 3, 12), date(2025, 3, 10), 500.0)
    good = _planned(schedule, crew, date(2025, 3, 3), date(2025, 3, 9), 70.0)

    result = compute_curve_s(_snapshot(project, schedule, tasks=[undated, inverted, good]))

    assert result.evm.pv_total == pytest.approx(70.0)


def test_actual_cost_flows_into_cpi(project, schedule, crew):
    snap = _snapshot(
        project,
        schedule,
        tasks=[_planned(schedule, crew, date(2025, 3, 3), date(2025, 3, 16), 1000.0)],
        valorizations=[_valorization(project, date(2025, 3, 16), 800.0)],
        actual_cost=1000.0,
    )

    result = compute_curve_s(snap)

    assert result.evm.cpi == pytest.approx(0.8)
    assert result.evm.cv == pytest.approx(-200.0)


def test_fallback_schedule_is_flagged(project, crew):
    latest = Schedule.create(project.id, "Execution", schedule_type=ScheduleType.EXECUTION)
    snap = _snapshot(
        project,
        latest,
        tasks=[_planned(latest, crew, date(2025, 3, 3), date(2025, 3, 9), 10.0)],
        has_baseline=False,
    )

    result = compute_curve_s(snap)

    assert result.has_baseline is False
    assert result.schedule_id == latest.id
    assert any("most recently created" in note for note in result.notes)


def test_same_snapshot_gives_same_result(project, schedule, crew):
    snap = _snapshot(
        project,
        schedule,
        tasks=[_planned(schedule, crew, date(2025, 3, 5), date(2025, 3, 18), 1400.0)],
        valorizations=[_valorization(project, date(2025, 3, 20), 600.0)],
    )

    first = compute_curve_s(snap)
    second = compute_curve_s(snap)

    assert first.as_dict() == second.as_dict()
    assert first.weeks[0] is not second.weeks[0]


def test_as_dict_matches_wire_shape(project, schedule, crew):
    snap = _snapshot(project, schedule, tasks=[_planned(schedule, crew, date(2025, 3, 3), date(2025, 3, 9), 70.0)])

    payload = compute_curve_s(snap).as_dict()

    assert set(payload) == {"weeks", "bac", "evm", "hasBaseline", "scheduleId", "project"}
    assert payload["project"] == {"id": project.id, "code": "PRJ-001", "name": "Substation retrofit"}
    assert payload["weeks"][0] == {
        "weekStart": "2025-03-03",
        "weekEnd": "2025-03-09",
        "label": "W01 03/03",
        "pv": 70.0,
        "ev": 0.0,
        "pvCumulative": 70.0,
        "evCumulative": 0.0,
    }
    assert payload["hasBaseline"] is True
    assert payload["scheduleId"] == schedule.id


def test_select_schedule_prefers_baseline_then_latest(project):
    t0 = datetime(2025, 1, 1, tzinfo=timezone.utc)
    older = Schedule(id="s1", project_id=project.id, name="Old", created_at=t0)
    newer = Schedule(id="s2", project_id=project.id, name="New", created_at=t0 + timedelta(days=5))
    base = Schedule(id="s3", project_id=project.id, name="Base", is_baseline=True, created_at=t0 - timedelta(days=5))

    assert select_schedule([older, newer, base]) == (base, True)
    assert select_schedule([older, newer]) == (newer, False)
    assert select_schedule([]) == (None, False)


def test_covering_range_spans_all_inputs(project, schedule, crew):
    tasks = [_planned(schedule, crew, date(2025, 2, 20), date(2025, 3, 1), 1.0)]
    bills = [_valorization(project, date(2025, 5, 31), 1.0)]

    start, end = covering_range(
        tasks=tasks,
        valorizations=bills,
        project_start=project.start_date,
        project_end=project.end_date,
    )

    assert (start, end) == (date(2025, 2, 20), date(2025, 5, 31))
