import logging
from datetime import date

import pytest

from core.domain import ResourceType, ScheduleType, ValorizationStatus
from core.exceptions import BusinessRuleError, NotFoundError
from infra.db.models import TaskORM


def _project(services, **extra):
    ps = services["project_service"]
    params = dict(
        code="P-100",
        name="Pumping station",
        start_date=date(2025, 3, 3),
        end_date=date(2025, 3, 30),
        contract_total=10000.0,
    )
    params.update(extra)
    return ps.create_project(**params)


def test_curve_from_baseline_schedule_and_approved_billing(services):
    rs = services["resource_service"]
    ss = services["schedule_service"]
    vs = services["valorization_service"]
    cs = services["curve_s_service"]

    project = _project(services)
    welder = rs.create_resource("Welder", ResourceType.INDIVIDUAL, hourly_cost=20.0)
    crew = rs.create_resource("Civil crew", ResourceType.CREW, hourly_cost=100.0)
    baseline = ss.create_schedule(project.id, "Planning v1")

    # 10h x 2 people x 20 = 400 in week 1; 7h x 100 (crew) = 700 split 3/4 across weeks 2-3
    ss.add_task(baseline.id, "Pipe welding", date(2025, 3, 3), date(2025, 3, 9), 10, 2, welder.id)
    ss.add_task(baseline.id, "Foundations", date(2025, 3, 14), date(2025, 3, 20), 7, 6, crew.id)
    ss.add_task(baseline.id, "Unassigned", date(2025, 3, 3), date(2025, 3, 9), 50, 1, None)
    ss.add_task(baseline.id, "Undated", None, None, 50, 1, welder.id)

    vs.register_valorization(project.id, date(2025, 3, 1), date(2025, 3, 15), 600.0, ValorizationStatus.CLIENT_APPROVED)
    vs.register_valorization(project.id, date(2025, 3, 16), date(2025, 3, 30), 900.0, ValorizationStatus.DRAFT)

    result = cs.get_curve_s(project.id)

    assert result.has_baseline is True
    assert result.schedule_id == baseline.id
    assert len(result.weeks) == 4
    assert [w.pv for w in result.weeks] == pytest.approx([400.0, 300.0, 400.0, 0.0])
    assert [w.ev for w in result.weeks] == pytest.approx([0.0, 600.0, 0.0, 0.0])
    assert result.weeks[-1].pv_cumulative == pytest.approx(1100.0)
    assert result.evm.pv_total == pytest.approx(1100.0)
    assert result.evm.ev_total == pytest.approx(600.0)
    assert result.evm.spi == pytest.approx(600.0 / 1100.0)
    assert result.evm.sv == pytest.approx(-500.0)
    assert result.evm.cpi is None
    assert result.bac == 10000.0


def test_baseline_wins_over_newer_schedule(services):
    rs = services["resource_service"]
    ss = services["schedule_service"]
    cs = services["curve_s_service"]

    project = _project(services)
    crew = rs.create_resource("Crew", ResourceType.CREW, hourly_cost=1.0)
    baseline = ss.create_schedule(project.id, "Planning v1")
    execution = ss.create_schedule(project.id, "Execution", ScheduleType.EXECUTION)
    ss.add_task(baseline.id, "Planned", date(2025, 3, 3), date(2025, 3, 9), 100, 1, crew.id)
    ss.add_task(execution.id, "Executed", date(2025, 3, 3), date(2025, 3, 9), 999, 1, crew.id)

    result = cs.get_curve_s(project.id)

    assert result.schedule_id == baseline.id
    assert result.evm.pv_total == pytest.approx(100.0)


def test_latest_schedule_is_used_without_baseline(services):
    rs = services["resource_service"]
    ss = services["schedule_service"]
    cs = services["curve_s_service"]

    project = _project(services)
    crew = rs.create_resource("Crew", ResourceType.CREW, hourly_cost=1.0)
    ss.create_schedule(project.id, "Commercial", ScheduleType.COMMERCIAL)
    execution = ss.create_schedule(project.id, "Execution", ScheduleType.EXECUTION)
    ss.add_task(execution.id, "Executed", date(2025, 3, 3), date(2025, 3, 9), 250, 1, crew.id)

    result = cs.get_curve_s(project.id)

    assert result.has_baseline is False
    assert result.schedule_id == execution.id
    assert result.evm.pv_total == pytest.approx(250.0)


def test_project_without_schedule_gets_ev_only_curve(services):
    vs = services["valorization_service"]
    cs = services["curve_s_service"]

    project = _project(services)
    vs.register_valorization(project.id, date(2025, 4, 1), date(2025, 4, 30), 2000.0, ValorizationStatus.PAID)

    result = cs.get_curve_s(project.id)

    assert result.has_baseline is False
    assert result.schedule_id is None
    assert result.evm.ev_total == 2000.0
    assert result.evm.pv_total == 0.0
    assert result.evm.spi is None
    assert result.evm.sv == 2000.0


def test_project_with_nothing_planned_or_billed(services):
    cs = services["curve_s_service"]
    project = _project(services)

    result = cs.get_curve_s(project.id)

    assert result.weeks == []
    assert result.evm.spi is None
    assert result.evm.sv == 0.0
    assert result.as_dict()["project"]["code"] == "P-100"


def test_actual_cost_of_project_drives_cpi(services):
    vs = services["valorization_service"]
    cs = services["curve_s_service"]

    project = _project(services, actual_cost=1600.0)
    vs.register_valorization(project.id, date(2025, 3, 1), date(2025, 3, 15), 2000.0, ValorizationStatus.INVOICED)

    result = cs.get_curve_s(project.id)

    assert result.evm.cpi == pytest.approx(1.25)
    assert result.evm.cv == pytest.approx(400.0)


def test_unknown_project_is_not_found(services):
    with pytest.raises(NotFoundError) as exc:
        services["curve_s_service"].get_curve_s("missing")
    assert exc.value.code == "PROJECT_NOT_FOUND"


def test_project_without_contract_total_has_no_bac(services):
    project = _project(services, contract_total=None)

    with pytest.raises(BusinessRuleError) as exc:
        services["curve_s_service"].get_curve_s(project.id)
    assert exc.value.code == "PROJECT_WITHOUT_BAC"


def test_task_with_unknown_resource_is_skipped_with_warning(services, caplog):
    rs = services["resource_service"]
    ss = services["schedule_service"]
    cs = services["curve_s_service"]
    session = services["session"]

    project = _project(services)
    crew = rs.create_resource("Crew", ResourceType.CREW, hourly_cost=1.0)
    schedule = ss.create_schedule(project.id, "Planning v1")
    ss.add_task(schedule.id, "Real work", date(2025, 3, 3), date(2025, 3, 9), 10, 1, crew.id)

    # bypasses add_task, which refuses unknown resources
    session.add(
        TaskORM(
            id="ghost",
            schedule_id=schedule.id,
            name="Ghost work",
            start_date=date(2025, 3, 3),
            end_date=date(2025, 3, 9),
            estimated_hours=500.0,
            estimated_headcount=1,
            resource_id="nope",
        )
    )
    session.commit()

    with caplog.at_level(logging.WARNING, logger="core.services.curve_s.service"):
        result = cs.get_curve_s(project.id)

    assert result.evm.pv_total == pytest.approx(10.0)
    assert "Task ghost references unknown resource nope; skipped" in caplog.messages
