from core.services.schedule.service import ScheduleService

__all__ = ["ScheduleService"]
