from .schedule_viewmodel import (
    DayScheduleViewModel,
    ScheduleOptions,
    SchedulePlace,
    ScheduleRequest,
)
