"""Day schedule API endpoints."""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Body, Depends, HTTPException, Query
from zoneinfo import ZoneInfo

from ..schemas.schedule_viewmodel import (
    MONTH_DAY,
    AnnualEvent,
    DayScheduleViewModel,
    InformativeDay,
    ScheduleKind,
    ScheduleRequest,
)
from ..services.day_window import EphemerisProvider
from ..services.ephem import SwissEphemerisProvider
from ..services.orchestrators.day_schedule_full import build_readings, build_viewmodel
from ..services.seasonal_hours import PartitionInvariantError


logger = logging.getLogger(__name__)

router = APIRouter(prefix="/v1/schedule", tags=["schedule"])


def get_provider() -> EphemerisProvider:
    return SwissEphemerisProvider()


@router.post(
    "/compute",
    response_model=DayScheduleViewModel,
    summary="Compute the day schedule for a date, time and location",
)
def schedule_compute(
    req: ScheduleRequest = Body(
        ...,
        openapi_examples={
            "berlin": {
                "summary": "Berlin at the March equinox",
                "value": {
                    "date": "2024-03-20",
                    "time": "12:00",
                    "place": {"lat": 52.52, "lon": 13.405, "tz": "Europe/Berlin", "query": "Berlin"},
                    "options": {"seasonal_hours": "12", "lang": "de", "informative_days": ["Pentecost"]},
                },
            },
            "defaults": {
                "summary": "No place provided",
                "description": "Uses configured defaults when place is omitted",
                "value": {"date": "2024-06-01"},
            },
        },
    ),
    provider: EphemerisProvider = Depends(get_provider),
):
    place_payload = req.place.model_dump(exclude_none=True) if req.place else None
    options = req.options.model_dump()
    return _run(build_viewmodel, req.date, req.time, place_payload, options, provider)


@router.get(
    "/today",
    response_model=DayScheduleViewModel,
    summary="Day schedule for the current moment at a location",
)
def schedule_today(
    lat: Optional[float] = Query(None, ge=-90.0, le=90.0, description="Latitude"),
    lon: Optional[float] = Query(None, ge=-180.0, le=180.0, description="Longitude"),
    tz: Optional[str] = Query(None, description="IANA timezone"),
    place_label: Optional[str] = Query(None, description="Optional place label"),
    day_parts: Optional[int] = Query(None, ge=1, le=24),
    night_parts: Optional[int] = Query(None, ge=1, le=24),
    seasonal_hours: Optional[str] = Query(None, pattern=r"^\d{1,2}(:\d{1,2})?$"),
    roman_day: bool = Query(False),
    roman_night: bool = Query(False),
    earlyspring: Optional[str] = Query(None, pattern=MONTH_DAY, description="Phenological spring origin (MM-DD)"),
    earlyfall: Optional[str] = Query(None, pattern=MONTH_DAY, description="Phenological fall origin (MM-DD)"),
    schedule: Optional[List[ScheduleKind]] = Query(None),
    informative_days: Optional[List[InformativeDay]] = Query(None),
    annual_events: Optional[List[AnnualEvent]] = Query(None),
    horizon: Optional[float] = Query(None, ge=-18.0, le=18.0, description="Custom twilight horizon in degrees"),
    lang: str = Query("en"),
    day_offset: int = Query(0, ge=-2, le=2),
    provider: EphemerisProvider = Depends(get_provider),
):
    place = _query_place(lat, lon, tz, place_label)
    options = _query_options(
        day_parts=day_parts,
        night_parts=night_parts,
        seasonal_hours=seasonal_hours,
        roman_day=roman_day,
        roman_night=roman_night,
        earlyspring=earlyspring,
        earlyfall=earlyfall,
        schedule=schedule,
        informative_days=informative_days,
        annual_events=annual_events,
        horizon=horizon,
        lang=lang,
        day_offset=day_offset,
    )
    return _run(build_viewmodel, None, None, place, options, provider)


@router.get(
    "/readings",
    summary="Flat key/value readings for the current moment at a location",
)
def schedule_readings(
    lat: Optional[float] = Query(None, ge=-90.0, le=90.0, description="Latitude"),
    lon: Optional[float] = Query(None, ge=-180.0, le=180.0, description="Longitude"),
    tz: Optional[str] = Query(None, description="IANA timezone"),
    place_label: Optional[str] = Query(None, description="Optional place label"),
    day_parts: Optional[int] = Query(None, ge=1, le=24),
    night_parts: Optional[int] = Query(None, ge=1, le=24),
    seasonal_hours: Optional[str] = Query(None, pattern=r"^\d{1,2}(:\d{1,2})?$"),
    roman_day: bool = Query(False),
    roman_night: bool = Query(False),
    earlyspring: Optional[str] = Query(None, pattern=MONTH_DAY, description="Phenological spring origin (MM-DD)"),
    earlyfall: Optional[str] = Query(None, pattern=MONTH_DAY, description="Phenological fall origin (MM-DD)"),
    schedule: Optional[List[ScheduleKind]] = Query(None),
    informative_days: Optional[List[InformativeDay]] = Query(None),
    annual_events: Optional[List[AnnualEvent]] = Query(None),
    horizon: Optional[float] = Query(None, ge=-18.0, le=18.0, description="Custom twilight horizon in degrees"),
    lang: str = Query("en"),
    day_offset: int = Query(0, ge=-2, le=2),
    date: Optional[str] = Query(None, description="Local date (YYYY-MM-DD); now when omitted"),
    time: Optional[str] = Query(None, description="Local time (HH:MM[:SS])"),
    provider: EphemerisProvider = Depends(get_provider),
) -> Dict[str, Any]:
    place = _query_place(lat, lon, tz, place_label)
    options = _query_options(
        day_parts=day_parts,
        night_parts=night_parts,
        seasonal_hours=seasonal_hours,
        roman_day=roman_day,
        roman_night=roman_night,
        earlyspring=earlyspring,
        earlyfall=earlyfall,
        schedule=schedule,
        informative_days=informative_days,
        annual_events=annual_events,
        horizon=horizon,
        lang=lang,
        day_offset=day_offset,
    )
    return _run(build_readings, date, time, place, options, provider)


def _query_options(**options: Any) -> Dict[str, Any]:
    # Unset list and origin parameters fall back to the engine defaults.
    return {key: value for key, value in options.items() if value is not None}


def _query_place(lat, lon, tz, place_label) -> Optional[Dict[str, Any]]:
    place_payload: Dict[str, Any] = {}
    if lat is not None:
        place_payload["lat"] = lat
    if lon is not None:
        place_payload["lon"] = lon
    if tz is not None:
        place_payload["tz"] = tz
    if place_label:
        place_payload["query"] = place_label
    return place_payload or None


def _run(builder, date, time, place, options, provider):
    try:
        return builder(date, time, _clamp_place(place), options, provider)
    except PartitionInvariantError as exc:
        logger.error("schedule.partition.invariant", extra={"error": str(exc), "date": date})
        raise HTTPException(status_code=500, detail=str(exc)) from exc
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc


def _clamp_place(place: Optional[Dict[str, Any]]) -> Optional[Dict[str, Any]]:
    if place is None:
        return None

    clamped = dict(place)

    if "lat" in clamped and clamped["lat"] is not None:
        lat = float(clamped["lat"])
        clamped["lat"] = max(-89.9, min(89.9, lat))

    if "lon" in clamped and clamped["lon"] is not None:
        lon = float(clamped["lon"])
        clamped["lon"] = max(-180.0, min(180.0, lon))

    tz_name = clamped.get("tz")
    if tz_name:
        try:
            ZoneInfo(tz_name)
        except (KeyError, ValueError) as exc:
            raise ValueError(f"Invalid timezone: {tz_name}") from exc

    return clamped
