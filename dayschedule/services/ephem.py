"""Swiss Ephemeris helpers producing the per-day astronomical snapshot."""

from __future__ import annotations

import logging
import os
from datetime import datetime, time as time_cls, timedelta, timezone
from typing import Optional, Tuple

import swisseph as swe

from .astro_snapshot import AstroSnapshot
from .constants import MOON_PHASES, SEASON_NAMES, moon_phase_index, sign_name_from_lon


logger = logging.getLogger(__name__)

# Engine version for API responses
try:
    ENGINE_VERSION = f"swisseph-{swe.version}"
except AttributeError:
    ENGINE_VERSION = "swisseph-2.10"  # Fallback if version not available

TWILIGHT_BITS = {
    "civil": swe.BIT_CIVIL_TWILIGHT,
    "nautic": swe.BIT_NAUTIC_TWILIGHT,
    "astro": swe.BIT_ASTRO_TWILIGHT,
}


def _backend_flag() -> int:
    """Return the Swiss Ephemeris backend flag based on environment configuration."""

    raw_backend = os.getenv("EPHEMERIS_BACKEND")
    backend = raw_backend.strip().lower() if raw_backend else "swieph"
    return swe.FLG_MOSEPH if backend == "moseph" else swe.FLG_SWIEPH


def init_paths(ephe_dir: str | os.PathLike[str] | None) -> None:
    """Set the Swiss Ephemeris file search path when available."""

    if not ephe_dir:
        return

    path = os.fspath(ephe_dir)
    if os.path.isdir(path):
        swe.set_ephe_path(path)


def _to_jd(moment: datetime) -> float:
    """Convert a timezone-aware datetime into Julian Day (UT)."""
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    moment_utc = moment.astimezone(timezone.utc)
    return moment_utc.timestamp() / 86400.0 + 2440587.5


def _jd_to_datetime(jd: float) -> datetime:
    seconds = (jd - 2440587.5) * 86400.0
    return datetime.fromtimestamp(seconds, tz=timezone.utc)


def _local_hours(jd: float, start_of_day: datetime) -> Optional[float]:
    """Decimal wall-clock hours of ``jd`` if it falls on ``start_of_day``'s date."""

    local = _jd_to_datetime(jd).astimezone(start_of_day.tzinfo)
    if local.date() != start_of_day.date():
        return None
    return local.hour + local.minute / 60.0 + (local.second + local.microsecond / 1e6) / 3600.0


class SwissEphemerisProvider:
    """Compute an :class:`AstroSnapshot` for a local moment and place."""

    def __init__(self, ephe_dir: str | os.PathLike[str] | None = None) -> None:
        init_paths(ephe_dir if ephe_dir is not None else os.getenv("EPHEMERIS_PATH"))
        self.flag = _backend_flag()

    def _event(
        self,
        start_of_day: datetime,
        body: int,
        rsmi: int,
        geopos: Tuple[float, float, float],
        horizon: Optional[float] = None,
    ) -> Optional[float]:
        jd_start = _to_jd(start_of_day)
        try:
            if horizon is None:
                result, times = swe.rise_trans(jd_start, body, rsmi, geopos, 0.0, 0.0, self.flag)
            else:
                result, times = swe.rise_trans_true_hor(
                    jd_start, body, rsmi, geopos, 0.0, 0.0, horizon, self.flag
                )
        except swe.Error:  # type: ignore[attr-defined]
            return None
        if result < 0 or not times:
            return None
        return _local_hours(times[0], start_of_day)

    def _horizontal(self, jd: float, lon_lat_dist, geopos) -> Tuple[float, float]:
        az, true_alt, _app_alt = swe.azalt(jd, swe.ECL2HOR, geopos, 0.0, 0.0, tuple(lon_lat_dist[:3]))
        # Swiss Ephemeris counts azimuth from south; report it from north.
        return (az + 180.0) % 360.0, true_alt

    def snapshot(
        self,
        moment: datetime,
        lat: float,
        lon: float,
        elevation: float = 0.0,
        horizon: Optional[float] = None,
    ) -> Optional[AstroSnapshot]:
        """Return the day's facts, or ``None`` when the ephemeris cannot deliver them."""

        if moment.tzinfo is None:
            raise ValueError("moment must be timezone aware")

        start_of_day = datetime.combine(moment.date(), time_cls(0, 0), tzinfo=moment.tzinfo)
        geopos = (lon, lat, elevation)
        jd_now = _to_jd(moment)
        jd_noon = _to_jd(start_of_day + timedelta(hours=12))

        try:
            sun, _ = swe.calc_ut(jd_now, swe.SUN, self.flag)
            moon, _ = swe.calc_ut(jd_now, swe.MOON, self.flag)
            sun_noon, _ = swe.calc_ut(jd_noon, swe.SUN, self.flag)
            sun_az, sun_alt = self._horizontal(jd_now, sun, geopos)
            moon_az, moon_alt = self._horizontal(jd_now, moon, geopos)
            _noon_az, sun_alt_noon = self._horizontal(jd_noon, sun_noon, geopos)
        except swe.Error as exc:  # type: ignore[attr-defined]
            logger.warning(
                "schedule.ephem.failed",
                extra={"date": moment.date().isoformat(), "lat": lat, "lon": lon, "error": str(exc)},
            )
            return None

        disc = swe.BIT_DISC_CENTER
        sun_rise = self._event(start_of_day, swe.SUN, swe.CALC_RISE | disc, geopos)
        sun_set = self._event(start_of_day, swe.SUN, swe.CALC_SET | disc, geopos)
        twilights = {}
        for name, bit in TWILIGHT_BITS.items():
            twilights[f"{name}_twilight_morning"] = self._event(start_of_day, swe.SUN, swe.CALC_RISE | bit, geopos)
            twilights[f"{name}_twilight_evening"] = self._event(start_of_day, swe.SUN, swe.CALC_SET | bit, geopos)
        if horizon is not None:
            twilights["custom_twilight_morning"] = self._event(
                start_of_day, swe.SUN, swe.CALC_RISE | disc, geopos, horizon
            )
            twilights["custom_twilight_evening"] = self._event(
                start_of_day, swe.SUN, swe.CALC_SET | disc, geopos, horizon
            )

        visible = _visible_hours(sun_rise, sun_set, sun_alt_noon)
        sun_lon = sun[0] % 360.0
        moon_lon = moon[0] % 360.0
        phase_idx = moon_phase_index((moon_lon - sun_lon) % 360.0)
        season_idx = _season_index(sun_lon)
        hemisphere = "S" if lat < 0 else "N"

        return AstroSnapshot(
            latitude=lat,
            longitude=lon,
            sun_rise=sun_rise,
            sun_set=sun_set,
            sun_transit=self._event(start_of_day, swe.SUN, swe.CALC_MTRANSIT, geopos),
            moon_rise=self._event(start_of_day, swe.MOON, swe.CALC_RISE | disc, geopos),
            moon_set=self._event(start_of_day, swe.MOON, swe.CALC_SET | disc, geopos),
            moon_transit=self._event(start_of_day, swe.MOON, swe.CALC_MTRANSIT, geopos),
            sun_alt=sun_alt,
            sun_az=sun_az,
            moon_alt=moon_alt,
            moon_az=moon_az,
            sun_hrs_visible=visible,
            sun_hrs_invisible=24.0 - visible,
            sun_sign=sign_name_from_lon(sun_lon),
            moon_sign=sign_name_from_lon(moon_lon),
            moon_phase=MOON_PHASES[phase_idx],
            moon_phase_index=phase_idx,
            season=SEASON_NAMES[hemisphere][season_idx],
            season_index=season_idx,
            **twilights,
        )


def _visible_hours(sun_rise: Optional[float], sun_set: Optional[float], sun_alt_noon: float) -> float:
    if sun_rise is not None and sun_set is not None:
        span = (sun_set - sun_rise) % 24.0
        if span > 0.0:
            return span
    elif sun_rise is not None:
        return 24.0 - sun_rise
    elif sun_set is not None:
        return sun_set
    return 24.0 if sun_alt_noon > 0.0 else 0.0


def _season_index(sun_lon: float) -> int:
    # Equinox/solstice quadrants mapped onto the winter, spring, summer, fall slots.
    return (int(sun_lon // 90.0) + 1) % 4
