"""Helpers for normalising schedule place inputs."""

import os
from typing import Any, Dict, Optional, Tuple

from timezonefinder import TimezoneFinder

_TF = TimezoneFinder()


DEF_LAT = float(os.getenv("DEFAULT_PLACE_LAT", "52.5200"))
DEF_LON = float(os.getenv("DEFAULT_PLACE_LON", "13.4050"))
DEF_TZ = os.getenv("DEFAULT_PLACE_TZ", "Europe/Berlin")
DEF_LBL = os.getenv("DEFAULT_PLACE_LABEL", "Berlin, Germany")


def clamp_lat_lon(lat: float, lon: float) -> Tuple[float, float]:
    """Clamp latitude/longitude to safe ranges."""

    lat = max(min(lat, 89.9), -89.9)
    lon = ((lon + 180.0) % 360.0) - 180.0  # wrap to [-180, 180)
    return lat, lon


def infer_tz(lat: float, lon: float) -> Optional[str]:
    """Infer timezone name for a coordinate pair."""

    return _TF.timezone_at(lng=lon, lat=lat)


def normalize_place(place: Optional[Dict[str, Any]]) -> Tuple[Dict[str, Any], Dict[str, Any]]:
    """Normalise place payload and capture metadata flags."""

    flags: Dict[str, Any] = {
        "place_defaults_used": False,
        "tz_inferred": False,
        "default_reason": None,
    }

    if not place:
        flags.update({"place_defaults_used": True, "default_reason": "missing_place"})
        return {"lat": DEF_LAT, "lon": DEF_LON, "tz": DEF_TZ, "query": DEF_LBL, "elevation": 0.0}, flags

    lat = place.get("lat")
    lon = place.get("lon")
    tz = place.get("tz")
    lbl = place.get("query") or place.get("label") or None
    elevation = float(place.get("elevation") or 0.0)

    if lat is None or lon is None:
        flags.update({"place_defaults_used": True, "default_reason": "missing_latlon"})
        return {
            "lat": DEF_LAT,
            "lon": DEF_LON,
            "tz": tz or DEF_TZ,
            "query": lbl or DEF_LBL,
            "elevation": elevation,
        }, flags

    lat, lon = clamp_lat_lon(float(lat), float(lon))

    if not tz:
        tz_guess = infer_tz(lat, lon)
        if tz_guess:
            tz = tz_guess
            flags["tz_inferred"] = True
        else:
            tz = DEF_TZ
        flags["default_reason"] = "missing_tz"

    eff_lbl = lbl or f"{lat:.4f}, {lon:.4f}"
    return {"lat": lat, "lon": lon, "tz": tz, "query": eff_lbl, "elevation": elevation}, flags
