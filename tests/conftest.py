from datetime import date

import pytest

from dayschedule.services.astro_snapshot import AstroSnapshot


class FixedSunProvider:
    """Equinox-like sky: sunrise 06:00, transit 12:00, sunset 18:00 every day."""

    def __init__(self, missing=(), sign_change=date(2024, 3, 20)):
        self.missing = set(missing)
        self.sign_change = sign_change
        self.calls = []

    def snapshot(self, moment, lat, lon, elevation=0.0, horizon=None):
        self.calls.append(moment)
        if moment.date() in self.missing:
            return None
        return AstroSnapshot(
            latitude=lat,
            longitude=lon,
            sun_rise=6.0,
            sun_set=18.0,
            sun_transit=12.0,
            civil_twilight_morning=5.5,
            civil_twilight_evening=18.5,
            sun_alt=30.0,
            sun_az=180.0,
            moon_alt=-10.0,
            moon_az=90.0,
            sun_hrs_visible=12.0,
            sun_hrs_invisible=12.0,
            sun_sign="Aries" if moment.date() >= self.sign_change else "Pisces",
            moon_sign="Leo",
            moon_phase="FullMoon",
            moon_phase_index=4,
            season="spring",
            season_index=1,
        )


@pytest.fixture
def fixed_sun_provider():
    return FixedSunProvider()


@pytest.fixture
def provider_factory():
    return FixedSunProvider
