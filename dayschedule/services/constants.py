SIGN_NAMES = ["Aries","Taurus","Gemini","Cancer","Leo","Virgo","Libra","Scorpio","Sagittarius","Capricorn","Aquarius","Pisces"]

# Index 0 is the new moon, counting through the synodic month in 45° slots.
MOON_PHASES = [
    "NewMoon",
    "WaxingCrescent",
    "FirstQuarter",
    "WaxingGibbous",
    "FullMoon",
    "WaningGibbous",
    "LastQuarter",
    "WaningCrescent",
]

COMPASS_POINTS = [
    "N", "NNE", "NE", "ENE", "E", "ESE", "SE", "SSE",
    "S", "SSW", "SW", "WSW", "W", "WNW", "NW", "NNW",
]

UNAVAILABLE = "---"

# Seasons share one index order for every hemisphere: the month slot.
SEASON_NAMES = {
    "N": ["winter", "spring", "summer", "fall"],
    "S": ["summer", "fall", "winter", "spring"],
}

# Inclusive month bounds of the meteorological seasons (northern names).
SEASON_METEO_MONTHS = {
    "winter": (12, 2),
    "spring": (3, 5),
    "summer": (6, 8),
    "fall": (9, 11),
}

PHENO_STAGES = [
    "winter",
    "earlyspring",
    "firstspring",
    "fullspring",
    "earlysummer",
    "midsummer",
    "latesummer",
    "earlyfall",
    "fullfall",
    "latefall",
]

# Where the seasonal wave starts: south-west Portugal and southern Finland.
PHENO_REFERENCE_POINTS = {
    "earlyspring": (37.136633, -8.817837),
    "earlyfall": (60.161880, 24.937267),
}

PHENO_LAT_RANGE = (35.0, 71.0)
PHENO_LON_RANGE = (-11.0, 25.0)

DEFAULT_EARLYSPRING = "02-22"
DEFAULT_EARLYFALL = "08-20"

# Night half first (dusk .. dawn), then day half (breakingdawn .. firstdusk).
DAY_PHASES = [
    "dusk",
    "earlyevening",
    "evening",
    "lateevening",
    "earlynight",
    "beforemidnight",
    "midnight",
    "aftermidnight",
    "latenight",
    "cockcrow",
    "firstmorninglight",
    "dawn",
    "breakingdawn",
    "earlymorning",
    "morning",
    "earlyforenoon",
    "forenoon",
    "lateforenoon",
    "noon",
    "earlyafternoon",
    "afternoon",
    "afternoon",
    "lateafternoon",
    "firstdusk",
]

# Single-instant events, mapped to the AstroSnapshot attribute holding them.
EVENT_FIELDS = {
    "SunRise": "sun_rise",
    "SunSet": "sun_set",
    "SunTransit": "sun_transit",
    "CivilTwilightMorning": "civil_twilight_morning",
    "CivilTwilightEvening": "civil_twilight_evening",
    "NauticTwilightMorning": "nautic_twilight_morning",
    "NauticTwilightEvening": "nautic_twilight_evening",
    "AstroTwilightMorning": "astro_twilight_morning",
    "AstroTwilightEvening": "astro_twilight_evening",
    "CustomTwilightMorning": "custom_twilight_morning",
    "CustomTwilightEvening": "custom_twilight_evening",
    "MoonRise": "moon_rise",
    "MoonSet": "moon_set",
    "MoonTransit": "moon_transit",
}

SCHEDULE_KINDS = [
    "MoonPhaseS",
    "MoonRise",
    "MoonSet",
    "MoonSign",
    "MoonTransit",
    "ObsDate",
    "ObsIsDST",
    "SeasonMeteo",
    "SeasonPheno",
    "ObsSeason",
    "DaySeasonalHr",
    "Daytime",
    "SunRise",
    "SunSet",
    "SunSign",
    "SunTransit",
    "AstroTwilightEvening",
    "AstroTwilightMorning",
    "CivilTwilightEvening",
    "CivilTwilightMorning",
    "NauticTwilightEvening",
    "NauticTwilightMorning",
    "CustomTwilightEvening",
    "CustomTwilightMorning",
]


def sign_index_from_lon(lon: float) -> int:
    return int(lon // 30) % 12


def sign_name_from_lon(lon: float) -> str:
    return SIGN_NAMES[sign_index_from_lon(lon)]


def moon_phase_index(elongation: float) -> int:
    # Centre each 45° slot on its named phase.
    return int(((elongation + 22.5) % 360.0) // 45.0)

def compass_point(azimuth: float) -> str:
    return COMPASS_POINTS[int(((azimuth % 360.0) + 11.25) // 22.5) % 16]
