"""Localized names for day phases, seasons and calendar days."""

from __future__ import annotations

from typing import Dict


DAY_PHASE_LABELS: Dict[str, Dict[str, str]] = {
    "en": {
        "dusk": "Dusk",
        "earlyevening": "Early evening",
        "evening": "Evening",
        "lateevening": "Late evening",
        "earlynight": "Early night",
        "beforemidnight": "Before midnight",
        "midnight": "Midnight",
        "aftermidnight": "After midnight",
        "latenight": "Late night",
        "cockcrow": "Cock-crow",
        "firstmorninglight": "First morning light",
        "dawn": "Dawn",
        "breakingdawn": "Breaking dawn",
        "earlymorning": "Early morning",
        "morning": "Morning",
        "earlyforenoon": "Early forenoon",
        "forenoon": "Forenoon",
        "lateforenoon": "Late forenoon",
        "noon": "Noon",
        "earlyafternoon": "Early afternoon",
        "afternoon": "Afternoon",
        "lateafternoon": "Late afternoon",
        "firstdusk": "First dusk",
    },
    "de": {
        "dusk": "Abenddämmerung",
        "earlyevening": "Früher Abend",
        "evening": "Abend",
        "lateevening": "Später Abend",
        "earlynight": "Frühe Nacht",
        "beforemidnight": "Vor Mitternacht",
        "midnight": "Mitternacht",
        "aftermidnight": "Nach Mitternacht",
        "latenight": "Späte Nacht",
        "cockcrow": "Hahnenschrei",
        "firstmorninglight": "Erstes Morgenlicht",
        "dawn": "Morgendämmerung",
        "breakingdawn": "Tagesanbruch",
        "earlymorning": "Früher Morgen",
        "morning": "Morgen",
        "earlyforenoon": "Früher Vormittag",
        "forenoon": "Vormittag",
        "lateforenoon": "Später Vormittag",
        "noon": "Mittag",
        "earlyafternoon": "Früher Nachmittag",
        "afternoon": "Nachmittag",
        "lateafternoon": "Später Nachmittag",
        "firstdusk": "Erste Dämmerung",
    },
    "es": {
        "dusk": "Oscuridad",
        "earlyevening": "Atardecer temprano",
        "evening": "Nocturno",
        "lateevening": "Tarde",
        "earlynight": "Madrugada",
        "beforemidnight": "Antes de medianoche",
        "midnight": "Medianoche",
        "aftermidnight": "Después de medianoche",
        "latenight": "Noche tardía",
        "cockcrow": "Canto al gallo",
        "firstmorninglight": "Primera luz de la mañana",
        "dawn": "Amanecer",
        "breakingdawn": "Rotura amanecer",
        "earlymorning": "Temprano en la mañana",
        "morning": "Mañana",
        "earlyforenoon": "Temprano antes de mediodía",
        "forenoon": "Antes de mediodía",
        "lateforenoon": "Tarde antes de mediodía",
        "noon": "Mediodía",
        "earlyafternoon": "Temprano después de mediodía",
        "afternoon": "Después de mediodía",
        "lateafternoon": "Tarde después de mediodía",
        "firstdusk": "Temprano oscuridad",
    },
    "fr": {
        "dusk": "Crépuscule",
        "earlyevening": "Début de soirée",
        "evening": "Soir",
        "lateevening": "Fin de soirée",
        "earlynight": "Nuit tombante",
        "beforemidnight": "Avant minuit",
        "midnight": "Minuit",
        "aftermidnight": "Après minuit",
        "latenight": "Tard dans la nuit",
        "cockcrow": "Chant du coq",
        "firstmorninglight": "Première lueur du matin",
        "dawn": "Aube",
        "breakingdawn": "Aube naissante",
        "earlymorning": "Tôt le matin",
        "morning": "Matin",
        "earlyforenoon": "Matinée matinale",
        "forenoon": "Matinée",
        "lateforenoon": "Matinée tardive",
        "noon": "Midi",
        "earlyafternoon": "Début d'après-midi",
        "afternoon": "Après-midi",
        "lateafternoon": "Fin d'après-midi",
        "firstdusk": "Premier crépuscule",
    },
    "it": {
        "dusk": "Crepuscolo",
        "earlyevening": "Sera presto",
        "evening": "Serata",
        "lateevening": "Tarda serata",
        "earlynight": "Notte presto",
        "beforemidnight": "Prima mezzanotte",
        "midnight": "Mezzanotte",
        "aftermidnight": "Dopo mezzanotte",
        "latenight": "Tarda notte",
        "cockcrow": "Canto del gallo",
        "firstmorninglight": "Prima luce del mattino",
        "dawn": "Alba",
        "breakingdawn": "Dopo l'alba",
        "earlymorning": "Mattina presto",
        "morning": "Mattina",
        "earlyforenoon": "Prima mattinata",
        "forenoon": "Mattinata",
        "lateforenoon": "Tarda mattinata",
        "noon": "Mezzogiorno",
        "earlyafternoon": "Primo pomeriggio",
        "afternoon": "Pomeriggio",
        "lateafternoon": "Tardo pomeriggio",
        "firstdusk": "Primo crepuscolo",
    },
    "nl": {
        "dusk": "Schemering",
        "earlyevening": "Vroege Avond",
        "evening": "Avond",
        "lateevening": "Late Avond",
        "earlynight": "Vroege Nacht",
        "beforemidnight": "Voor Middernacht",
        "midnight": "Middernacht",
        "aftermidnight": "Na Middernacht",
        "latenight": "Late Nacht",
        "cockcrow": "Hanegekraai",
        "firstmorninglight": "Eerste Ochtendlicht",
        "dawn": "Dageraad",
        "breakingdawn": "Ochtendgloren",
        "earlymorning": "Vroege Ochtend",
        "morning": "Ochtend",
        "earlyforenoon": "Vroeg in de Voormiddag",
        "forenoon": "Voormiddag",
        "lateforenoon": "Late Voormiddag",
        "noon": "Middag",
        "earlyafternoon": "Vroege Namiddag",
        "afternoon": "Namiddag",
        "lateafternoon": "Late Namiddag",
        "firstdusk": "Eerste Schemering",
    },
    "pl": {
        "dusk": "Zmierzch",
        "earlyevening": "Wczesnym wieczorem",
        "evening": "Wieczór",
        "lateevening": "Późny wieczór",
        "earlynight": "Wczesna noc",
        "beforemidnight": "Przed północą",
        "midnight": "Północ",
        "aftermidnight": "Po północy",
        "latenight": "Późna noc",
        "cockcrow": "Pianie koguta",
        "firstmorninglight": "Pierwsze światło poranne",
        "dawn": "Świt",
        "breakingdawn": "Łamanie świtu",
        "earlymorning": "Wcześnie rano",
        "morning": "Ranek",
        "earlyforenoon": "Wczesne przedpołudnie",
        "forenoon": "Przedpołudnie",
        "lateforenoon": "Późne przedpołudnie",
        "noon": "Południe",
        "earlyafternoon": "Wczesne popołudnie",
        "afternoon": "Popołudnie",
        "lateafternoon": "Późne popołudnie",
        "firstdusk": "Pierwszy zmierzch",
    },
}

# Keys of the four seasons double as the "winter" phenological stage.
SEASON_LABELS: Dict[str, Dict[str, str]] = {
    "en": {"winter": "Winter", "spring": "Spring", "summer": "Summer", "fall": "Fall"},
    "de": {"winter": "Winter", "spring": "Frühling", "summer": "Sommer", "fall": "Herbst"},
    "es": {"winter": "Invierno", "spring": "Primavera", "summer": "Verano", "fall": "Otoño"},
    "fr": {"winter": "Hiver", "spring": "Printemps", "summer": "Été", "fall": "Automne"},
    "it": {"winter": "Inverno", "spring": "Primavera", "summer": "Estate", "fall": "Autunno"},
    "nl": {"winter": "Winter", "spring": "Lente", "summer": "Zomer", "fall": "Herfst"},
    "pl": {"winter": "Zima", "spring": "Wiosna", "summer": "Lato", "fall": "Jesień"},
}

PHENO_LABELS: Dict[str, Dict[str, str]] = {
    "en": {
        "earlyspring": "Early Spring",
        "firstspring": "First Spring",
        "fullspring": "Full Spring",
        "earlysummer": "Early Summer",
        "midsummer": "Midsummer",
        "latesummer": "Late Summer",
        "earlyfall": "Early Fall",
        "fullfall": "Full Fall",
        "latefall": "Late Fall",
    },
    "de": {
        "earlyspring": "Vorfrühling",
        "firstspring": "Erstfrühling",
        "fullspring": "Vollfrühling",
        "earlysummer": "Frühsommer",
        "midsummer": "Hochsommer",
        "latesummer": "Spätsommer",
        "earlyfall": "Frühherbst",
        "fullfall": "Vollherbst",
        "latefall": "Spätherbst",
    },
    "es": {
        "earlyspring": "Inicio de la primavera",
        "firstspring": "Primera primavera",
        "fullspring": "Primavera completa",
        "earlysummer": "Comienzo del verano",
        "midsummer": "Pleno verano",
        "latesummer": "Final del verano",
        "earlyfall": "Inicio del otoño",
        "fullfall": "Otoño completo",
        "latefall": "Finales de otoño",
    },
    "fr": {
        "earlyspring": "Avant du printemps",
        "firstspring": "Début du printemps",
        "fullspring": "Printemps",
        "earlysummer": "Avant de l'été",
        "midsummer": "Milieu de l'été",
        "latesummer": "Fin de l'été",
        "earlyfall": "Avant de l'automne",
        "fullfall": "Automne",
        "latefall": "Fin de l'automne",
    },
    "it": {
        "earlyspring": "Inizio primavera",
        "firstspring": "Prima primavera",
        "fullspring": "Piena primavera",
        "earlysummer": "Inizio estate",
        "midsummer": "Mezza estate",
        "latesummer": "Estate inoltrata",
        "earlyfall": "Inizio autunno",
        "fullfall": "Pieno autunno",
        "latefall": "Tardo autunno",
    },
    "nl": {
        "earlyspring": "Vroeg Voorjaar",
        "firstspring": "Eerste Voorjaar",
        "fullspring": "Voorjaar",
        "earlysummer": "Vroeg Zomer",
        "midsummer": "Zomer",
        "latesummer": "Laat Zomer",
        "earlyfall": "Vroeg Herfst",
        "fullfall": "Herfst",
        "latefall": "Laat Herfst",
    },
    "pl": {
        "earlyspring": "Wczesna wiosna",
        "firstspring": "Pierwsza wiosna",
        "fullspring": "Pełna wiosna",
        "earlysummer": "Wczesne lato",
        "midsummer": "Połowa lata",
        "latesummer": "Późne lato",
        "earlyfall": "Wczesna jesień",
        "fullfall": "Pełna jesień",
        "latefall": "Późna jesień",
    },
}

DAY_TYPE_LABELS: Dict[str, Dict[str, str]] = {
    "en": {"weekend": "Weekend", "workday": "Workday"},
    "de": {"weekend": "Wochenende", "workday": "Arbeitstag"},
    "es": {"weekend": "Fin de semana", "workday": "Trabajo"},
    "fr": {"weekend": "Fin de semaine", "workday": "Ouvrable"},
    "it": {"weekend": "Fine settimana", "workday": "Lavorativo"},
    "nl": {"weekend": "Weekend", "workday": "Werkdag"},
    "pl": {"weekend": "Weekend", "workday": "Pracy"},
}

INFORMATIVE_DAY_LABELS: Dict[str, Dict[str, str]] = {
    "en": {
        "valentinesday": "Valentines Day",
        "ashwednesday": "Ash Wednesday",
        "walpurgisnight": "Walpurgis Night",
        "mothersday": "Mothers Day",
        "fathersday": "Fathers Day",
        "pentecostsun": "Pentecost Sunday",
        "pentecostmon": "Pentecost Monday",
        "harvestfestival": "Harvest Festival",
        "allsoulsday": "All Souls' Day",
        "martinising": "St. Martin singing",
        "martinmas": "St. Martin's Day",
        "dayofprayerandrepentance": "Day of Prayer and Repentance",
        "remembranceday": "Remembrance Day",
        "lastsundaybeforeadvent": "Last Sunday before Advent",
        "stnicholasday": "St. Nicholas' Day",
        "biblicalmagi": "Biblical Magi",
        "internationalwomensday": "International Womens Day",
        "stpatricksday": "St. Patrick's Day",
        "laborday": "Labor Day",
        "liberationday": "Liberation Day",
        "ascension": "Ascension",
        "corpuschristi": "Corpus Christi",
        "assumptionday": "Assumption Day",
        "worldchildrensday": "World Children's Day",
        "germanunificationday": "German Unification Day",
        "reformationday": "Reformation Day",
        "allsaintsday": "All Saints Day",
    },
    "de": {
        "valentinesday": "Valentinstag",
        "ashwednesday": "Aschermittwoch",
        "walpurgisnight": "Walpurgisnacht",
        "mothersday": "Muttertag",
        "fathersday": "Vatertag",
        "pentecostsun": "Pfingstsonntag",
        "pentecostmon": "Pfingstmontag",
        "harvestfestival": "Erntedankfest",
        "allsoulsday": "Allerseelen",
        "martinising": "Martinisingen",
        "martinmas": "Martinstag",
        "dayofprayerandrepentance": "Buß- und Bettag",
        "remembranceday": "Volkstrauertag",
        "lastsundaybeforeadvent": "Totensonntag",
        "stnicholasday": "Nikolaus",
        "biblicalmagi": "Heilige Drei Könige",
        "internationalwomensday": "Internationaler Frauentag",
        "stpatricksday": "St. Patrick's Day",
        "laborday": "Tag der Arbeit",
        "liberationday": "Tag der Befreiung",
        "ascension": "Christi Himmelfahrt",
        "corpuschristi": "Fronleichnam",
        "assumptionday": "Mariä Himmelfahrt",
        "worldchildrensday": "Weltkindertag",
        "germanunificationday": "Tag der Deutschen Einheit",
        "reformationday": "Reformationstag",
        "allsaintsday": "Allerheiligen",
    },
}

ANNUAL_EVENT_LABELS: Dict[str, Dict[str, str]] = {
    "en": {
        "newyearseve": "New Year's Eve",
        "newyear": "New Year",
        "turnoftheyear": "Turn of the year",
        "carnivalseason1": "Women's Carnival Day",
        "carnivalseason2": "Carnival Friday",
        "carnivalseason3": "Carnival Saturday",
        "carnivalseason4": "Carnival Sunday",
        "carnivalseason5": "Carnival Monday",
        "carnivalseason6": "Carnival Tuesday",
        "carnivalseason": "Carnival",
        "faschingseason1": "Women's Carnival Day",
        "faschingseason2": "Carnival Friday",
        "faschingseason3": "Carnival Saturday",
        "faschingseason4": "Carnival Sunday",
        "faschingseason5": "Carnival Monday",
        "faschingseason6": "Carnival Tuesday",
        "faschingseason": "Fasching",
        "lentseason": "Lent",
        "lentbegin": "Beginning of Lent",
        "lentw1": "Lent Week 1",
        "lentw2": "Lent Week 2",
        "lentw3": "Lent Week 3",
        "lentw4": "Lent Week 4",
        "lentw5": "Lent Week 5",
        "lentw6": "Lent Week 6",
        "lentw7": "Great Lent Week",
        "lentsun1": "1st Lent Sunday",
        "lentsun2": "2nd Lent Sunday",
        "lentsun3": "3rd Lent Sunday",
        "lentsun4": "4th Lent Sunday",
        "lentsun5": "5th Lent Sunday",
        "lentsun6": "6th Lent Sunday",
        "lentend": "End of Lent",
        "sbeerseasonbegin": "Beginning of Strong Beer Festival",
        "sbeerseason": "Strong Beer Festival",
        "holyweekpalm": "Palm and Passion Sunday",
        "holyweekthu": "Maundy Thursday",
        "holyweekfri": "Good Friday",
        "holyweeksat": "Holy Saturday",
        "holyweek": "Holy Week",
        "eastersun": "Easter Sunday",
        "eastermon": "Easter Monday",
        "eastersat": "Easter Saturday",
        "easterwhitesun": "White Sunday",
        "easterseason": "Easter",
        "oktoberfestbegin": "Beginning of Oktoberfest",
        "oktoberfestseason": "Oktoberfest",
        "halloweenbegin": "Beginning of Halloween Period",
        "halloween": "Halloween",
        "halloweenseason": "Halloween",
        "advent1": "1st Advent",
        "advent2": "2nd Advent",
        "advent3": "3rd Advent",
        "advent4": "4th Advent",
        "adventseason": "Advent",
        "christmaseve": "Christmas Eve",
        "christmas1": "Christmas Day",
        "christmas2": "Day after Christmas",
        "christmasseason": "Christmas",
    },
    "de": {
        "newyearseve": "Silvester",
        "newyear": "Neujahr",
        "turnoftheyear": "Jahreswechsel",
        "carnivalseason1": "Weiberfastnacht",
        "carnivalseason2": "Rußiger Freitag",
        "carnivalseason3": "Nelkensamstag",
        "carnivalseason4": "Tulpensonntag",
        "carnivalseason5": "Rosenmontag",
        "carnivalseason6": "Veilchendienstag",
        "carnivalseason": "Karnevalszeit",
        "faschingseason1": "Weiberfastnacht",
        "faschingseason2": "Rußiger Freitag",
        "faschingseason3": "Faschingssamstag",
        "faschingseason4": "Faschingssonntag",
        "faschingseason5": "Rosenmontag",
        "faschingseason6": "Fastnacht",
        "faschingseason": "Faschingszeit",
        "lentseason": "Fastenzeit",
        "lentbegin": "Beginn der Fastenzeit",
        "lentw1": "Fastenwoche 1",
        "lentw2": "Fastenwoche 2",
        "lentw3": "Fastenwoche 3",
        "lentw4": "Fastenwoche 4",
        "lentw5": "Fastenwoche 5",
        "lentw6": "Fastenwoche 6",
        "lentw7": "Große Fastenwoche",
        "lentsun1": "1. Fastensonntag",
        "lentsun2": "2. Fastensonntag",
        "lentsun3": "3. Fastensonntag",
        "lentsun4": "4. Fastensonntag",
        "lentsun5": "5. Fastensonntag",
        "lentsun6": "6. Fastensonntag",
        "lentend": "Ende der Fastenzeit",
        "sbeerseasonbegin": "Beginn des Starkbierfests",
        "sbeerseason": "Starkbierfest",
        "holyweekpalm": "Palm- und Passionssonntag",
        "holyweekthu": "Gründonnerstag",
        "holyweekfri": "Karfreitag",
        "holyweeksat": "Karsamstag",
        "holyweek": "Karwoche",
        "eastersun": "Ostersonntag",
        "eastermon": "Ostermontag",
        "eastersat": "Ostersamstag",
        "easterwhitesun": "Weißer Sonntag",
        "easterseason": "Osterzeit",
        "oktoberfestbegin": "Beginn des Oktoberfests",
        "oktoberfestseason": "Oktoberfestzeit",
        "halloweenbegin": "Beginn der Halloweenzeit",
        "halloween": "Halloween",
        "halloweenseason": "Halloweenzeit",
        "advent1": "1. Advent",
        "advent2": "2. Advent",
        "advent3": "3. Advent",
        "advent4": "4. Advent",
        "adventseason": "Adventszeit",
        "christmaseve": "Heiligabend",
        "christmas1": "1. Weihnachtstag",
        "christmas2": "2. Weihnachtstag",
        "christmasseason": "Weihnachtszeit",
    },
}

TABLES = (
    DAY_PHASE_LABELS,
    SEASON_LABELS,
    PHENO_LABELS,
    DAY_TYPE_LABELS,
    INFORMATIVE_DAY_LABELS,
    ANNUAL_EVENT_LABELS,
)
