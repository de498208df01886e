import logging
import os
from datetime import datetime, timedelta

from fastapi import FastAPI, HTTPException, Query

from praytimes import METHODS, TIME_NAMES, TimeFormat
from praytimes.config import load_config

logging.basicConfig(level=os.environ.get("LOG_LEVEL", "INFO"))
log = logging.getLogger(__name__)

app = FastAPI(
    title="Prayer Times API",
    description="API service for calculating Islamic prayer times",
    version="1.0.0"
)

config = load_config()

# Diyanet (Turkey): MWL angles with its safety margins (temkin) in minutes
PROFILES = {
    "Turkey": ("MWL", {"sunrise": -7, "dhuhr": 5, "asr": 4, "maghrib": 7}),
}


@app.get("/")
def root():
    return {
        "service": "Prayer Times API",
        "status": "online",
        "endpoints": {
            "/api/timesForGPS": "Get prayer times for GPS coordinates",
            "/api/methods": "List calculation methods"
        }
    }


@app.get("/api/methods")
def methods():
    out = {key: preset.as_dict() for key, preset in METHODS.items()}
    for key, (base, offsets) in PROFILES.items():
        out[key] = {**METHODS[base].as_dict(), "tune": offsets}
    return out


def build_calculator(method: str, asr: str | None, high_lats: str | None):
    base, offsets = PROFILES.get(method, (method, {}))
    calc = config.build_calculator(base)
    if offsets:
        calc.tune(offsets)
    if asr:
        calc.adjust(asr=asr)
    if high_lats:
        calc.adjust(high_lats=high_lats)
    return calc


@app.get("/api/timesForGPS")
def get_times_for_gps(
    lat: float,
    lng: float,
    date: str,
    days: int = Query(1, ge=1, le=366),
    timezoneOffset: int = 0,  # Minutes east of UTC, e.g. 180
    elevation: float = 0.0,
    calculationMethod: str = config.method,
    asr: str | None = None,
    highLats: str | None = None,
    format: str | None = None,
):
    # Convert minutes to hours (e.g., 180 -> 3.0)
    offset_hours = timezoneOffset / 60.0
    try:
        start_date = datetime.strptime(date, "%Y-%m-%d")
        calc = build_calculator(calculationMethod, asr, highLats)
        fmt = TimeFormat(format) if format else calc.time_format
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e)) from e

    log.debug("times for (%s, %s) from %s, %d day(s), method %s", lat, lng, date, days, calc.method)

    response_times = {}
    for i in range(days):
        current_day = start_date + timedelta(days=i)
        date_key = current_day.strftime("%Y-%m-%d")
        try:
            times = calc.get_times(current_day.date(), (lat, lng, elevation), offset_hours, 0, fmt)
        except ValueError as e:
            raise HTTPException(status_code=400, detail=str(e)) from e
        response_times[date_key] = {name: times[name] for name in TIME_NAMES}

    return {
        "method": calc.method,
        "settings": calc.get_setting(),
        "times": response_times
    }
