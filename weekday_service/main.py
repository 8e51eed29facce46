from fastapi import FastAPI, Query, Request
from fastapi.responses import JSONResponse
from fastapi_cache.decorator import cache
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from weekday_service.cache import init_cache
from weekday_service.config import APP_TITLE, CACHE_EXPIRE, LOG_DIR, REDIS_URL
from weekday_service.counter import count_weekday, weekday_breakdown
from weekday_service.dates import DATE_FORMAT, Weekday, parse_range
from weekday_service.exceptions import (
    DateParseError,
    InvalidWeekdayError,
    ObfuscationError,
    OrdinalError,
)
from weekday_service.logger import Logger
from weekday_service.obfuscation import obfuscate
from weekday_service.ordinals import natural_ordinal, ordinal
from weekday_service.schemas import (
    ObfuscateRequest,
    ObfuscateResponse,
    OrdinalResponse,
    WeekdayBreakdownResponse,
    WeekdayCountResponse,
)

Logger.setup_logger(LOG_DIR)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """
    Lifespan context manager for FastAPI.

    - Initializes response caching (Redis when REDIS_URL is set, in-memory otherwise).
    - Clears any existing cache on startup.
    - Closes the Redis connection on shutdown.
    """
    redis = await init_cache(REDIS_URL)
    Logger.signal.info(
        f"Cache initialised with {'redis' if redis is not None else 'in-memory'} backend"
    )

    yield

    if redis is not None:
        await redis.close()
    Logger.signal.info("Shutdown completed")


app = FastAPI(title=APP_TITLE, lifespan=lifespan)


@app.exception_handler(DateParseError)
@app.exception_handler(InvalidWeekdayError)
@app.exception_handler(OrdinalError)
async def invalid_input_handler(request: Request, exc: Exception):
    Logger.response.warning(f"Rejected input on {request.url.path}: {exc}")
    return JSONResponse(status_code=422, content={"message": str(exc)})


@app.exception_handler(Exception)
async def unexpected_error_handler(request: Request, exc: Exception):
    Logger.response.error(
        f"Unexpected error in {request.url.path}: {exc}", exc_info=exc
    )
    return JSONResponse(
        status_code=500,
        content={"message": "An unexpected error occurred while processing the request."},
    )


@app.get("/")
async def homepage():
    """
    A home page route
    """
    return {"message": f"Welcome to {APP_TITLE}"}


@app.get("/weekday-count", response_model=WeekdayCountResponse)
@cache(expire=CACHE_EXPIRE)
async def weekday_count(
    start_date: str = Query(..., description="Range start, DD-MM-YYYY."),
    end_date: str = Query(..., description="Range end (inclusive), DD-MM-YYYY."),
    weekday: str = Query(..., description="Weekday to count, e.g. Sun or Sunday."),
):
    """
    Counts how many times a weekday occurs between two dates, both included.

    The range is measured by day-of-year, so it has to lie within one calendar
    year; a range whose end comes before its start counts zero.

    Args:
        start_date (str): Start of the range in DD-MM-YYYY format.
        end_date (str): End of the range in DD-MM-YYYY format.
        weekday (str): Full or three-letter weekday name.

    Returns:
        dict: The echoed range, the normalised weekday name and the count.
    """
    Logger.request.info(f"Counting {weekday} between {start_date} and {end_date}")
    date_range = parse_range(start_date, end_date, DATE_FORMAT)
    target = Weekday.parse(weekday)
    count = count_weekday(date_range, target)

    Logger.response.info(
        f"{target.short_name} occurs {count} times between {start_date} and {end_date}"
    )
    return {
        "start_date": start_date,
        "end_date": end_date,
        "weekday": target.short_name,
        "count": count,
    }


@app.get("/weekday-breakdown", response_model=WeekdayBreakdownResponse)
@cache(expire=CACHE_EXPIRE)
async def weekday_breakdown_endpoint(
    start_date: str = Query(..., description="Range start, DD-MM-YYYY."),
    end_date: str = Query(..., description="Range end (inclusive), DD-MM-YYYY."),
):
    """
    Returns the occurrence count of every weekday between two dates, Monday first.
    """
    Logger.request.info(f"Weekday breakdown between {start_date} and {end_date}")
    date_range = parse_range(start_date, end_date, DATE_FORMAT)
    counts = weekday_breakdown(date_range)

    return {
        "start_date": start_date,
        "end_date": end_date,
        "counts": [
            {"weekday": day.short_name, "count": count} for day, count in counts.items()
        ],
        "total_days": sum(counts.values()),
    }


@app.get("/ordinal/{number}", response_model=OrdinalResponse)
@cache(expire=CACHE_EXPIRE)
async def ordinal_endpoint(
    number: int,
    strict: bool = Query(False, description="Reject numbers lower than 1."),
):
    """
    Formats a number as an ordinal, e.g. 1 -> 1st, 12 -> 12th, 22 -> 22nd.

    In strict mode only natural numbers are accepted; otherwise 0 and
    negative numbers are formatted too (0th, -1st).
    """
    Logger.request.info(f"Ordinal for {number} (strict={strict})")
    text = natural_ordinal(number) if strict else ordinal(number)
    return {"number": number, "ordinal": text}


@app.post("/obfuscate", response_model=ObfuscateResponse)
async def obfuscate_endpoint(payload: ObfuscateRequest):
    """
    Obfuscates an email address or a phone number.

    Args:
        payload (ObfuscateRequest): The value to hide.

    Returns:
        JSONResponse or dict: The obfuscated value or an error message.
    """
    # the raw value is personal data and is never logged
    Logger.request.info("Obfuscation requested")
    try:
        return {"obfuscated": obfuscate(payload.value)}

    except ObfuscationError as e:
        Logger.response.warning(str(e))
        return JSONResponse(status_code=400, content={"message": str(e)})

    except Exception as e:
        Logger.response.error(f"Unexpected error in /obfuscate: {e}", exc_info=True)
        return JSONResponse(
            status_code=500,
            content={"message": "An unexpected error occurred while obfuscating the value."},
        )
