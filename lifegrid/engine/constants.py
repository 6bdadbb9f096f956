"""Timeline constants - Single Source of Truth.

Calendar Math, the Activity Normalizer and the Interval Allocator all import
their conversion factors from here.

Calendar-average factors are used instead of real leap-year arithmetic so
that lived/total ratios do not drift between granularities. The only
calendar-exact computation is the completed-birthday count of the years view.
"""

from lifegrid.engine.schemas.activity import RatePeriod
from lifegrid.engine.schemas.life_parameters import TimeGranularity

HOURS_PER_DAY = 24
DAYS_PER_WEEK = 7
DAYS_PER_YEAR = 365.25
MONTHS_PER_YEAR = 12
# Derived from DAYS_PER_YEAR so that every view agrees on the length of a year
WEEKS_PER_YEAR = DAYS_PER_YEAR / DAYS_PER_WEEK
DAYS_PER_MONTH = DAYS_PER_YEAR / MONTHS_PER_YEAR

# Lifespan bounds accepted at the input boundary
MIN_LIFESPAN_YEARS = 1
MAX_LIFESPAN_YEARS = 130

# Length of one unit, in days (years are counted as completed birthdays)
DAYS_PER_UNIT: dict[TimeGranularity, float] = {
    TimeGranularity.HOURS: 1 / HOURS_PER_DAY,
    TimeGranularity.DAYS: 1.0,
    TimeGranularity.WEEKS: float(DAYS_PER_WEEK),
    TimeGranularity.MONTHS: DAYS_PER_MONTH,
    TimeGranularity.YEARS: DAYS_PER_YEAR,
}

# Units in one year of lifespan; lived and total share DAYS_PER_UNIT
UNITS_PER_YEAR: dict[TimeGranularity, float] = {g: DAYS_PER_YEAR / days for g, days in DAYS_PER_UNIT.items()}

# Flat divisors turning a per-period rate into hours per day.
# Month is 30 days on purpose, not DAYS_PER_MONTH.
RATE_PERIOD_DAYS: dict[RatePeriod, int] = {
    RatePeriod.DAY: 1,
    RatePeriod.WEEK: 7,
    RatePeriod.MONTH: 30,
    RatePeriod.YEAR: 365,
}

# Allocator floating tolerance; residues below this are treated as zero
FILL_EPSILON = 1e-9
