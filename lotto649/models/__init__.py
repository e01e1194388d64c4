"""In-memory domain records."""

from lotto649.models.draw import MAX_NUMBER, MIN_NUMBER, PICK_COUNT, Draw
from lotto649.models.frequency import FrequencyEntry, FrequencySummary
from lotto649.models.prediction import PredictionRecord

__all__ = [
    "Draw",
    "FrequencyEntry",
    "FrequencySummary",
    "MAX_NUMBER",
    "MIN_NUMBER",
    "PICK_COUNT",
    "PredictionRecord",
]
