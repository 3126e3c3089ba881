"""Dashboard state: user selection, cached live data and prediction result.

Each asynchronous operation (the live-data fetch and the prediction) walks
``idle -> pending -> success | failed`` and re-enters ``pending`` on every
trigger. Triggers are stamped with a generation number; a result is applied
only if no newer trigger of the same operation happened while it was in
flight.
"""
from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from dataclasses import dataclass, field, replace
from typing import Literal

from ..core.catalog import Station, StationCatalog
from ..core.chart import ChartPoint, chart_data
from ..core.conditions import Day, WeatherCondition, is_valid_hour
from ..core.realtime import LiveStationDatum
from ..errors import BikecastError
from ..services.prediction_service import PredictionGateway
from ..services.realtime_service import fetch_realtime_data

logger = logging.getLogger(__name__)

OperationStatus = Literal["idle", "pending", "success", "failed"]
RealtimeFetcher = Callable[[], dict[str, LiveStationDatum]]

REALTIME_ERROR_MESSAGE = "Could not load live station data."
PREDICTION_ERROR_MESSAGE = "Failed to get a prediction. Please try again."


@dataclass(frozen=True)
class OperationState:
    status: OperationStatus = "idle"
    error: str | None = None
    generation: int = 0

    @property
    def is_loading(self) -> bool:
        return self.status == "pending"


@dataclass(frozen=True)
class Selection:
    station_id: int
    day: Day = Day.MONDAY
    weather: WeatherCondition = WeatherCondition.CLEAR
    hour: int = 12


@dataclass(frozen=True)
class PredictionOutcome:
    """What one prediction request produced, whether or not it is displayed.

    ``applied`` is false when a newer request was triggered while this one
    was in flight.
    """

    state: OperationState
    selection: Selection
    predicted_bikes: int | None = None
    applied: bool = False


@dataclass(frozen=True)
class DashboardView:
    selection: Selection
    station: Station
    chart: list[ChartPoint]
    live_datum: LiveStationDatum | None
    realtime: OperationState
    prediction: OperationState
    predicted_bikes: int | None = None
    live_station_count: int = 0


@dataclass
class _DashboardState:
    selection: Selection
    realtime: OperationState = field(default_factory=OperationState)
    live_data: dict[str, LiveStationDatum] | None = None
    prediction: OperationState = field(default_factory=OperationState)
    predicted_bikes: int | None = None


class DashboardController:
    def __init__(
        self,
        catalog: StationCatalog,
        prediction_gateway: PredictionGateway,
        fetch_realtime: RealtimeFetcher = fetch_realtime_data,
    ) -> None:
        self.catalog = catalog
        self._gateway = prediction_gateway
        self._fetch_realtime = fetch_realtime
        self._lock = threading.Lock()
        self._state = _DashboardState(selection=Selection(station_id=catalog.default.id))

    @property
    def selection(self) -> Selection:
        with self._lock:
            return self._state.selection

    @property
    def realtime_state(self) -> OperationState:
        with self._lock:
            return self._state.realtime

    @property
    def prediction_state(self) -> OperationState:
        with self._lock:
            return self._state.prediction

    @property
    def predicted_bikes(self) -> int | None:
        with self._lock:
            return self._state.predicted_bikes

    def live_data(self) -> dict[str, LiveStationDatum]:
        with self._lock:
            return dict(self._state.live_data or {})

    def select(
        self,
        station_id: int | None = None,
        day: Day | None = None,
        weather: WeatherCondition | None = None,
        hour: int | None = None,
    ) -> Selection:
        if station_id is not None:
            self.catalog.get(station_id)
        if hour is not None and not is_valid_hour(hour):
            raise ValueError(f"hour must be between 0 and 23, got {hour}")
        changes = {
            key: value
            for key, value in (
                ("station_id", station_id),
                ("day", day),
                ("weather", weather),
                ("hour", hour),
            )
            if value is not None
        }
        with self._lock:
            self._state.selection = replace(self._state.selection, **changes)
            return self._state.selection

    def selected_station(self) -> Station:
        return self.catalog.get(self.selection.station_id)

    def live_datum_for(self, station: Station) -> LiveStationDatum | None:
        with self._lock:
            if self._state.live_data is None:
                return None
            return self._state.live_data.get(station.api_id)

    def chart_data(self, day: Day | None = None) -> list[ChartPoint]:
        selection = self.selection
        station = self.catalog.get(selection.station_id)
        return chart_data(station, day or selection.day)

    def load_realtime(self) -> OperationState:
        with self._lock:
            generation = self._state.realtime.generation + 1
            self._state.realtime = OperationState(status="pending", generation=generation)
        logger.info("Loading live station data (generation %d)", generation)

        try:
            data = self._fetch_realtime()
        except BikecastError as exc:
            logger.error("Live station data failed: %s", exc)
            return self._finish_realtime(generation, None, REALTIME_ERROR_MESSAGE)
        except Exception:
            logger.exception("Live station data failed unexpectedly")
            return self._finish_realtime(generation, None, REALTIME_ERROR_MESSAGE)
        return self._finish_realtime(generation, data, None)

    def _finish_realtime(
        self,
        generation: int,
        data: dict[str, LiveStationDatum] | None,
        error: str | None,
    ) -> OperationState:
        with self._lock:
            if self._state.realtime.generation != generation:
                logger.debug("Dropping stale live data result (generation %d)", generation)
                return self._state.realtime
            if error is None:
                self._state.live_data = data
                self._state.realtime = OperationState("success", None, generation)
                logger.info("Loaded live data for %d stations", len(data or {}))
            else:
                self._state.realtime = OperationState("failed", error, generation)
            return self._state.realtime

    def predict(self) -> PredictionOutcome:
        with self._lock:
            generation = self._state.prediction.generation + 1
            self._state.prediction = OperationState(status="pending", generation=generation)
            self._state.predicted_bikes = None
            selection = self._state.selection
        station = self.catalog.get(selection.station_id)
        live_datum = self.live_datum_for(station)
        logger.info(
            "Predicting %s on %s at %d:00 (%s), generation %d",
            station.name,
            selection.day.value,
            selection.hour,
            selection.weather.value,
            generation,
        )

        try:
            result = self._gateway.predict(
                station, selection.day, selection.hour, selection.weather, live_datum
            )
        except BikecastError as exc:
            logger.error("Prediction failed: %s", exc)
            return self._finish_prediction(
                generation, selection, None, PREDICTION_ERROR_MESSAGE
            )
        except Exception:
            logger.exception("Prediction failed unexpectedly")
            return self._finish_prediction(
                generation, selection, None, PREDICTION_ERROR_MESSAGE
            )
        return self._finish_prediction(generation, selection, result, None)

    def _finish_prediction(
        self,
        generation: int,
        selection: Selection,
        result: int | None,
        error: str | None,
    ) -> PredictionOutcome:
        if error is None:
            state = OperationState("success", None, generation)
        else:
            state = OperationState("failed", error, generation)
        outcome = PredictionOutcome(
            state=state, selection=selection, predicted_bikes=result, applied=False
        )
        with self._lock:
            if self._state.prediction.generation != generation:
                logger.debug("Dropping stale prediction (generation %d)", generation)
                return outcome
            self._state.predicted_bikes = result
            self._state.prediction = state
        return replace(outcome, applied=True)

    def view(self) -> DashboardView:
        with self._lock:
            selection = self._state.selection
            realtime = self._state.realtime
            prediction = self._state.prediction
            predicted_bikes = self._state.predicted_bikes
            live_data = self._state.live_data or {}
        station = self.catalog.get(selection.station_id)
        return DashboardView(
            selection=selection,
            station=station,
            chart=chart_data(station, selection.day),
            live_datum=live_data.get(station.api_id),
            realtime=realtime,
            prediction=prediction,
            predicted_bikes=predicted_bikes,
            live_station_count=len(live_data),
        )
