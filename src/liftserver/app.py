from __future__ import annotations

import json
import logging
from typing import Dict, List, Optional, Tuple

from fastapi import FastAPI, HTTPException, WebSocket, WebSocketDisconnect
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field

from liftsched import DEFAULT_SCHEDULER, SCHEDULER_REGISTRY, RequestBatch
from liftsim import RequestCollector, Simulation, SimulationConfig, summarize, validate_request

logger = logging.getLogger(__name__)


class TripRequest(BaseModel):
    source: int
    destination: int


MAX_FLOOR_LIMIT = 200
MAX_REQUESTS_LIMIT = 50
MAX_CAPACITY_LIMIT = 50


class BuildingLimits(BaseModel):
    max_floor: int = Field(9, ge=2, le=MAX_FLOOR_LIMIT)
    max_requests: int = Field(3, ge=1, le=MAX_REQUESTS_LIMIT)
    max_capacity: int = Field(3, ge=1, le=MAX_CAPACITY_LIMIT)


class SimulateRequest(BaseModel):
    requests: List[TripRequest] = []
    policy: str = DEFAULT_SCHEDULER
    limits: Optional[BuildingLimits] = None


class SimulationService:
    def __init__(self, config: Optional[SimulationConfig] = None) -> None:
        self.config = config or SimulationConfig()

    def prepare(self, payload: SimulateRequest) -> Tuple[Simulation, RequestBatch]:
        """Validate the payload and build a ready-to-run simulation.

        Raises ``ValueError`` for bad limits, floors, policy names or an
        oversized batch.
        """
        config = self.config
        if payload.limits is not None:
            limits = payload.limits
            config = SimulationConfig(limits.max_floor, limits.max_requests, limits.max_capacity)
        simulation = Simulation(config, payload.policy)
        collector = RequestCollector(config)
        for trip in payload.requests:
            if collector.is_full:
                raise ValueError(f"At most {config.max_requests} requests are allowed")
            collector.add(validate_request(trip.source, trip.destination, config))
        return simulation, collector.finalize()

    def simulate(self, payload: SimulateRequest) -> dict:
        simulation, batch = self.prepare(payload)
        events = simulation.run_to_list(batch)
        return {
            "policy": simulation.scheduler_name,
            "config": simulation.config.to_dict(),
            "events": [event.to_dict() for event in events],
            "summary": summarize(events),
        }


service = SimulationService()
app = FastAPI(title="lifttrace Simulation API")
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/config")
async def get_config() -> Dict[str, int]:
    return service.config.to_dict()


@app.get("/policies")
async def get_policies() -> dict:
    return {"default": DEFAULT_SCHEDULER, "available": list(SCHEDULER_REGISTRY)}


@app.post("/simulate")
async def run_simulation(payload: SimulateRequest) -> dict:
    try:
        return service.simulate(payload)
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc))


@app.websocket("/ws/trace")
async def trace_stream(websocket: WebSocket) -> None:
    await websocket.accept()
    try:
        message = await websocket.receive_text()
        simulation, batch = service.prepare(SimulateRequest(**json.loads(message)))
    except WebSocketDisconnect:
        return
    except (ValueError, TypeError) as exc:
        # ValueError covers malformed JSON and pydantic validation errors
        await websocket.send_text(json.dumps({"error": str(exc)}))
        await websocket.close(code=1003)
        return

    try:
        for event in simulation.run(batch):
            await websocket.send_text(json.dumps(event.to_dict()))
    except WebSocketDisconnect:
        logger.info("trace client disconnected mid-stream")
        return
    await websocket.close()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("liftserver.app:app", host="0.0.0.0", port=8000, reload=False)
