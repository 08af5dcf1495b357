from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, cast

from fastapi import Body, Depends, FastAPI, Request
from fastapi.responses import HTMLResponse, ORJSONResponse

from adapters.html.day_page import DayPageRenderer
from app.config import AppSettings, load_settings
from app.day_wiring import build_axis, build_layout_engine, render_day_page
from domain.ports.layout import DayLayoutEngine

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DayContext:
    settings: AppSettings
    engine: DayLayoutEngine
    renderer: DayPageRenderer


def create_app(settings: AppSettings) -> FastAPI:
    app = FastAPI(title=settings.calendar.title)
    app.state.context = DayContext(
        settings=settings,
        engine=build_layout_engine(settings),
        renderer=DayPageRenderer(),
    )

    @app.get("/health")
    def health() -> ORJSONResponse:
        return ORJSONResponse({"status": "ok"})

    @app.get("/", response_class=HTMLResponse)
    def day_view(context: DayContext = Depends(get_context)) -> HTMLResponse:
        _, html = render_day_page(
            context.settings, context.settings.calendar.sample_events, context.renderer
        )
        return HTMLResponse(html)

    @app.post("/render", response_class=HTMLResponse)
    def render_view(
        records: list[Any] = Body(...),
        context: DayContext = Depends(get_context),
    ) -> HTMLResponse:
        plan, html = render_day_page(context.settings, records, context.renderer)
        logger.info("Rendered %d event(s), dropped %d.", len(plan.records), plan.dropped)
        return HTMLResponse(html)

    @app.post("/api/layout")
    def api_layout(
        records: list[Any] = Body(...),
        context: DayContext = Depends(get_context),
    ) -> ORJSONResponse:
        plan = context.engine.build_plan(records)
        logger.info(
            "Laid out %d event(s) in %d group(s), dropped %d.",
            len(plan.records),
            len(plan.groups),
            plan.dropped,
        )
        return ORJSONResponse(plan.to_dict())

    @app.get("/api/axis")
    def api_axis(context: DayContext = Depends(get_context)) -> ORJSONResponse:
        labels = build_axis(context.settings)
        return ORJSONResponse(
            {
                "labels": [
                    {
                        "minute": label.minute,
                        "clock": label.clock,
                        "period": label.period,
                        "is_full_hour": label.is_full_hour,
                    }
                    for label in labels
                ]
            }
        )

    return app


def get_context(request: Request) -> DayContext:
    return cast(DayContext, request.app.state.context)


app = create_app(load_settings())
