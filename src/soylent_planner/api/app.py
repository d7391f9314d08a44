"""FastAPI application factory."""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from soylent_planner.api.models import (
    MacrosIn,
    MacrosResponse,
    PlanResponse,
    ProfileIn,
    RecipeResponse,
    infeasible_out,
    macros_out,
    recipe_out,
)
from soylent_planner.app_logging import configure_logging
from soylent_planner.containers import AppContainer
from soylent_planner.domain.feasibility import check_macros
from soylent_planner.domain.profile import InvalidProfileError


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)
    logger = logging.getLogger(__name__)

    app = FastAPI()
    app.state.container = container

    @app.exception_handler(InvalidProfileError)
    async def invalid_profile(
        request: Request, exc: InvalidProfileError
    ) -> JSONResponse:
        logger.info("Rejected profile: %s", exc)
        return JSONResponse(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            content={"detail": str(exc), "field": exc.field},
        )

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.post("/macros")
    async def macros(payload: ProfileIn, request: Request) -> MacrosResponse:
        """Return daily macro targets for a profile."""
        state_container: AppContainer = request.app.state.container
        result = state_container.macro_calculator.calculate_macros(
            payload.to_profile()
        )
        infeasible = check_macros(result)
        return MacrosResponse(
            macros=macros_out(result),
            feasible=not infeasible,
            infeasible=infeasible_out(infeasible),
        )

    @app.post("/recipe")
    async def recipe(payload: MacrosIn, request: Request) -> RecipeResponse:
        """Return the recipe for caller-supplied macro targets."""
        state_container: AppContainer = request.app.state.container
        result, infeasible = state_container.plan_service.recipe_for(
            payload.to_macros()
        )
        return RecipeResponse(
            recipe=recipe_out(result),
            feasible=not infeasible,
            infeasible=infeasible_out(infeasible),
        )

    @app.post("/plan")
    async def plan(payload: ProfileIn, request: Request) -> PlanResponse:
        """Return macro targets and recipe for a profile."""
        state_container: AppContainer = request.app.state.container
        result = state_container.plan_service.plan(payload.to_profile())
        return PlanResponse(
            macros=macros_out(result.macros),
            recipe=recipe_out(result.recipe) if result.recipe is not None else None,
            feasible=result.feasible,
            infeasible=infeasible_out(result.infeasible),
        )

    return app
