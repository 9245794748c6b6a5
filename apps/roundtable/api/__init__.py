"""API router registration helpers.

Routers are imported lazily inside `register_routes` so importing a single
router module (tests, scripts) does not pull in every dataset provider.
"""

from fastapi import FastAPI


def register_routes(app: FastAPI) -> None:
    """Attach all API routers (lazy imports)."""
    from roundtable.api.companies import router as companies_router
    from roundtable.api.experiences import router as experiences_router
    from roundtable.api.practice import router as practice_router
    from roundtable.api.questions import router as questions_router
    from roundtable.api.solutions import router as solutions_router
    from roundtable.api.system import router as system_router

    routers = [
        system_router,
        questions_router,
        experiences_router,
        solutions_router,
        practice_router,
        companies_router,
    ]
    for router in routers:
        app.include_router(router)
