from __future__ import annotations

from typing import Optional

from fastapi import FastAPI, HTTPException, Request

from .facade import TriviaAPI, UpstreamUnavailableError


def create_app(api: Optional[TriviaAPI] = None) -> FastAPI:
    app = FastAPI(title="Trivia API", version="0.1.0")
    app.state.trivia = api

    def facade() -> TriviaAPI:
        # Built on first use so importing the module never reads configuration.
        if app.state.trivia is None:
            app.state.trivia = TriviaAPI()
        return app.state.trivia

    @app.get("/api/trivia/question")
    def get_question() -> dict:
        try:
            return facade().question()
        except UpstreamUnavailableError as exc:
            raise HTTPException(status_code=502, detail=str(exc)) from exc

    @app.get("/api/trivia/clues")
    def list_clues(request: Request) -> list[dict]:
        try:
            return facade().clues(request.query_params)
        except ValueError as exc:
            raise HTTPException(status_code=400, detail=str(exc)) from exc

    @app.get("/api/trivia/categories")
    def list_categories(request: Request) -> list[dict]:
        try:
            return facade().categories(request.query_params)
        except ValueError as exc:
            raise HTTPException(status_code=400, detail=str(exc)) from exc

    @app.get("/api/trivia/categories/{category_id}")
    def get_category(category_id: int) -> dict:
        try:
            return facade().category(category_id)
        except ValueError as exc:
            raise HTTPException(status_code=400, detail=str(exc)) from exc
        except KeyError as exc:
            raise HTTPException(status_code=404, detail=f"Category '{category_id}' not found") from exc

    return app


app = create_app()
