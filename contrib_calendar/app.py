"""
FastAPI web application for contrib-calendar.

Serves the contribution widget page and JSON endpoints for the profile,
calendar and streak data.
"""

import random
from contextlib import asynccontextmanager
from datetime import date
from pathlib import Path
from typing import Optional

from fastapi import FastAPI, HTTPException, Query, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates
from pydantic import BaseModel, Field

from contrib_calendar import config
from contrib_calendar.activity_generator import RandomActivityProvider, generate_activity
from contrib_calendar.calendar_builder import build_calendar
from contrib_calendar.config import configure_logging, validate_config
from contrib_calendar.github_client import GitHubClient, GitHubClientError, fetch_profile
from contrib_calendar.presenter import (
    PALETTE,
    calendar_to_dict,
    cell_color,
    format_error,
    load_page_state,
    profile_to_dict,
    stats_to_dict,
)
from contrib_calendar.streak_calculator import calculate_summary


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Configure logging when the server starts."""
    configure_logging()
    yield


app = FastAPI(
    title="contrib-calendar",
    description="GitHub profile card with a contribution calendar",
    version="0.1.0",
    lifespan=lifespan,
)

templates = Jinja2Templates(directory=Path(__file__).parent / "templates")


class CellOut(BaseModel):
    """Calendar square; all fields are null for placeholder cells."""

    date: Optional[str] = Field(None, description="ISO calendar date")
    count: Optional[int] = Field(None, ge=0)
    level: Optional[int] = Field(None, ge=0, le=4)
    color: Optional[str] = None


class CalendarOut(BaseModel):
    """Week columns, each 7 cells from Sunday to Saturday."""

    start: date
    weeks: list[list[CellOut]]


class StatsOut(BaseModel):
    total: int
    longest_streak: int
    current_streak: int
    daily_average: float


class ProfileOut(BaseModel):
    login: str
    display_name: str
    avatar_url: str
    bio: str
    public_repos: int
    followers: int
    following: int
    public_gists: int


class ActivityResponse(BaseModel):
    calendar: CalendarOut
    stats: StatsOut


class ProfileResponse(ActivityResponse):
    profile: ProfileOut


def _check_config():
    try:
        validate_config()
    except ValueError as e:
        raise HTTPException(status_code=500, detail=f"Configuration error: {e}")


def _activity_payload(today: date, seed: Optional[int] = None) -> dict:
    rng = random.Random(seed) if seed is not None else None
    dataset = generate_activity(today=today, provider=RandomActivityProvider(rng))
    return {
        "calendar": calendar_to_dict(build_calendar(dataset)),
        "stats": stats_to_dict(calculate_summary(dataset, today=today)),
    }


@app.get("/health")
def health_check():
    """Health check endpoint."""
    return {"status": "ok"}


@app.get("/", response_class=HTMLResponse)
def index(request: Request, username: Optional[str] = None):
    """
    Render the widget page.

    Without a username parameter the page loads the demo profile. A blank
    submitted username renders the empty form.
    """
    _check_config()

    if username is None:
        username = config.DEFAULT_USERNAME

    state = load_page_state(username, client=GitHubClient())

    return templates.TemplateResponse(
        request,
        "index.html",
        {
            "state": state,
            "palette": PALETTE,
            "cell_color": cell_color,
        },
    )


@app.get("/api/profile/{username}", response_model=ProfileResponse)
def get_profile(username: str):
    """
    Get profile info plus a generated contribution calendar.

    Returns:
        JSON with profile, calendar and stats
    """
    _check_config()

    username = username.strip()
    if not username:
        raise HTTPException(status_code=400, detail="username cannot be empty")

    try:
        profile = fetch_profile(username, client=GitHubClient())
    except GitHubClientError as e:
        raise HTTPException(status_code=502, detail=format_error(str(e)))

    payload = _activity_payload(date.today())
    payload["profile"] = profile_to_dict(profile)
    return payload


@app.get("/api/activity", response_model=ActivityResponse)
def get_activity(
    today: Optional[date] = Query(None, description="Last day of the window"),
    seed: Optional[int] = Query(None, description="Seed for reproducible data"),
):
    """
    Get a generated contribution calendar without a profile lookup.

    Returns:
        JSON with calendar and stats for the year ending on today
    """
    return _activity_payload(today or date.today(), seed=seed)
