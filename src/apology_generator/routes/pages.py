"""HTML pages: Home (generator form) and About."""

from pathlib import Path

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from apology_generator.config import GeneratorConfig
from apology_generator.dependencies import get_config

TEMPLATES_DIR = Path(__file__).resolve().parent.parent / "templates"

router = APIRouter(tags=["pages"])
templates = Jinja2Templates(directory=str(TEMPLATES_DIR))


@router.get("/", response_class=HTMLResponse, include_in_schema=False)
async def home(request: Request, config: GeneratorConfig = Depends(get_config)) -> HTMLResponse:
    return templates.TemplateResponse(
        request,
        "home.html",
        {
            "active": "home",
            "support_url": config.support_url,
            "copy_ack_ms": int(config.copy_ack_seconds * 1000),
        },
    )


@router.get("/about", response_class=HTMLResponse, include_in_schema=False)
async def about(request: Request) -> HTMLResponse:
    return templates.TemplateResponse(request, "about.html", {"active": "about"})
