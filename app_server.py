from typing import Optional

from fastapi import FastAPI
from fastapi.responses import HTMLResponse

from survey.config import debug, settings
from survey.router import router as survey_router
from survey.session import SurveySession

debug(f"[Startup] {settings.app_title}: api_prefix={settings.api_prefix}")
debug("[Startup] Responses are kept in memory only and are lost on restart.")

# ---------------------------------------------------------------------
# Swagger / OpenAPI metadata
# ---------------------------------------------------------------------
tags_metadata = [
    {"name": "root", "description": "Landing page and basic service info."},
    {"name": "survey", "description": "Survey form, validation, submission and results."},
]


def create_app(session: Optional[SurveySession] = None) -> FastAPI:
    app = FastAPI(
        title=settings.app_title,
        description=(
            "Collects survey responses through a form, keeps them in memory for the "
            "lifetime of the process and reports aggregate statistics.\n\n"
            "Swagger UI: /docs\n"
            "ReDoc: /redoc"
        ),
        version="1.0.0",
        openapi_tags=tags_metadata,
    )

    # one session per process, shared by every request
    app.state.survey_session = session if session is not None else SurveySession()

    @app.get("/", response_class=HTMLResponse, tags=["root"], summary="Landing page")
    async def landing():
        return f"""
        <!DOCTYPE html>
        <html lang="en">
        <head>
          <meta charset="UTF-8">
          <meta name="viewport" content="width=device-width, initial-scale=1.0">
          <title>{settings.app_title}</title>
          <style>
            body {{
              margin: 0;
              font-family: -apple-system, BlinkMacSystemFont, "Segoe UI", Roboto, Helvetica, Arial, sans-serif;
              background: #f5f7fa;
              color: #333;
            }}
            .container {{
              max-width: 800px;
              margin: 4rem auto;
              background: #ffffff;
              padding: 2.5rem;
              border-radius: 8px;
              box-shadow: 0 4px 12px rgba(0,0,0,0.05);
            }}
          </style>
        </head>
        <body>
          <div class="container">
            <h1>{settings.app_title}</h1>
            <p>
              Fill in the survey through <code>{settings.api_prefix}/draft/events</code>
              or post a complete response to <code>{settings.api_prefix}/submit</code>.
              Aggregate figures are served from <code>{settings.api_prefix}/results</code>.
            </p>
          </div>
        </body>
        </html>
        """

    app.include_router(survey_router, prefix=settings.api_prefix, tags=["survey"])
    return app


app = create_app()
