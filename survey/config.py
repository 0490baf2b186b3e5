# survey/config.py
from __future__ import annotations

import os

from dotenv import load_dotenv
from pydantic import BaseModel, Field

# ---------------------------------------------------------------------
# Load .env, then read settings from the environment
# ---------------------------------------------------------------------
load_dotenv()


class Settings(BaseModel):
    app_title: str = Field("Survey Collector", alias="SURVEY_APP_TITLE")
    api_prefix: str = Field("/survey", alias="SURVEY_API_PREFIX")
    debug: bool = Field(True, alias="SURVEY_DEBUG")


settings = Settings.model_validate(dict(os.environ))


def debug(msg: str) -> None:
    if settings.debug:
        print(msg, flush=True)
