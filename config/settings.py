import os
from typing import Literal
from dotenv import load_dotenv
from pydantic import BaseModel, Field

load_dotenv()


class FormSettings(BaseModel):
    profile: Literal["strict", "lenient"] = "strict"
    submit_delay_seconds: float = Field(default=1.5, ge=0)
    redact_password: bool = True

    @classmethod
    def from_env(cls) -> "FormSettings":
        # pydantic coerces the raw strings ("1.5", "false", ...)
        return cls(
            profile=os.getenv("REGISTRATION_PROFILE", "strict").strip().lower(),
            submit_delay_seconds=os.getenv("SUBMIT_DELAY_SECONDS", "1.5"),
            redact_password=os.getenv("REDACT_PASSWORD", "true"),
        )
