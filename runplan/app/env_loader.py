"""Load environment variables before the app is configured.

Locally (ENV="dev") a .env.dev file is loaded. In staging and prod the
variables are injected by the deployment, so no file is read.
"""

import os
import sys
from typing import Literal
from dotenv import load_dotenv

EnvironmentName = Literal["dev", "staging", "prod"]

REQUIRED_ENV_VARS = [
    "DATABASE_URL",
]


def validate_required_env_vars() -> None:
    """Exit with a readable message if any required variable is missing."""
    missing = [var for var in REQUIRED_ENV_VARS if not os.getenv(var)]
    if missing:
        print(
            f"ERROR: Missing required environment variables: {', '.join(missing)}",
            file=sys.stderr,
        )
        print(
            "Set them in .env.dev or in the deployment environment.",
            file=sys.stderr,
        )
        sys.exit(1)


env = os.getenv("ENV", "dev")
if env in ("staging", "prod"):
    print(f"Running in {env} environment (env vars from deployment)")
elif env == "dev":
    print("Loading environment variables from .env.dev")
    load_dotenv(".env.dev", verbose=True)
else:
    raise ValueError(f"Invalid ENV value: {env}. Must be 'dev', 'staging', or 'prod'.")

validate_required_env_vars()


def get_current_environment() -> EnvironmentName:
    env = os.getenv("ENV", "dev")
    if env in ("dev", "staging", "prod"):
        return env  # type: ignore[return-value]
    raise ValueError(f"Invalid ENV value: {env}. Must be 'dev', 'staging', or 'prod'.")
