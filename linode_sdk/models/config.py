"""Client configuration model."""

from pydantic import BaseModel, Field

DEFAULT_API_URL = "https://api.linode.com/"
DEFAULT_TIMEOUT = 30.0


class LinodeConfig(BaseModel):
    """Immutable client configuration.

    Fields:
        api_key: Static API key sent with every request (required, non-empty)
        api_url: Base URL of the API endpoint
        timeout: Transport timeout in seconds
        debug: Write request/response debug lines to stderr
    """

    api_key: str = Field(min_length=1)
    api_url: str = Field(default=DEFAULT_API_URL, min_length=1)
    timeout: float = Field(default=DEFAULT_TIMEOUT, gt=0)
    debug: bool = False

    model_config = {"frozen": True}
