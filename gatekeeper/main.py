"""ASGI entrypoint: loads .env, then builds the app from process settings."""

from dotenv import load_dotenv

load_dotenv()

from gatekeeper.app import create_app
from gatekeeper.core.config import get_settings

app = create_app(get_settings())
