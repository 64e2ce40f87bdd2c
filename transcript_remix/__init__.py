import logging

from flask import Flask

from . import cli, routes
from .captions import YouTubeCaptionProvider
from .config import Config
from .generation import AnthropicProvider, GenerationService

__version__ = "0.1.0"


class Services:
    """Per-app providers, built on first use unless injected up front."""

    def __init__(self, config, caption_provider=None, generation_provider=None):
        self.config = config
        self._caption_provider = caption_provider
        self._generation_provider = generation_provider
        self._generation = None

    @property
    def caption_provider(self):
        if self._caption_provider is None:
            self._caption_provider = YouTubeCaptionProvider(
                self.config["CAPTION_LANGUAGES"],
                proxy_user=self.config.get("PROXY_USER"),
                proxy_pass=self.config.get("PROXY_PASS"),
            )
        return self._caption_provider

    @property
    def generation_provider(self):
        if self._generation_provider is None:
            self._generation_provider = AnthropicProvider(self.config["ANTHROPIC_API_KEY"])
        return self._generation_provider

    @property
    def generation(self):
        if self._generation is None:
            self._generation = GenerationService(
                self.generation_provider, self.config["GENERATION_MODEL"]
            )
        return self._generation


def create_app(config=None, caption_provider=None, generation_provider=None):
    app = Flask(__name__)
    app.config.from_object(Config)
    if config is not None:
        app.config.from_mapping(config)

    logging.basicConfig(
        level=app.config["LOG_LEVEL"],
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    app.extensions["transcript_remix"] = Services(
        app.config, caption_provider, generation_provider
    )

    app.register_blueprint(routes.bp)
    cli.register(app)

    return app
