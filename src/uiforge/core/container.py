"""Dependency Injection Container."""

from injector import Injector, Module, provider, singleton

from .config import Settings, get_settings
from ..agents.generator import Generator
from ..agents.planner import Planner
from ..handlers.generate import GenerateHandler
from ..handlers.versions import VersionStore


class CoreModule(Module):
    """Core dependencies."""

    def __init__(self, settings: Settings) -> None:
        self.settings = settings

    @singleton
    @provider
    def provide_planner(self) -> Planner:
        """Provide planner bounded by the configured input length."""
        return Planner(max_input_length=self.settings.max_input_length)

    @singleton
    @provider
    def provide_generator(self) -> Generator:
        """Provide tree generator."""
        return Generator()

    @singleton
    @provider
    def provide_version_store(self) -> VersionStore:
        """Provide the shared version history."""
        return VersionStore()

    @singleton
    @provider
    def provide_generate_handler(
        self, planner: Planner, generator: Generator, store: VersionStore
    ) -> GenerateHandler:
        """Provide the generation pipeline handler."""
        return GenerateHandler(
            planner=planner,
            generator=generator,
            store=store,
            max_input_length=self.settings.max_input_length,
        )


def create_container(settings: Settings | None = None) -> Injector:
    """Create configured injector."""
    return Injector([CoreModule(settings or get_settings())])
