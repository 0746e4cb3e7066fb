"""Package entry point - composition root. Wire dependencies and run the CLI app."""

from pattern_catalog.infrastructure.di.container import CatalogContainer
from pattern_catalog.infrastructure.logging_config import LoggingConfigurator
from pattern_catalog.interface.cli import CLIAppFactory, CLIDependencies


def main() -> None:
    """Entry point: wire dependencies at composition root, create app, run."""
    container = CatalogContainer()
    config_loader = container.get_config_loader()

    def configure_logging(verbose: bool) -> None:
        LoggingConfigurator.configure(config_loader.log_level, verbose=verbose)
        container.log_config_warnings()

    deps = CLIDependencies(
        config_loader=config_loader,
        telemetry=container.get_telemetry_port(),
        catalog=container.get_catalog(),
        glossary_service=container.get_glossary_service(),
        trace_archive=container.get_trace_archive(),
        reporter=container.get_reporter(),
        configure_logging=configure_logging,
    )

    app = CLIAppFactory.create_app(deps)
    app()


if __name__ == "__main__":
    main()
