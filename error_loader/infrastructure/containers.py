"""
Dependency Injection container for the error_loader component.

This container uses the `dependency-injector` library to wire together the
service and its infrastructure adapters from the Dynaconf settings.
"""

from dependency_injector import containers, providers
import httpx

from ..application.domain import FaultLocator, FaultSource, ReportDecoder
from ..application.service import ErrorLoaderService
from ..settings import settings

from .api_models import ReportedError
from .config_provider import DynaconfSettingsProvider, proxy_url
from .fetcher import HttpFaultFetcher
from .locator import HttpFaultLocator
from .reconciler import FaultSchemaReconciler
from .server_details import ServerContextCollector


class Container(containers.DeclarativeContainer):
    """DI container for wiring the application components."""

    cli_args = providers.Configuration()

    config = providers.Object(settings)

    settings_provider = providers.Singleton(
        DynaconfSettingsProvider,
        settings=config,
    )

    http_proxy = providers.Callable(proxy_url, settings_provider)

    http_client = providers.Singleton(
        httpx.AsyncClient,
        follow_redirects=False,
        trust_env=False,
        proxy=http_proxy,
        timeout=config().error_loader.timeout,
    )

    locator: providers.Factory[FaultLocator] = providers.Factory(
        HttpFaultLocator,
        client=http_client,
        lookup_base_url=config().error_loader.lookup_base_url,
        timeout=config().error_loader.timeout,
    )

    source: providers.Factory[FaultSource] = providers.Factory(
        HttpFaultFetcher,
        client=http_client,
        settings=settings_provider,
        base_url=config().honeybadger.url,
        timeout=config().error_loader.timeout,
    )

    decoder: providers.Factory[ReportDecoder[ReportedError]] = providers.Factory(
        FaultSchemaReconciler,
    )

    error_loader_service = providers.Factory(
        ErrorLoaderService,
        locator=locator,
        source=source,
        decoder=decoder,
    )

    server_context = providers.Factory(
        ServerContextCollector,
        settings=settings_provider,
        environment_name=cli_args.environment,
    )
