"""Provider selection and catalog fetch helpers."""

from brew_buddy.config import CatalogConfig
from brew_buddy.providers.base import BeverageSource
from brew_buddy.schema import Beverage
from brew_buddy.store import CatalogStore


def _build_http_source(base_url: str | None, timeout: float) -> BeverageSource:
    from brew_buddy.providers.http import HttpCatalogClient

    return HttpCatalogClient(base_url=base_url, timeout=timeout)


def _build_sample_source() -> BeverageSource:
    from brew_buddy.providers.sample import SampleCatalog

    return SampleCatalog()


def select_source(
    source: str | None = None,
    *,
    base_url: str | None = None,
    config: CatalogConfig | None = None,
) -> BeverageSource:
    """Build the data source named by ``source``.

    Args:
        source: Source name (`http` or `sample`). Defaults to
            `BREW_BUDDY_SOURCE` env var, then `http`.
        base_url: API base address for the HTTP source. Defaults to the config.
        config: Settings to use. Defaults to :meth:`CatalogConfig.from_env`.

    Raises:
        ValueError: If the source name is not supported.
    """
    config = config or CatalogConfig.from_env()
    source_name = (source or config.source).strip().lower()
    if source_name in {"http", "api"}:
        return _build_http_source(base_url or config.api_base_url, config.request_timeout_sec)
    if source_name in {"sample", "demo"}:
        return _build_sample_source()
    raise ValueError(f"Unsupported source: {source_name}")


async def fetch_catalog(
    source: BeverageSource | str | None = None,
    *,
    base_url: str | None = None,
    config: CatalogConfig | None = None,
) -> list[Beverage]:
    """Fetch the full beverage collection in one request.

    Args:
        source: A data source instance, or a source name for :func:`select_source`.
        base_url: API base address override for the HTTP source.
        config: Settings to use. Defaults to :meth:`CatalogConfig.from_env`.

    Returns:
        The beverages in the order the data source returned them.

    Raises:
        CollectionFetchError: If the data source fails.
    """
    config = config or CatalogConfig.from_env()
    if isinstance(source, BeverageSource):
        return list(await CatalogStore().refresh(source, size=config.page_size))

    engine = select_source(source, base_url=base_url, config=config)
    try:
        return list(await CatalogStore().refresh(engine, size=config.page_size))
    finally:
        await engine.aclose()
