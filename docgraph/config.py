from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Process configuration.

    Environment variables use the ``DOCGRAPH_`` prefix, e.g.
    ``DOCGRAPH_MANIFEST`` and ``DOCGRAPH_SITE_URL``.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="DOCGRAPH_",
        extra="ignore",
    )

    # JSON page manifest loaded into the repository at start-up
    manifest: str = "content/index.json"
    # Absolute site origin used for sitemap and feed URLs
    site_url: str = "http://localhost:8000"
