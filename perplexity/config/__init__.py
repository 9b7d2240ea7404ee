from perplexity.config.schema import ClientOptions, LoggingConfig, PerplexityConfig

__all__ = ["ClientOptions", "LoggingConfig", "PerplexityConfig"]
