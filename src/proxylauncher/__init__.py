"""ProxyLauncher - Start a configured executable with extra arguments"""

__version__ = "1.0.0"
__description__ = "Start a configured executable with extra arguments"

__all__ = ["parse_config", "plan_launch", "tokenize", "__version__"]


def __getattr__(name: str):
    """Lazy import so ``import proxylauncher`` does not load .env files.

    The runtime settings module calls load_dotenv() on import; the pure core
    (tokenizer, parser, planner) has no need for it. The entry point lives in
    ``proxylauncher.main``.
    """
    if name == "parse_config":
        from .core.config_parser import parse_config

        return parse_config
    if name == "plan_launch":
        from .core.planner import plan_launch

        return plan_launch
    if name == "tokenize":
        from .core.tokenizer import tokenize

        return tokenize
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
