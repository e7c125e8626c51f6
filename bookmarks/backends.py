from typing import Optional

from .model_factory import BookmarksModelFactory
from .rest import Account, BookmarksRESTModelFactory
from .stub_factory import StubBookmarksModelFactory
from utils.config import BACKEND_REST, BACKEND_STUB, BookmarksConfig
from utils.utils import logger


def create_model_factory(config: Optional[BookmarksConfig] = None,
                         account: Optional[Account] = None) -> BookmarksModelFactory:
    """
    Build the factory for the configured backend. A REST account is
    created from the config unless one is passed in.
    """
    config = config or BookmarksConfig()

    if config.backend == BACKEND_STUB:
        logger.info(f"Using stub backend (strict={config.strict_folder_lookup})", component="Backends")
        return StubBookmarksModelFactory(strict=config.strict_folder_lookup)

    if config.backend == BACKEND_REST:
        if account is None:
            if not config.base_url:
                raise ValueError("The rest backend requires base_url")
            account = Account(config.base_url, config.username or "", config.password or "",
                              timeout=config.request_timeout)
        logger.info(f"Using rest backend at {account.base_url}", component="Backends")
        return BookmarksRESTModelFactory(account, resource=config.recent_resource,
                                         fallback_to_empty_root=config.fallback_to_empty_root)

    raise ValueError(f"Unsupported backend: {config.backend}")
