#!/usr/bin/env python3
"""Start the Patio Configurator API server."""

import uvicorn

from patiokit.settings import Settings, configure_logging

if __name__ == "__main__":
    settings = Settings()
    configure_logging(settings.log_level)
    uvicorn.run(
        "patiokit.api.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.reload,
        reload_dirs=["patiokit"],
        log_level=settings.log_level.lower(),
    )
