# Copyright (c) Microsoft Corporation.
# Licensed under the MIT License.

"""
Process entry point: ``simplelog-api``.
"""

import os
import sys

import uvicorn

from src.core.observability import BootstrapLogger


def main() -> int:
    """Run the API under uvicorn with bootstrap logging around it.

    :returns: Process exit code.
    :rtype: int
    """
    BootstrapLogger.initialize(service_name=os.environ.get("SERVICE_NAME"))
    try:
        BootstrapLogger.information("Starting SimpleLog API")
        uvicorn.run(
            "src.api.app:app",
            host=os.environ.get("HOST", "0.0.0.0"),
            port=int(os.environ.get("PORT", "8000")),
            log_config=None,
        )
        return 0
    except Exception as e:
        BootstrapLogger.fatal(e, "Application terminated unexpectedly")
        return 1
    finally:
        BootstrapLogger.close_and_flush()


if __name__ == "__main__":
    sys.exit(main())
