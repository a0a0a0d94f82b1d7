"""Main entry point for HydroWatch."""

import sys
from loguru import logger

from hydrowatch.utils.config import settings


def main():
    """Run the application."""
    if len(sys.argv) < 2:
        print("Usage: python main.py [api|ui]")
        sys.exit(1)

    cmd = sys.argv[1]

    if cmd == "api":
        import uvicorn
        logger.info("Starting API server...")
        uvicorn.run(
            "hydrowatch.api.main:app",
            host=settings.api.host,
            port=settings.api.port,
            reload=settings.api.reload,
        )

    elif cmd == "ui":
        import subprocess
        logger.info("Starting Streamlit UI...")
        subprocess.run(["streamlit", "run", "hydrowatch/ui/app.py", "--server.port", str(settings.ui.port)])

    else:
        print(f"Unknown command: {cmd}")
        sys.exit(1)


if __name__ == "__main__":
    main()
